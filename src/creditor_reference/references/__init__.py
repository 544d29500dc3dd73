from .errors import (
    InvalidCharacter,
    InvalidChecksum,
    InvalidFormat,
    InvalidIdentifier,
    ParseError,
)
from .references import (
    GEN_PREFIX,
    IDENTIFIER,
    MAX_BODY_LENGTH,
    MAX_LENGTH,
    MIN_LENGTH,
    RfCreditorReference,
    calc_check_digits,
    cleanup_reference,
    compact,
    format,
    generate,
    generate_from_text,
    generate_or_abort,
    is_valid,
    parse,
    validate,
)

__all__ = [
    "GEN_PREFIX",
    "IDENTIFIER",
    "MAX_BODY_LENGTH",
    "MAX_LENGTH",
    "MIN_LENGTH",
    "InvalidCharacter",
    "InvalidChecksum",
    "InvalidFormat",
    "InvalidIdentifier",
    "ParseError",
    "RfCreditorReference",
    "calc_check_digits",
    "cleanup_reference",
    "compact",
    "format",
    "generate",
    "generate_from_text",
    "generate_or_abort",
    "is_valid",
    "parse",
    "validate",
]
