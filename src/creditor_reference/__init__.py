"""Generate and validate ISO 11649 structured creditor references."""

from .references import (
    ParseError,
    RfCreditorReference,
    generate,
    is_valid,
    parse,
)

__all__ = ["ParseError", "RfCreditorReference", "generate", "is_valid", "parse"]
