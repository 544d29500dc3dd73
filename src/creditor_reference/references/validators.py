from django.core.exceptions import ValidationError

from .errors import ParseError
from .references import RfCreditorReference, parse


def parse_or_raise(value: str) -> RfCreditorReference:
    """Parses a creditor reference, translating failures for Django.

    Args:
        value: The reference in printable or electronic form.

    Returns:
        The parsed reference.

    Raises:
        ValidationError: If the reference is invalid. The message names the
            reason, the code is always "invalid_creditor_reference".
    """
    try:
        return parse(value)
    except ParseError as e:
        raise ValidationError(
            f"Invalid creditor reference: {e.message}",
            code="invalid_creditor_reference",
        ) from e


def validate_creditor_reference(value: str) -> None:
    """Django validator accepting any valid ISO 11649 creditor reference."""
    parse_or_raise(value)
