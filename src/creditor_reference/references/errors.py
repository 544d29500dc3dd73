import stdnum.exceptions


class ParseError(stdnum.exceptions.ValidationError):
    """Base class for every reason parsing or generating a creditor reference fails.

    Derives from python-stdnum's `ValidationError` (and therefore from
    `ValueError`), so code that already handles stdnum validation errors
    handles creditor reference errors as well.

    Attributes:
        reference: The offending (normalized) input string.
        message: A short human readable description of the failure.
    """

    message: str = "creditor reference not parseable"

    def __init__(self, reference: str) -> None:
        self.reference = reference
        super().__init__(f"{self.message} [{reference}]")


class InvalidCharacter(ParseError, stdnum.exceptions.InvalidFormat):
    """A character outside 0-9, a-z and A-Z appears in the reference."""

    message = "invalid character not parseable"


class InvalidChecksum(ParseError, stdnum.exceptions.InvalidChecksum):
    """The checksum digits are malformed or the mod 97 check fails."""

    message = "checksum has invalid format"


class InvalidFormat(ParseError, stdnum.exceptions.InvalidLength):
    """The reference is too short or too long."""

    message = "invalid format not parseable"


class InvalidIdentifier(ParseError, stdnum.exceptions.InvalidComponent):
    """The reference does not start with the RF identifier."""

    message = "identifier is not RF"
