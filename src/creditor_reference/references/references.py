"""ISO 11649 structured creditor references (RF references).

A vendor prints a creditor reference on its invoices; the payer copies it
into the remittance information and the vendor's accounts receivable system
matches incoming payments to invoices with it. The reference is self
checking: two check digits computed with ISO 7064 MOD 97-10 follow the "RF"
identifier.

The electronic form has no spaces ("RF18539007547034"), the printable form
groups the characters in blocks of four ("RF18 5390 0754 7034").
"""

import dataclasses
import logging
import string
from typing import List, Tuple

from .errors import (
    InvalidCharacter,
    InvalidChecksum,
    InvalidFormat,
    InvalidIdentifier,
    ParseError,
)


logger = logging.getLogger(__name__)

IDENTIFIER: str = "RF"
# Identifier with placeholder check digits, used for checksum calculation
GEN_PREFIX: str = "RF00"

MIN_LENGTH: int = 5
MAX_LENGTH: int = 25
MAX_BODY_LENGTH: int = MAX_LENGTH - len(GEN_PREFIX)
GROUP_SIZE: int = 4

BODY_CHARACTERS = frozenset(string.ascii_letters + string.digits)


def compact(reference: str) -> str:
    """Converts a reference to its electronic form by removing all spaces.

    Letter case is preserved; the checksum does not depend on it.

    Args:
        reference: A reference in printable or electronic form.

    Returns:
        The reference without any space characters.
    """
    return reference.replace(" ", "")


def cleanup_reference(text: str) -> str:
    """Converts text to uppercase and removes all non-alphanumeric characters.

    Used to turn free text such as an invoice number ("INV-2024/0042") into a
    body that can be used for generation.

    Args:
        text: The input string to clean up.

    Returns:
        A new string containing only uppercase ASCII letters and digits from
        the original input.
    """
    return "".join(char for char in text.upper() if char in BODY_CHARACTERS)


def check_reference(reference: str) -> None:
    """First basic validation of a reference.

    The checks run in order and the first failure wins: overall length,
    identifier, then the character set of the body. The check digits are
    validated when they are parsed.

    Args:
        reference: The reference to check, in printable or electronic form.

    Raises:
        InvalidFormat: If the electronic form is not 5 to 25 characters long.
        InvalidIdentifier: If the reference does not start with "RF".
        InvalidCharacter: If the body contains anything but 0-9, a-z, A-Z.
    """
    reference = compact(reference)
    if not MIN_LENGTH <= len(reference) <= MAX_LENGTH:
        logger.debug(f"Creditor reference {reference!r} has invalid length")
        raise InvalidFormat(reference)
    if reference[:2] != IDENTIFIER:
        logger.debug(f"Creditor reference {reference!r} does not start with RF")
        raise InvalidIdentifier(reference)
    if any(char not in BODY_CHARACTERS for char in reference[4:]):
        logger.debug(f"Creditor reference {reference!r} has invalid characters")
        raise InvalidCharacter(reference)


def _char_to_digits(char: str) -> List[int]:
    if "0" <= char <= "9":
        return [ord(char) - ord("0")]
    if "A" <= char <= "Z":
        value = ord(char) - ord("A") + 10
    elif "a" <= char <= "z":
        value = ord(char) - ord("a") + 10
    else:
        raise ValueError(char)
    # Letters count as two digits: A -> 10 -> 1, 0
    return [value // 10, value % 10]


def gen_check_digits(electronic_reference: str) -> List[int]:
    """Converts an electronic reference to the digits used for the checksum.

    The body is read first and the identifier with its check digits last, as
    ISO 7064 requires. Digits are kept as they are; letters are replaced by
    their value (A=10 ... Z=35, case insensitive) and both digits of that
    value are emitted.

    Args:
        electronic_reference: A reference without spaces, at least five
            characters long.

    Returns:
        The flat list of decimal digits, e.g. [1, 0, 1, 1, 2, 7, 1, 5, 1, 8]
        for "RF18AB".

    Raises:
        InvalidCharacter: If any character is not an ASCII letter or digit.
    """
    rotated = electronic_reference[4:] + electronic_reference[:4]
    check_digits: List[int] = []
    for char in rotated:
        try:
            check_digits.extend(_char_to_digits(char))
        except ValueError as e:
            logger.debug(
                f"Cannot map {char!r} in creditor reference {electronic_reference!r}"
            )
            raise InvalidCharacter(electronic_reference) from e
    return check_digits


def _as_number(check_digits: List[int]) -> int:
    # Python integers are unbounded, a 25 character reference can reach 48 digits
    return sum(
        digit * 10**position for position, digit in enumerate(reversed(check_digits))
    )


def gen_checksum(check_digits: List[int]) -> Tuple[int, str]:
    """Calculates the check digits for digits built with the "00" placeholder.

    Args:
        check_digits: Output of `gen_check_digits` for a reference that
            carries "00" as check digits.

    Returns:
        A tuple with the checksum as int and as two zero padded characters.
    """
    checksum = 98 - _as_number(check_digits) % 97
    return checksum, f"{checksum:02d}"


def is_valid_digits(check_digits: List[int]) -> bool:
    """Returns True if the digits of a complete reference pass MOD 97-10."""
    return _as_number(check_digits) % 97 == 1


def assemble(electronic_reference: str) -> str:
    """Builds the printable form of a validated electronic reference.

    The identifier and check digits form the first group, the body is then
    split in groups of four characters; the last group may be shorter.
    """
    body = electronic_reference[4:]
    groups = [
        body[start : start + GROUP_SIZE] for start in range(0, len(body), GROUP_SIZE)
    ]
    return f"{electronic_reference[:4]} {' '.join(groups)}"


@dataclasses.dataclass(frozen=True)
class RfCreditorReference:
    """A validated ISO 11649 creditor reference.

    Instances are only created by parsing or generating, and never change
    afterwards.

    Examples:
        >>> rf = RfCreditorReference.try_new("539007547034")
        >>> rf.to_electronic()
        'RF18539007547034'
        >>> str(rf)
        'RF18 5390 0754 7034'
        >>> RfCreditorReference.parse_str("RF18539007547034") == rf
        True
    """

    checksum: int
    creditor_reference: str

    @classmethod
    def parse_str(cls, reference: str) -> "RfCreditorReference":
        """Parses an existing reference in printable or electronic form.

        Args:
            reference: The reference to parse. Spaces are ignored.

        Returns:
            The validated reference.

        Raises:
            ParseError: The subclass names the reason the reference is invalid.
        """
        check_reference(reference)
        reference = compact(reference)

        checksum_chars = reference[2:4]
        if not all("0" <= char <= "9" for char in checksum_chars):
            logger.debug(f"Malformed check digits in creditor reference {reference!r}")
            raise InvalidChecksum(reference)
        checksum = int(checksum_chars)

        if not is_valid_digits(gen_check_digits(reference)):
            logger.debug(f"Checksum mismatch for creditor reference {reference}")
            raise InvalidChecksum(reference)

        return cls(checksum=checksum, creditor_reference=assemble(reference))

    @classmethod
    def from_str(cls, reference: str) -> "RfCreditorReference":
        """Alias of `parse_str`."""
        return cls.parse_str(reference)

    @classmethod
    def try_new(cls, reference: str) -> "RfCreditorReference":
        """Generates a reference for the given body.

        The body may be given bare ("539007547034"), with the identifier only
        ("RF539007547034") or with placeholder check digits
        ("RF00539007547034"); spaces are ignored.

        Args:
            reference: The body to protect with check digits.

        Returns:
            The generated and re-validated reference.

        Raises:
            ParseError: If the body is empty, too long, or contains characters
                other than 0-9, a-z and A-Z.
        """
        electronic_reference = compact(reference)
        has_prefix = len(electronic_reference) > len(GEN_PREFIX) and (
            electronic_reference.startswith(GEN_PREFIX)
        )
        has_identifier = len(electronic_reference) > len(IDENTIFIER) and (
            electronic_reference.startswith(IDENTIFIER)
        )
        if not has_prefix:
            if has_identifier:
                electronic_reference = electronic_reference[len(IDENTIFIER) :]
            electronic_reference = GEN_PREFIX + electronic_reference
        return cls._generate(electronic_reference)

    @classmethod
    def new(cls, reference: str) -> "RfCreditorReference":
        """Generates a reference for a body the caller knows to be valid.

        Use `try_new` for input that has not been checked already.

        Raises:
            RuntimeError: If the body is invalid. This is a programming error
                at the call site and is not meant to be handled.
        """
        try:
            return cls.try_new(reference)
        except ParseError as e:
            raise RuntimeError(f"invalid creditor reference body: {e}") from e

    @classmethod
    def _generate(cls, electronic_reference: str) -> "RfCreditorReference":
        check_reference(electronic_reference)
        _, checksum_chars = gen_checksum(gen_check_digits(electronic_reference))
        electronic_reference = (
            electronic_reference[:2] + checksum_chars + electronic_reference[4:]
        )
        logger.debug(f"Generated creditor reference {electronic_reference}")
        # Parsing the result guarantees generate and parse never disagree
        return cls.parse_str(electronic_reference)

    @property
    def checksum_digits(self) -> str:
        """The two check digits, zero padded."""
        return f"{self.checksum:02d}"

    def to_printable(self) -> str:
        """Returns the reference grouped in blocks of four characters."""
        return self.creditor_reference

    def to_electronic(self) -> str:
        """Returns the reference without spaces."""
        return compact(self.creditor_reference)

    def to_electronic_string(self) -> str:
        """Alias of `to_electronic`."""
        return self.to_electronic()

    def __str__(self) -> str:
        return self.creditor_reference


def parse(reference: str) -> RfCreditorReference:
    """Parses a reference; see `RfCreditorReference.parse_str`."""
    return RfCreditorReference.parse_str(reference)


def generate(body: str) -> RfCreditorReference:
    """Generates a reference; see `RfCreditorReference.try_new`."""
    return RfCreditorReference.try_new(body)


def generate_or_abort(body: str) -> RfCreditorReference:
    """Generates a reference; see `RfCreditorReference.new`."""
    return RfCreditorReference.new(body)


def generate_from_text(text: str) -> RfCreditorReference:
    """Generates a reference from arbitrary free text such as an invoice number.

    The text is upper-cased, stripped of everything but letters and digits
    and truncated to the longest body a reference can carry. Unlike
    `generate`, a leading "RF" in the text is kept as part of the body.

    Args:
        text: Free text, e.g. "Invoice 2024/0042".

    Returns:
        The generated reference.

    Raises:
        InvalidFormat: If no letters or digits remain after cleaning.
    """
    body = cleanup_reference(text)[:MAX_BODY_LENGTH]
    if not body:
        raise InvalidFormat(text)
    return RfCreditorReference._generate(GEN_PREFIX + body)


def calc_check_digits(body: str) -> str:
    """Calculates the two check digits for a body.

    Args:
        body: The reference body without identifier and check digits.

    Returns:
        The check digits as two characters, e.g. "18" for "539007547034".

    Raises:
        ParseError: If the body cannot be part of a reference.
    """
    electronic_reference = GEN_PREFIX + compact(body)
    check_reference(electronic_reference)
    return gen_checksum(gen_check_digits(electronic_reference))[1]


def validate(reference: str) -> str:
    """Checks a reference and returns its electronic form.

    Raises:
        ParseError: If the reference is invalid.
    """
    return parse(reference).to_electronic()


def is_valid(reference: str) -> bool:
    """Checks whether a reference is valid, without raising."""
    try:
        parse(reference)
    except ParseError:
        return False
    return True


def format(reference: str) -> str:
    """Returns the printable form of a valid reference.

    Raises:
        ParseError: If the reference is invalid.
    """
    return parse(reference).to_printable()
