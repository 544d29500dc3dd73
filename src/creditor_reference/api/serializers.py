import logging
from typing import Any

from rest_framework import serializers

from creditor_reference.references.conf import to_storage
from creditor_reference.references.errors import ParseError
from creditor_reference.references.references import generate, parse

logger = logging.getLogger(__name__)


class CreditorReferenceSerializerField(serializers.CharField):
    """Serializer field for ISO 11649 creditor references.

    Incoming values are parsed (or, with `generate=True`, treated as a body
    and protected with freshly generated check digits) and returned in the
    configured storage format. Outgoing values are rendered in the same
    format.
    """

    default_error_messages = {
        "invalid": "Invalid creditor reference: {message}",
    }

    def __init__(self, *, generate: bool = False, **kwargs: Any) -> None:
        self.generate = generate
        super().__init__(**kwargs)

    def to_internal_value(self, data: Any) -> str:
        value = super().to_internal_value(data)
        try:
            reference = generate(value) if self.generate else parse(value)
        except ParseError as e:
            self.fail("invalid", message=e.message)
        return to_storage(reference)

    def to_representation(self, value: Any) -> str:
        value = super().to_representation(value)
        try:
            return to_storage(parse(value))
        except ParseError:
            logger.warning(f"Rendering invalid stored creditor reference {value!r}")
            return value
