from typing import Any, Dict, Optional

from django.db import models

from .conf import to_storage
from .errors import ParseError
from .forms import CreditorReferenceFormField
from .references import parse
from .validators import validate_creditor_reference


# "RF" + check digits, a space, 21 body characters in six groups
PRINTABLE_MAX_LENGTH: int = 31


class CreditorReferenceField(models.CharField):
    """Stores a validated ISO 11649 creditor reference.

    Values are normalized to the form configured by the
    `CREDITOR_REFERENCE_STORAGE_FORMAT` setting (electronic by default), both
    when the model is cleaned and when a value is saved or looked up, so
    lookups match with either form.
    """

    description = "ISO 11649 creditor reference"
    default_validators = [validate_creditor_reference]

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["max_length"] = PRINTABLE_MAX_LENGTH
        super().__init__(*args, **kwargs)

    def deconstruct(self):
        name, path, args, kwargs = super().deconstruct()
        del kwargs["max_length"]
        return name, path, args, kwargs

    def to_python(self, value: Any) -> Optional[str]:
        value = super().to_python(value)
        if value in self.empty_values:
            return value
        try:
            return to_storage(parse(value))
        except ParseError:
            # Reported by validate_creditor_reference when the model is cleaned
            return value

    def formfield(self, **kwargs: Any):
        defaults: Dict[str, Any] = {"form_class": CreditorReferenceFormField}
        defaults.update(kwargs)
        return super().formfield(**defaults)
