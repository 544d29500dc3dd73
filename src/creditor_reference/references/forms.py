from typing import Any

from django import forms

from .conf import to_storage
from .validators import parse_or_raise


class CreditorReferenceFormField(forms.CharField):
    """Form field accepting a creditor reference in printable or electronic form.

    The cleaned value is the reference in the configured storage format.
    """

    def to_python(self, value: Any) -> str:
        value = super().to_python(value)
        if value in self.empty_values:
            return value
        return to_storage(parse_or_raise(value))
