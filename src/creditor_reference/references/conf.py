from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from .references import RfCreditorReference


ELECTRONIC = "electronic"
PRINTABLE = "printable"
STORAGE_FORMATS = (ELECTRONIC, PRINTABLE)


def get_storage_format() -> str:
    """Returns the form in which creditor references are stored and rendered.

    Read from the `CREDITOR_REFERENCE_STORAGE_FORMAT` setting, which defaults
    to the electronic form.

    Raises:
        ImproperlyConfigured: If the setting holds an unknown format.
    """
    storage_format = getattr(settings, "CREDITOR_REFERENCE_STORAGE_FORMAT", ELECTRONIC)
    if storage_format not in STORAGE_FORMATS:
        raise ImproperlyConfigured(
            "CREDITOR_REFERENCE_STORAGE_FORMAT must be one of"
            f" {', '.join(STORAGE_FORMATS)}, not {storage_format!r}"
        )
    return storage_format


def to_storage(reference: RfCreditorReference) -> str:
    """Renders a parsed reference in the configured storage format."""
    if get_storage_format() == PRINTABLE:
        return reference.to_printable()
    return reference.to_electronic()
