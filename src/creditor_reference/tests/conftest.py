import pytest
from click.testing import CliRunner


@pytest.fixture(scope="session")
def electronic_reference():
    """A valid reference in electronic form."""
    return "RF18539007547034"


@pytest.fixture(scope="session")
def printable_reference():
    """The same reference in printable form."""
    return "RF18 5390 0754 7034"


@pytest.fixture
def printable_storage(settings):
    """Configures Django integrations to store the printable form."""
    settings.CREDITOR_REFERENCE_STORAGE_FORMAT = "printable"
    return settings


@pytest.fixture
def runner():
    return CliRunner()
