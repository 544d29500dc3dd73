import pandas as pd
import pytest

from creditor_reference.references.frames import COLUMNS, generate_series, parse_series


@pytest.fixture
def references():
    return pd.Series(
        ["RF18 5390 0754 7034", "RF18539007547034@", None, "RF19539007547034"],
        index=["ok", "character", "missing", "checksum"],
    )


def test_parse_series(references):
    df = parse_series(references)

    assert list(df.columns) == COLUMNS
    assert list(df.index) == list(references.index)
    assert df["valid"].tolist() == [True, False, False, False]

    assert df.loc["ok", "electronic"] == "RF18539007547034"
    assert df.loc["ok", "printable"] == "RF18 5390 0754 7034"
    assert df.loc["ok", "checksum"] == 18
    assert pd.isna(df.loc["ok", "error"])

    assert df.loc["character", "error"] == "InvalidCharacter"
    assert df.loc["character", "message"] == (
        "invalid character not parseable [RF18539007547034@]"
    )
    assert pd.isna(df.loc["character", "checksum"])
    assert df.loc["missing", "error"] == "InvalidFormat"
    assert df.loc["checksum", "error"] == "InvalidChecksum"


def test_parse_series_checksum_is_nullable_integer(references):
    assert str(parse_series(references)["checksum"].dtype) == "Int64"


def test_generate_series():
    df = generate_series(pd.Series(["539007547034", 2348231, "5390@"]))

    assert df["electronic"].tolist()[:2] == ["RF18539007547034", "RF712348231"]
    assert df["checksum"].tolist()[:2] == [18, 71]
    assert df.loc[2, "error"] == "InvalidCharacter"
    assert df.loc[1, "reference"] == 2348231


def test_empty_series():
    df = parse_series(pd.Series([], dtype=object))
    assert df.empty
    assert list(df.columns) == COLUMNS
