from typing import Any, Callable, Dict, List

import pandas as pd

from .errors import InvalidFormat, ParseError
from .references import RfCreditorReference, generate, parse


COLUMNS: List[str] = [
    "reference",
    "valid",
    "electronic",
    "printable",
    "checksum",
    "error",
    "message",
]


def _describe(
    value: Any, operation: Callable[[str], RfCreditorReference]
) -> Dict[str, Any]:
    """Runs `operation` on a single value and describes the outcome as a row."""
    row: Dict[str, Any] = {
        "reference": value,
        "valid": False,
        "electronic": None,
        "printable": None,
        "checksum": None,
        "error": None,
        "message": None,
    }
    try:
        if pd.isna(value):
            raise InvalidFormat("")
        reference = operation(str(value))
    except ParseError as e:
        row["error"] = type(e).__name__
        row["message"] = str(e)
        return row

    row["valid"] = True
    row["electronic"] = reference.to_electronic()
    row["printable"] = reference.to_printable()
    row["checksum"] = reference.checksum
    return row


def _frame(
    values: pd.Series, operation: Callable[[str], RfCreditorReference]
) -> pd.DataFrame:
    df = pd.DataFrame(
        [_describe(value, operation) for value in values],
        index=values.index,
        columns=COLUMNS,
    )
    df["valid"] = df["valid"].astype(bool)
    df["checksum"] = df["checksum"].astype("Int64")
    return df


def parse_series(values: pd.Series) -> pd.DataFrame:
    """Parses every reference in a Series.

    Invalid references do not stop processing; each row reports its own
    outcome. Missing values are reported as `InvalidFormat`.

    Args:
        values: References in printable or electronic form.

    Returns:
        A DataFrame sharing the index of `values` with the columns
        `reference` (the input), `valid`, `electronic`, `printable`,
        `checksum` (nullable integer), `error` (the error class name) and
        `message`.
    """
    return _frame(values, parse)


def generate_series(bodies: pd.Series) -> pd.DataFrame:
    """Generates a reference for every body in a Series.

    Returns:
        A DataFrame with the same columns as `parse_series`, `reference`
        holding the input body.
    """
    return _frame(bodies, generate)
