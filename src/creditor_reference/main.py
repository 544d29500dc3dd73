import logging
import sys
from typing import Tuple

import click
import pandas as pd

from creditor_reference.references.frames import generate_series, parse_series


logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ["printable", "electronic", "table"]

format_option = click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default="printable",
    show_default=True,
    help="How to print the references.",
)


def report(df: pd.DataFrame, output_format: str) -> None:
    """Prints one outcome per row and exits with 1 if any row failed."""
    if output_format == "table":
        click.echo(df.to_string())
    else:
        for _, row in df.iterrows():
            if row["valid"]:
                click.echo(row[output_format])
            else:
                click.echo(f"ERROR {row['error']}: {row['message']}")

    failed = int((~df["valid"]).sum())
    if failed:
        logger.info(f"{failed} of {len(df)} references failed")
        sys.exit(1)


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
)
def cli(log_level: str) -> None:
    """Generate and validate ISO 11649 creditor references."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("bodies", nargs=-1, required=True)
@format_option
def generate(bodies: Tuple[str, ...], output_format: str) -> None:
    """Generate a creditor reference for each BODY, e.g. an invoice number."""
    report(generate_series(pd.Series(list(bodies), dtype=object)), output_format)


@cli.command()
@click.argument("references", nargs=-1, required=True)
@format_option
def parse(references: Tuple[str, ...], output_format: str) -> None:
    """Validate each REFERENCE, given in printable or electronic form."""
    report(parse_series(pd.Series(list(references), dtype=object)), output_format)


if __name__ == "__main__":
    cli()
