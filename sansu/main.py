import dataclasses
import sys
from typing import Optional, TextIO

import click

from sansu.config import get_settings
from sansu.engine import evaluate, format_result
from sansu.errors import ExpressionError
from sansu.logger import setup_logging


@click.command()
@click.argument("filename", type=click.File("r"), default="-")
@click.option("-o", "--output", type=click.File("w"), default="-")
@click.option("--max-length", type=click.IntRange(min=1), default=None)
@click.option("--max-depth", type=click.IntRange(min=1), default=None)
@click.option("--log-level", default=None, help="Overrides SANSU_LOG_LEVEL.")
def main(
    filename: TextIO,
    output: TextIO,
    max_length: Optional[int],
    max_depth: Optional[int],
    log_level: Optional[str],
):
    """Evaluate one expression per line of FILENAME."""
    setup_logging(level=log_level)
    settings = get_settings()
    overrides = {"max_length": max_length, "max_depth": max_depth}
    settings = dataclasses.replace(
        settings, **{k: v for k, v in overrides.items() if v is not None}
    )

    failed = False
    for line in filename:
        expression = line.strip()
        if not expression:
            continue
        try:
            result = evaluate(expression, settings)
        except ExpressionError as e:
            failed = True
            output.write(f"{expression} ! {e.code}: {e.message}\n")
            continue
        output.write(f"{expression} = {format_result(result)}\n")

    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
