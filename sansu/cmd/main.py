from typing import Optional

import typer

from sansu.engine import evaluate, evaluate_isolated, format_result
from sansu.errors import ExpressionError
from sansu.logger import setup_logging

app = typer.Typer()


@app.command(context_settings={"ignore_unknown_options": True})
def main(
    expression: str,
    isolated: bool = typer.Option(False, "--isolated", help="Evaluate in a worker process."),
    timeout: Optional[float] = typer.Option(None, "--timeout", help="Seconds, implies --isolated."),
    log_level: Optional[str] = typer.Option(None, "--log-level"),
):
    setup_logging(level=log_level)
    try:
        if isolated or timeout is not None:
            result = evaluate_isolated(expression, timeout=timeout)
        else:
            result = evaluate(expression)
    except ExpressionError as e:
        if e.diagnostic:
            typer.echo(e.diagnostic, err=True, nl=False)
        typer.echo(f"{e.code}: {e.message}", err=True)
        raise typer.Exit(code=1)
    typer.echo(format_result(result))


if __name__ == "__main__":
    app()
