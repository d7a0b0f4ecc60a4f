"""SparkOps CLI entry point."""

import logging

import typer

from . import ui
from .display import error, info, warning

app = typer.Typer(
    name="sparkops",
    help="Spark driver UI exposure on Kubernetes",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich"
)

app.add_typer(
    ui.app,
    name="ui",
    help="Expose driver UIs through Services and Ingresses"
)


@app.callback()
def callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Configure logging for all commands."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def version():
    """Show SparkOps version."""
    from .._version import get_version
    info(f"SparkOps version: {get_version()}")


def main():
    """Main CLI entry point."""
    try:
        app()
    except KeyboardInterrupt:
        warning("\nInterrupted by user")
        raise typer.Exit(1)
    except Exception as e:
        error(f"Error: {e}")
        raise typer.Exit(1)


if __name__ == "__main__":
    main()
