# src/kubeusage/cli/main.py
"""
This module is the main entry point for the kubeusage CLI.

It aggregates all commands from the submodules (usage, pv).
"""

import logging
from typing import Optional

import typer
from typing_extensions import Annotated

from ..core.config import config
from ..models.cli import ClusterOptions
from . import pv, usage

# --- Setup Logger ---
logging.basicConfig(
    level=config.LOG_LEVEL.upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


app = typer.Typer(
    name="kubeusage",
    help="Compare container memory usage with requests/limits and inspect persistent volume node affinity.",
    add_completion=False,
)


def version_callback(value: bool):
    """
    Prints the version of kubeusage.
    """
    if value:
        from .. import __version__

        typer.echo(f"kubeusage version: {__version__}")
        raise typer.Exit()


@app.command()
def version():
    """
    Show the version of kubeusage.
    """
    from .. import __version__

    typer.echo(f"kubeusage version: {__version__}")


@app.callback()
def main(
    ctx: typer.Context,
    kubeconfig: Annotated[
        Optional[str],
        typer.Option(
            "--kubeconfig",
            help="Path to the kubeconfig file. Default: $KUBECONFIG or ~/.kube/config.",
        ),
    ] = None,
    context: Annotated[
        Optional[str],
        typer.Option("--context", help="Kubeconfig context to use. Default: the current context."),
    ] = None,
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show the version and exit.",
        ),
    ] = None,
):
    """
    kubeusage CLI main entry point.
    """
    ctx.obj = ClusterOptions(kubeconfig=kubeconfig, context=context)
    logger.debug("Cluster options: %r", ctx.obj)


# Register command sub-apps
app.add_typer(usage.app, name="usage")
app.add_typer(pv.app, name="pv")


if __name__ == "__main__":
    app()
