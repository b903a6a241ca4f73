# src/kubeusage/cli/usage.py
"""
Implements the `usage` command: memory usage against requests and limits
for every running container.
"""

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, SpinnerColumn, TextColumn
from typing_extensions import Annotated

from ..core.config import config
from ..core.usage import report_usage
from ..reporters.console_reporter import ConsoleReporter
from .utils import get_cluster_options, run_against_cluster

logger = logging.getLogger(__name__)

app = typer.Typer(help="Report container memory usage against requests and limits.", add_completion=False)


def _make_progress() -> Progress:
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        console=Console(stderr=True),
        transient=True,
    )


@app.callback(invoke_without_command=True)
def usage(
    ctx: typer.Context,
    namespace: Annotated[
        Optional[str],
        typer.Option("--namespace", "-n", help="Only report pods in this namespace (default: all namespaces)."),
    ] = None,
    no_progress: Annotated[bool, typer.Option("--no-progress", help="Do not show the progress bar.")] = False,
):
    """
    Show memory usage of running containers compared with their requests and limits.

    Pods in kube-system are never reported.
    """
    if ctx.invoked_subcommand is not None:
        return

    options = get_cluster_options(ctx)
    show_progress = config.SHOW_PROGRESS and not no_progress
    logger.info("Generating usage report (namespace=%s, context=%s)", namespace or "<all>", options.context)

    async def _job(cluster):
        if not show_progress:
            return await report_usage(cluster, namespace=namespace)

        with _make_progress() as progress:
            task = progress.add_task("Fetching pod metrics", total=None)
            return await report_usage(
                cluster,
                namespace=namespace,
                on_progress=lambda pod: progress.advance(task),
            )

    report = run_against_cluster(options, _job)
    ConsoleReporter().report_usage(report)
