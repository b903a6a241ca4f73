# src/kubeusage/cli/pv.py
"""
Implements the `pv` command: persistent volume node-affinity concentration.
"""

import logging

import typer

from ..core.pv_affinity import report_pv_affinity
from ..reporters.console_reporter import ConsoleReporter
from .utils import get_cluster_options, run_against_cluster

logger = logging.getLogger(__name__)

app = typer.Typer(help="Report persistent volume node affinity.", add_completion=False)


@app.callback(invoke_without_command=True)
def pv(ctx: typer.Context):
    """
    Show the required node affinity and claim of every persistent volume.

    Nodes required by more than one volume are flagged as Shared.
    """
    if ctx.invoked_subcommand is not None:
        return

    options = get_cluster_options(ctx)
    logger.info("Generating persistent volume affinity report (context=%s)", options.context)

    rows = run_against_cluster(options, report_pv_affinity)
    ConsoleReporter().report_pv_affinity(rows)
