# src/kubeusage/cli/utils.py
import asyncio
import logging
import traceback
from typing import Any, Awaitable, Callable, Optional

import typer

from ..core.exceptions import KubeUsageError
from ..core.k8s_client import ClusterClient
from ..models.cli import ClusterOptions

logger = logging.getLogger(__name__)


def get_cluster_options(ctx: typer.Context) -> ClusterOptions:
    """Returns the global options set by the main callback (or defaults)."""
    options: Optional[ClusterOptions] = ctx.obj if isinstance(ctx.obj, ClusterOptions) else None
    return options or ClusterOptions()


def run_against_cluster(options: ClusterOptions, job: Callable[[ClusterClient], Awaitable[Any]]) -> Any:
    """
    Builds a cluster client, runs ``job`` with it and closes the client.

    Any kubeusage error is fatal for the command: the message is printed to
    stderr and the process exits with code 1.
    """

    async def _run():
        cluster = await ClusterClient.from_kubeconfig(options.kubeconfig, options.context)
        async with cluster:
            return await job(cluster)

    try:
        return asyncio.run(_run())
    except typer.Exit:
        raise
    except KubeUsageError as e:
        logger.debug("Fatal error: %s", traceback.format_exc())
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    except Exception as e:
        logger.error(f"An unexpected error occurred: {e}")
        logger.debug(traceback.format_exc())
        typer.secho(f"Unexpected error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
