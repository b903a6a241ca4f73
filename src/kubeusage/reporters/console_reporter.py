# src/kubeusage/reporters/console_reporter.py
"""
A reporter that displays the reports in formatted tables in the console.
"""

import logging
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.measure import Measurement
from rich.table import Table

from ..models.report import MetricsFailure, NodeShareStatus, PVAffinityRow, UsageReport, UsageStatus
from .base_reporter import BaseReporter

logger = logging.getLogger(__name__)

USAGE_STYLES = {
    UsageStatus.OVER: "red",
    UsageStatus.WITHIN: "green",
}

UNBOUNDED_WIDTH = 10_000

NODE_STYLES = {
    NodeShareStatus.SHARED: "red",
    NodeShareStatus.UNIQUE: "green",
}


class ConsoleReporter(BaseReporter):
    """
    Renders kubeusage reports to the console using the 'rich' library.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def report_usage(self, report: UsageReport):
        """
        Displays one row per container. Usage is red when above the request and
        green otherwise. Metrics failures appear as a red line where they occurred.
        """
        if not report.entries:
            self.console.print("No running pods to report.", style="yellow")
            return

        table = Table(header_style="bold magenta")
        table.add_column("POD", style="yellow", no_wrap=True)
        table.add_column("CONTAINER", style="yellow", no_wrap=True)
        table.add_column("USAGE", justify="right")
        table.add_column("REQUESTS", style="yellow", justify="right")
        table.add_column("LIMITS", style="yellow", justify="right")

        for entry in report.entries:
            if isinstance(entry, MetricsFailure):
                table.add_row(f"[red]{escape(entry.message)}[/]", "", "", "", "")
                continue

            style = USAGE_STYLES[entry.status]
            table.add_row(
                entry.pod_name,
                entry.container_name,
                f"[{style}]{entry.usage_display}[/]",
                entry.request_display,
                entry.limit_display,
            )

        self._print_table(table)
        logger.debug("Rendered %d usage rows and %d failures.", len(report.rows), len(report.failures))

    def report_pv_affinity(self, rows: List[PVAffinityRow]):
        """
        Displays one row per persistent volume. Nodes required by several
        volumes are red, nodes required by a single volume green.
        """
        if not rows:
            self.console.print("No persistent volumes to report.", style="yellow")
            return

        table = Table(header_style="bold magenta")
        table.add_column("VOLUME", style="cyan", no_wrap=True)
        table.add_column("NODE AFFINITY")
        table.add_column("CLAIM NAMESPACE", style="yellow")
        table.add_column("CLAIM NAME", style="yellow")

        for row in rows:
            table.add_row(row.volume_name, self._format_nodes(row), row.claim_namespace, row.claim_name)

        self._print_table(table)

    def _print_table(self, table: Table):
        """
        Prints a table. Output that is not a terminal (a pipe or a file) is
        widened to the table's natural width so rows are never wrapped.
        """
        if not self.console.is_terminal:
            natural_width = Measurement.get(
                self.console, self.console.options.update_width(UNBOUNDED_WIDTH), table
            ).maximum
            if natural_width > self.console.width:
                self.console.width = natural_width
        self.console.print(table)

    @staticmethod
    def _format_nodes(row: PVAffinityRow) -> str:
        if not row.nodes:
            return row.affinity_display
        return ", ".join(f"[{NODE_STYLES[node.status]}]{escape(node.display)}[/]" for node in row.nodes)
