"""
Data models for kubeusage CLI options shared between commands.
"""

from typing import Optional

from ..core.config import config


class ClusterOptions:
    """Global cluster connection options, stored on the Typer context."""

    def __init__(self, kubeconfig: Optional[str] = None, context: Optional[str] = None):
        self.kubeconfig = kubeconfig or config.KUBECONFIG
        self.context = context or config.KUBE_CONTEXT

    def __repr__(self) -> str:
        return f"ClusterOptions(kubeconfig={self.kubeconfig!r}, context={self.context!r})"
