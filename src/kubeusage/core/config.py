# src/kubeusage/core/config.py

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from a .env file located in the project root
dotenv_path = os.path.join(os.path.dirname(__file__), "..", "..", "..", ".env")
load_dotenv(dotenv_path=dotenv_path)

logger = logging.getLogger(__name__)

_TRUTHY = ("true", "1", "t", "y", "yes")


class Config:
    """
    Handles the application's configuration by loading values from environment variables.
    """

    # Pods in this namespace are never part of a usage report.
    EXCLUDED_NAMESPACE = "kube-system"

    METRICS_API_GROUP = "metrics.k8s.io"

    # --- Logging variables ---
    LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

    # KUBECONFIG, KUBEUSAGE_CONTEXT and KUBEUSAGE_SHOW_PROGRESS are properties so
    # they are resolved at access time and follow environment changes made by
    # tests or wrapper scripts after import.
    @property
    def KUBECONFIG(self) -> str:
        return self.default_kubeconfig_path()

    @property
    def KUBE_CONTEXT(self) -> Optional[str]:
        return os.getenv("KUBEUSAGE_CONTEXT") or None

    @property
    def SHOW_PROGRESS(self) -> bool:
        return os.getenv("KUBEUSAGE_SHOW_PROGRESS", "True").lower() in _TRUTHY

    @property
    def METRICS_API_VERSION(self) -> str:
        return os.getenv("KUBEUSAGE_METRICS_API_VERSION", "v1beta1")

    @staticmethod
    def default_kubeconfig_path() -> str:
        """
        Returns the kubeconfig path to use when none is given on the command line.

        A KUBECONFIG value holding several paths only contributes its first entry.
        """
        env_value = os.getenv("KUBECONFIG", "")
        if env_value:
            first = env_value.split(os.pathsep)[0].strip()
            if first:
                return os.path.expanduser(first)
            logger.debug("KUBECONFIG is set but empty after splitting; using the default location.")
        return str(Path.home() / ".kube" / "config")


config = Config()
