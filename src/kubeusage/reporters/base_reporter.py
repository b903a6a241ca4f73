# src/kubeusage/reporters/base_reporter.py
"""
Defines the abstract base class for all reporters.
"""
from abc import ABC, abstractmethod
from typing import List

from ..models.report import PVAffinityRow, UsageReport


class BaseReporter(ABC):
    """
    Abstract Base Class for all reporters.
    """

    @abstractmethod
    def report_usage(self, report: UsageReport):
        """Presents the pod usage report."""
        pass

    @abstractmethod
    def report_pv_affinity(self, rows: List[PVAffinityRow]):
        """Presents the persistent volume affinity report."""
        pass
