# src/kubeusage/core/classifier.py
"""
Pure classification rules shared by the reports. Nothing here knows about
colours or output formats.
"""

from typing import Mapping

from ..models.report import NodeShareStatus, UsageStatus


def classify_usage(usage: int, request: int) -> UsageStatus:
    """
    Compares measured usage with the memory request (both in bytes).

    Usage strictly above the request is OVER. An unset request (0) therefore
    makes any positive usage OVER.
    """
    if usage > request:
        return UsageStatus.OVER
    return UsageStatus.WITHIN


def classify_node(node_name: str, counts: Mapping[str, int]) -> NodeShareStatus:
    """A node required by more than one volume is SHARED."""
    if counts.get(node_name, 0) > 1:
        return NodeShareStatus.SHARED
    return NodeShareStatus.UNIQUE
