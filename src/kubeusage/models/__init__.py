from .report import (
    AffinityNode,
    MetricsFailure,
    NodeShareStatus,
    PVAffinityRow,
    UsageReport,
    UsageRow,
    UsageStatus,
)
from .resources import (
    ClaimReference,
    Container,
    ContainerUsage,
    NodeSelectorRequirement,
    NodeSelectorTerm,
    PersistentVolume,
    Pod,
    PodMetrics,
)

__all__ = [
    "AffinityNode",
    "ClaimReference",
    "Container",
    "ContainerUsage",
    "MetricsFailure",
    "NodeSelectorRequirement",
    "NodeSelectorTerm",
    "NodeShareStatus",
    "PVAffinityRow",
    "PersistentVolume",
    "Pod",
    "PodMetrics",
    "UsageReport",
    "UsageRow",
    "UsageStatus",
]
