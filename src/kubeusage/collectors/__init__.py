from .metrics_collector import PodMetricsCollector
from .pod_collector import PodCollector
from .pv_collector import PersistentVolumeCollector

__all__ = [
    "PersistentVolumeCollector",
    "PodCollector",
    "PodMetricsCollector",
]
