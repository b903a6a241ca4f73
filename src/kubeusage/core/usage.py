# src/kubeusage/core/usage.py
"""
The pod usage report: joins the memory requests/limits declared in pod specs
with live metrics and classifies each container's usage.
"""

import logging
from typing import Callable, List, Optional

from ..models.report import MetricsFailure, UsageReport, UsageRow
from ..models.resources import Pod, PodMetrics
from .classifier import classify_usage
from .config import config
from .exceptions import MetricsUnavailableError

logger = logging.getLogger(__name__)

RUNNING_PHASE = "Running"


def select_pods(pods: List[Pod]) -> List[Pod]:
    """Keeps running pods outside kube-system, in their original order."""
    return [pod for pod in pods if pod.phase == RUNNING_PHASE and pod.namespace != config.EXCLUDED_NAMESPACE]


def build_usage_rows(pod: Pod, metrics: PodMetrics) -> List[UsageRow]:
    """
    Builds one row per container that has a metrics entry at the same index.

    Metrics are matched to containers by position. Containers past the end
    of the metrics list produce no row.
    """
    rows = []
    for container, sample in zip(pod.containers, metrics.containers):
        rows.append(
            UsageRow(
                pod_name=pod.name,
                namespace=pod.namespace,
                container_name=container.name,
                memory_usage=sample.memory_usage,
                memory_request=container.memory_request,
                memory_limit=container.memory_limit,
                status=classify_usage(sample.memory_usage, container.memory_request),
            )
        )

    if len(metrics.containers) < len(pod.containers):
        logger.debug(
            "Pod %s/%s has %d containers but only %d metrics entries; skipping the rest.",
            pod.namespace,
            pod.name,
            len(pod.containers),
            len(metrics.containers),
        )
    return rows


async def report_usage(
    cluster,
    namespace: Optional[str] = None,
    on_progress: Optional[Callable[[Pod], None]] = None,
) -> UsageReport:
    """
    Produces the usage report for running pods in ``namespace`` (all
    namespaces when None).

    A pod whose metrics cannot be fetched is recorded as a MetricsFailure and
    the report moves on to the next pod. Failures listing pods propagate.
    """
    pods = select_pods(await cluster.list_pods(namespace))
    logger.info("Reporting memory usage for %d running pods.", len(pods))

    report = UsageReport()
    for pod in pods:
        try:
            metrics = await cluster.get_pod_metrics(pod.namespace, pod.name)
        except MetricsUnavailableError as e:
            logger.warning("Error getting metrics for pod %s/%s: %s", pod.namespace, pod.name, e)
            report.entries.append(MetricsFailure(pod_name=pod.name, namespace=pod.namespace, reason=str(e)))
        else:
            report.entries.extend(build_usage_rows(pod, metrics))
        finally:
            if on_progress is not None:
                on_progress(pod)

    return report
