# src/kubeusage/collectors/metrics_collector.py
"""
Fetches the current metrics snapshot of a single pod from the
metrics.k8s.io API (served by metrics-server).
"""

import logging

from kubernetes_asyncio import client
from kubernetes_asyncio.client.rest import ApiException
from pydantic import ValidationError

from ..core.config import config
from ..core.exceptions import MetricsUnavailableError
from ..models.resources import ContainerUsage, PodMetrics
from ..utils.k8s_utils import parse_memory_quantity
from .base_collector import BaseCollector

logger = logging.getLogger(__name__)


class PodMetricsCollector(BaseCollector):
    """Reads PodMetrics objects through the CustomObjectsApi."""

    def __init__(self, api_client):
        super().__init__(api_client)
        self._api = client.CustomObjectsApi(api_client)

    async def collect(self, namespace: str, name: str) -> PodMetrics:
        try:
            raw = await self._api.get_namespaced_custom_object(
                group=config.METRICS_API_GROUP,
                version=config.METRICS_API_VERSION,
                namespace=namespace,
                plural="pods",
                name=name,
            )
        except ApiException as e:
            raise MetricsUnavailableError(f"({e.status}) {e.reason}") from e
        except Exception as e:
            raise MetricsUnavailableError(str(e) or type(e).__name__) from e

        try:
            return self._parse_metrics(raw, namespace, name)
        except (ValidationError, AttributeError, TypeError) as e:
            raise MetricsUnavailableError(f"malformed metrics response: {e}") from e

    @staticmethod
    def _parse_metrics(raw: dict, namespace: str, name: str) -> PodMetrics:
        containers = []
        for entry in (raw or {}).get("containers") or []:
            usage = entry.get("usage") or {}
            containers.append(
                ContainerUsage(
                    name=entry.get("name", ""),
                    memory_usage=parse_memory_quantity(usage.get("memory")),
                )
            )

        logger.debug("Pod %s/%s: %d container metrics entries.", namespace, name, len(containers))
        return PodMetrics(pod_name=name, namespace=namespace, containers=containers)
