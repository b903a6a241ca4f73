# src/kubeusage/collectors/pod_collector.py
"""
Collects pods and the declared memory requests/limits of their containers
from the Kubernetes API.
"""

import logging
from typing import List, Optional

from kubernetes_asyncio import client
from kubernetes_asyncio.client.rest import ApiException

from ..core.exceptions import ClusterAccessError
from ..models.resources import Container, Pod
from ..utils.k8s_utils import parse_memory_quantity
from .base_collector import BaseCollector

logger = logging.getLogger(__name__)


class PodCollector(BaseCollector):
    """
    Lists pods, optionally scoped to a namespace, and converts them into
    Pod models with containers in spec-declaration order.
    """

    def __init__(self, api_client):
        super().__init__(api_client)
        self._api = client.CoreV1Api(api_client)

    async def collect(self, namespace: Optional[str] = None) -> List[Pod]:
        try:
            if namespace:
                pod_list = await self._api.list_namespaced_pod(namespace, watch=False)
            else:
                pod_list = await self._api.list_pod_for_all_namespaces(watch=False)
        except ApiException as e:
            scope = f"namespace '{namespace}'" if namespace else "all namespaces"
            raise ClusterAccessError(f"Failed to list pods in {scope}: ({e.status}) {e.reason}") from e
        except Exception as e:
            raise ClusterAccessError(f"Failed to list pods: {e}") from e

        pods = [self._parse_pod(item) for item in pod_list.items or []]
        logger.debug("Collected %d pods (namespace=%s).", len(pods), namespace or "<all>")
        return pods

    @staticmethod
    def _parse_pod(item) -> Pod:
        containers = []
        if item.spec and item.spec.containers:
            for container in item.spec.containers:
                resources = container.resources
                requests = (resources.requests if resources else None) or {}
                limits = (resources.limits if resources else None) or {}
                containers.append(
                    Container(
                        name=container.name,
                        memory_request=parse_memory_quantity(requests.get("memory")),
                        memory_limit=parse_memory_quantity(limits.get("memory")),
                    )
                )

        return Pod(
            name=item.metadata.name,
            namespace=item.metadata.namespace,
            phase=item.status.phase if item.status else None,
            containers=containers,
        )
