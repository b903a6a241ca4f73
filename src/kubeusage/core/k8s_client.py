import logging
import os
from typing import List, Optional

from kubernetes_asyncio import config
from kubernetes_asyncio.config import ConfigException

from ..collectors import PersistentVolumeCollector, PodCollector, PodMetricsCollector
from ..models.resources import PersistentVolume, Pod, PodMetrics
from .exceptions import ClusterConfigError, ContextNotFoundError

logger = logging.getLogger(__name__)


def validate_context(kubeconfig: str, context: Optional[str]) -> None:
    """
    Ensures the kubeconfig is readable and, when a context name is given,
    that the context exists in it.

    Raises:
        ClusterConfigError: If the kubeconfig is missing or cannot be parsed.
        ContextNotFoundError: If the named context is not in the kubeconfig.
    """
    if not os.path.isfile(kubeconfig):
        raise ClusterConfigError(f"Kubeconfig file '{kubeconfig}' does not exist or is not a file.")

    try:
        contexts, _current = config.list_kube_config_contexts(config_file=kubeconfig)
    except ConfigException as e:
        raise ClusterConfigError(f"Invalid kubeconfig '{kubeconfig}': {e}") from e
    except OSError as e:
        raise ClusterConfigError(f"Kubeconfig '{kubeconfig}' cannot be read: {e}") from e

    if context is None:
        return

    names = [item.get("name") for item in contexts or []]
    if context not in names:
        raise ContextNotFoundError(context, kubeconfig)


class ClusterClient:
    """
    Read-only access to the cluster for the reporters.

    Wraps one kubernetes_asyncio ApiClient and exposes the three reads the
    reports need. Use ``from_kubeconfig`` to build one and ``close`` (or
    ``async with``) to release the underlying HTTP session.
    """

    def __init__(self, api_client):
        self._api_client = api_client
        self.pod_collector = PodCollector(api_client)
        self.metrics_collector = PodMetricsCollector(api_client)
        self.pv_collector = PersistentVolumeCollector(api_client)

    @classmethod
    async def from_kubeconfig(cls, kubeconfig: str, context: Optional[str] = None) -> "ClusterClient":
        """
        Builds a client from a kubeconfig file and an optional context name.

        Raises:
            ClusterConfigError: On any kubeconfig or client construction failure.
            ContextNotFoundError: If ``context`` is not defined in the kubeconfig.
        """
        validate_context(kubeconfig, context)

        try:
            logger.debug("Loading kubeconfig %s (context=%s)...", kubeconfig, context or "<current>")
            api_client = await config.new_client_from_config(
                config_file=kubeconfig,
                context=context,
                persist_config=False,
            )
        except ConfigException as e:
            raise ClusterConfigError(f"Failed to load kubeconfig '{kubeconfig}': {e}") from e
        except Exception as e:
            raise ClusterConfigError(f"Failed to build Kubernetes client: {e}") from e

        logger.info("Kubernetes client created from %s.", kubeconfig)
        return cls(api_client)

    async def list_pods(self, namespace: Optional[str] = None) -> List[Pod]:
        return await self.pod_collector.collect(namespace)

    async def get_pod_metrics(self, namespace: str, name: str) -> PodMetrics:
        return await self.metrics_collector.collect(namespace, name)

    async def list_persistent_volumes(self) -> List[PersistentVolume]:
        return await self.pv_collector.collect()

    async def close(self):
        """Close the Kubernetes API client if it exists."""
        if self._api_client:
            await self._api_client.close()
            logger.debug("Kubernetes API client closed.")
            self._api_client = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()
