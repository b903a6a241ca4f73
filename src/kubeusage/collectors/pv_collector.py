# src/kubeusage/collectors/pv_collector.py
"""
Collects persistent volumes with their required node affinity and claim
binding from the Kubernetes API.
"""

import logging
from typing import List

from kubernetes_asyncio import client
from kubernetes_asyncio.client.rest import ApiException

from ..core.exceptions import ClusterAccessError
from ..models.resources import (
    ClaimReference,
    NodeSelectorRequirement,
    NodeSelectorTerm,
    PersistentVolume,
)
from .base_collector import BaseCollector

logger = logging.getLogger(__name__)


class PersistentVolumeCollector(BaseCollector):
    """Lists all (cluster-scoped) persistent volumes."""

    def __init__(self, api_client):
        super().__init__(api_client)
        self._api = client.CoreV1Api(api_client)

    async def collect(self) -> List[PersistentVolume]:
        try:
            pv_list = await self._api.list_persistent_volume(watch=False)
        except ApiException as e:
            raise ClusterAccessError(f"Failed to list persistent volumes: ({e.status}) {e.reason}") from e
        except Exception as e:
            raise ClusterAccessError(f"Failed to list persistent volumes: {e}") from e

        volumes = [self._parse_volume(item) for item in pv_list.items or []]
        logger.debug("Collected %d persistent volumes.", len(volumes))
        return volumes

    @staticmethod
    def _parse_volume(item) -> PersistentVolume:
        spec = item.spec
        terms = []
        claim_ref = None

        if spec is not None:
            required = spec.node_affinity.required if spec.node_affinity else None
            for term in (required.node_selector_terms if required else None) or []:
                expressions = [
                    NodeSelectorRequirement(
                        key=expr.key,
                        operator=expr.operator,
                        values=list(expr.values or []),
                    )
                    for expr in term.match_expressions or []
                ]
                terms.append(NodeSelectorTerm(match_expressions=expressions))

            if spec.claim_ref is not None:
                claim_ref = ClaimReference(
                    namespace=spec.claim_ref.namespace or "",
                    name=spec.claim_ref.name or "",
                )

        return PersistentVolume(name=item.metadata.name, node_affinity_terms=terms, claim_ref=claim_ref)
