# src/kubeusage/core/pv_affinity.py
"""
The persistent-volume affinity report.

Counts how many volumes require each node and flags nodes required by more
than one volume. All volumes are counted before any of them is classified,
because one volume's classification depends on the others.
"""

import logging
from collections import Counter
from typing import Iterable, List

from ..models.report import NOT_BOUND, AffinityNode, PVAffinityRow
from ..models.resources import PersistentVolume
from .classifier import classify_node

logger = logging.getLogger(__name__)


def extract_affinity_nodes(volume: PersistentVolume) -> List[str]:
    """
    Returns the candidate node names of every match expression of every
    required term, in order. Duplicates are kept.
    """
    return [
        value
        for term in volume.node_affinity_terms
        for expression in term.match_expressions
        for value in expression.values
    ]


def count_affinity_nodes(volumes: Iterable[PersistentVolume]) -> Counter:
    """Counts node name occurrences across all volumes."""
    counts = Counter()
    for volume in volumes:
        counts.update(extract_affinity_nodes(volume))
    return counts


def build_pv_affinity_rows(volumes: List[PersistentVolume]) -> List[PVAffinityRow]:
    """Builds one row per volume, in input order."""
    counts = count_affinity_nodes(volumes)
    shared = sorted(name for name, count in counts.items() if count > 1)
    if shared:
        logger.info("Nodes required by more than one volume: %s", ", ".join(shared))

    rows = []
    for volume in volumes:
        nodes = [
            AffinityNode(name=name, status=classify_node(name, counts)) for name in extract_affinity_nodes(volume)
        ]
        if volume.claim_ref is not None:
            claim_namespace, claim_name = volume.claim_ref.namespace, volume.claim_ref.name
        else:
            claim_namespace, claim_name = NOT_BOUND, NOT_BOUND

        rows.append(
            PVAffinityRow(
                volume_name=volume.name,
                nodes=nodes,
                claim_namespace=claim_namespace,
                claim_name=claim_name,
            )
        )
    return rows


async def report_pv_affinity(cluster) -> List[PVAffinityRow]:
    """Lists all persistent volumes and builds the affinity report rows."""
    volumes = await cluster.list_persistent_volumes()
    logger.info("Reporting node affinity for %d persistent volumes.", len(volumes))
    return build_pv_affinity_rows(volumes)
