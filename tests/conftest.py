# tests/conftest.py

from unittest.mock import AsyncMock, MagicMock

import pytest

from kubeusage.models.resources import (
    ClaimReference,
    Container,
    ContainerUsage,
    NodeSelectorRequirement,
    NodeSelectorTerm,
    PersistentVolume,
    Pod,
    PodMetrics,
)

MI = 1024 * 1024


@pytest.fixture(autouse=True)
def mock_settings_env_vars(monkeypatch):
    """
    Pytest fixture to mock environment variables for the config module.

    This fixture runs automatically for every test (`autouse=True`) so the
    configuration is predictable and isolated from the developer's shell.
    """
    monkeypatch.delenv("KUBECONFIG", raising=False)
    monkeypatch.delenv("KUBEUSAGE_CONTEXT", raising=False)
    monkeypatch.setenv("KUBEUSAGE_SHOW_PROGRESS", "false")
    # Piped output starts from the 80 column default.
    monkeypatch.delenv("COLUMNS", raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("TTY_COMPATIBLE", raising=False)


def make_pod(name, namespace="default", phase="Running", containers=None):
    """Helper to build a Pod model; containers are (name, request, limit) tuples."""
    return Pod(
        name=name,
        namespace=namespace,
        phase=phase,
        containers=[Container(name=c, memory_request=req, memory_limit=lim) for c, req, lim in containers or []],
    )


def make_metrics(pod, usages):
    """Helper to build PodMetrics; usages are (container name, bytes) tuples."""
    return PodMetrics(
        pod_name=pod.name,
        namespace=pod.namespace,
        containers=[ContainerUsage(name=c, memory_usage=u) for c, u in usages],
    )


def make_volume(name, *node_groups, claim=None):
    """
    Helper to build a PersistentVolume. Each node group becomes one term with
    a single hostname match expression.
    """
    terms = [
        NodeSelectorTerm(
            match_expressions=[
                NodeSelectorRequirement(key="kubernetes.io/hostname", operator="In", values=list(nodes))
            ]
        )
        for nodes in node_groups
    ]
    claim_ref = ClaimReference(namespace=claim[0], name=claim[1]) if claim else None
    return PersistentVolume(name=name, node_affinity_terms=terms, claim_ref=claim_ref)


@pytest.fixture
def fake_cluster():
    """A stand-in for ClusterClient with async read methods."""
    cluster = MagicMock()
    cluster.list_pods = AsyncMock(return_value=[])
    cluster.get_pod_metrics = AsyncMock()
    cluster.list_persistent_volumes = AsyncMock(return_value=[])
    cluster.close = AsyncMock()
    return cluster


@pytest.fixture
def pod_factory():
    return make_pod


@pytest.fixture
def metrics_factory():
    return make_metrics


@pytest.fixture
def volume_factory():
    return make_volume
