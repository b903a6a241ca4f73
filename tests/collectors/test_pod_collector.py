# tests/collectors/test_pod_collector.py

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from kubernetes_asyncio.client import models as k8s
from kubernetes_asyncio.client.rest import ApiException

from kubeusage.collectors.pod_collector import PodCollector
from kubeusage.core.exceptions import ClusterAccessError


# Fixture to simulate the Kubernetes API
@pytest.fixture
def mock_k8s_api():
    """Mock of the Kubernetes CoreV1Api."""
    mock_api = MagicMock()

    # Define resources for containers
    resources_1 = k8s.V1ResourceRequirements(requests={"cpu": "500m", "memory": "1Gi"}, limits={"memory": "2Gi"})
    resources_2 = k8s.V1ResourceRequirements(requests={"cpu": "100m", "memory": "256Mi"})
    # Container with no requests or limits
    resources_3 = k8s.V1ResourceRequirements(requests=None, limits=None)

    container_1 = k8s.V1Container(name="app-container", resources=resources_1)
    container_2 = k8s.V1Container(name="sidecar-container", resources=resources_2)
    container_3 = k8s.V1Container(name="no-request-container", resources=resources_3)

    pod_1 = k8s.V1Pod(
        metadata=k8s.V1ObjectMeta(name="app-pod-1", namespace="prod"),
        spec=k8s.V1PodSpec(containers=[container_1, container_2]),
        status=k8s.V1PodStatus(phase="Running"),
    )
    pod_2 = k8s.V1Pod(
        metadata=k8s.V1ObjectMeta(name="app-pod-2", namespace="dev"),
        spec=k8s.V1PodSpec(containers=[container_3]),
        status=k8s.V1PodStatus(phase="Pending"),
    )

    pod_list = k8s.V1PodList(items=[pod_1, pod_2])
    mock_api.list_pod_for_all_namespaces = AsyncMock(return_value=pod_list)
    mock_api.list_namespaced_pod = AsyncMock(return_value=k8s.V1PodList(items=[pod_1]))

    return mock_api


@pytest.mark.asyncio
@patch("kubeusage.collectors.pod_collector.client.CoreV1Api")
async def test_pod_collector_all_namespaces(mock_core_v1_api, mock_k8s_api):
    """Tests the conversion of pods and their container memory resources."""
    mock_core_v1_api.return_value = mock_k8s_api

    pods = await PodCollector(MagicMock()).collect()

    mock_k8s_api.list_pod_for_all_namespaces.assert_awaited_once_with(watch=False)
    assert [p.name for p in pods] == ["app-pod-1", "app-pod-2"]

    pod_1 = pods[0]
    assert pod_1.namespace == "prod"
    assert pod_1.phase == "Running"
    assert [c.name for c in pod_1.containers] == ["app-container", "sidecar-container"]
    assert pod_1.containers[0].memory_request == 1073741824  # 1Gi
    assert pod_1.containers[0].memory_limit == 2147483648  # 2Gi
    assert pod_1.containers[1].memory_request == 268435456  # 256Mi
    assert pod_1.containers[1].memory_limit == 0

    pod_2 = pods[1]
    assert pod_2.phase == "Pending"
    assert pod_2.containers[0].memory_request == 0
    assert pod_2.containers[0].memory_limit == 0


@pytest.mark.asyncio
@patch("kubeusage.collectors.pod_collector.client.CoreV1Api")
async def test_pod_collector_namespaced(mock_core_v1_api, mock_k8s_api):
    mock_core_v1_api.return_value = mock_k8s_api

    pods = await PodCollector(MagicMock()).collect("prod")

    mock_k8s_api.list_namespaced_pod.assert_awaited_once_with("prod", watch=False)
    mock_k8s_api.list_pod_for_all_namespaces.assert_not_awaited()
    assert [p.name for p in pods] == ["app-pod-1"]


@pytest.mark.asyncio
@patch("kubeusage.collectors.pod_collector.client.CoreV1Api")
async def test_pod_collector_api_error_is_fatal(mock_core_v1_api, mock_k8s_api):
    """Unlike metrics, a failed pod listing aborts the report."""
    mock_core_v1_api.return_value = mock_k8s_api
    mock_k8s_api.list_pod_for_all_namespaces.side_effect = ApiException(status=403, reason="Forbidden")

    with pytest.raises(ClusterAccessError, match="403"):
        await PodCollector(MagicMock()).collect()


@pytest.mark.asyncio
@patch("kubeusage.collectors.pod_collector.client.CoreV1Api")
async def test_pod_collector_connection_error_is_fatal(mock_core_v1_api, mock_k8s_api):
    mock_core_v1_api.return_value = mock_k8s_api
    mock_k8s_api.list_namespaced_pod.side_effect = OSError("connection refused")

    with pytest.raises(ClusterAccessError, match="connection refused"):
        await PodCollector(MagicMock()).collect("prod")
