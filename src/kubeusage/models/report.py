# src/kubeusage/models/report.py
"""
Models for the rows produced by the usage and PV affinity reports.
Classification is stored as an enum so reporters can style it however
they like.
"""

from enum import Enum
from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field

from ..utils.k8s_utils import format_memory_quantity

NOT_BOUND = "Not Bound"
NO_AFFINITY = "None"


class UsageStatus(str, Enum):
    """Measured usage compared with the container's memory request."""

    OVER = "Over"
    WITHIN = "Within"


class NodeShareStatus(str, Enum):
    """Whether a node is required by more than one persistent volume."""

    SHARED = "Shared"
    UNIQUE = "Unique"


class UsageRow(BaseModel):
    """One container line of the usage report."""

    model_config = ConfigDict(frozen=True)

    pod_name: str = Field(..., description="The name of the Kubernetes pod.")
    namespace: str = Field(..., description="The namespace the pod belongs to.")
    container_name: str = Field(..., description="The name of the container within the pod.")
    memory_usage: int = Field(..., description="Measured memory usage in bytes.")
    memory_request: int = Field(0, description="Memory request in bytes (0 when not set).")
    memory_limit: int = Field(0, description="Memory limit in bytes (0 when not set).")
    status: UsageStatus = Field(..., description="Usage classified against the request.")

    @property
    def usage_display(self) -> str:
        return format_memory_quantity(self.memory_usage)

    @property
    def request_display(self) -> str:
        return format_memory_quantity(self.memory_request)

    @property
    def limit_display(self) -> str:
        return format_memory_quantity(self.memory_limit)


class MetricsFailure(BaseModel):
    """A pod whose metrics could not be fetched; it contributes no rows."""

    model_config = ConfigDict(frozen=True)

    pod_name: str
    namespace: str
    reason: str

    @property
    def message(self) -> str:
        return f"Error getting metrics for pod {self.pod_name}: {self.reason}"


UsageEntry = Union[UsageRow, MetricsFailure]


class UsageReport(BaseModel):
    """
    Ordered output of the usage report. Failures keep their position among
    the rows so they can be shown where they occurred.
    """

    entries: List[UsageEntry] = Field(default_factory=list)

    @property
    def rows(self) -> List[UsageRow]:
        return [entry for entry in self.entries if isinstance(entry, UsageRow)]

    @property
    def failures(self) -> List[MetricsFailure]:
        return [entry for entry in self.entries if isinstance(entry, MetricsFailure)]


class AffinityNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    status: NodeShareStatus

    @property
    def display(self) -> str:
        return f"{self.name} ({self.status.value})"


class PVAffinityRow(BaseModel):
    """One persistent volume line of the PV affinity report."""

    model_config = ConfigDict(frozen=True)

    volume_name: str = Field(..., description="The name of the persistent volume.")
    nodes: List[AffinityNode] = Field(
        default_factory=list, description="Required affinity nodes in extraction order."
    )
    claim_namespace: str = Field(NOT_BOUND, description="Namespace of the bound claim.")
    claim_name: str = Field(NOT_BOUND, description="Name of the bound claim.")

    @property
    def affinity_display(self) -> str:
        if not self.nodes:
            return NO_AFFINITY
        return ", ".join(node.display for node in self.nodes)
