# src/kubeusage/models/resources.py
"""
Pydantic models for the cluster objects read by kubeusage. Collectors turn
Kubernetes API objects into these models so the reporting logic never
touches the client library's types.

Memory amounts are plain integers of bytes; 0 means "not set".
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Container(BaseModel):
    """Declared memory resources of one container in a pod spec."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="The name of the container within the pod.")
    memory_request: int = Field(0, ge=0, description="Memory request in bytes (0 when not set).")
    memory_limit: int = Field(0, ge=0, description="Memory limit in bytes (0 when not set).")


class Pod(BaseModel):
    """A pod with its containers in spec-declaration order."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="The name of the Kubernetes pod.")
    namespace: str = Field(..., description="The namespace the pod belongs to.")
    phase: Optional[str] = Field(None, description="The pod phase reported in its status (e.g. Running).")
    containers: List[Container] = Field(default_factory=list, description="Containers in declaration order.")


class ContainerUsage(BaseModel):
    """A single measured memory sample for a container."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="The container name reported by the metrics API.")
    memory_usage: int = Field(0, ge=0, description="Measured memory usage in bytes.")


class PodMetrics(BaseModel):
    """
    Current metrics snapshot of a pod. Entries are aligned by index with the
    pod's container list.
    """

    model_config = ConfigDict(frozen=True)

    pod_name: str = Field(..., description="The name of the Kubernetes pod.")
    namespace: str = Field(..., description="The namespace the pod belongs to.")
    containers: List[ContainerUsage] = Field(default_factory=list)


class NodeSelectorRequirement(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    operator: str
    values: List[str] = Field(default_factory=list)


class NodeSelectorTerm(BaseModel):
    model_config = ConfigDict(frozen=True)

    match_expressions: List[NodeSelectorRequirement] = Field(default_factory=list)


class ClaimReference(BaseModel):
    """The persistent volume claim a volume is bound to."""

    model_config = ConfigDict(frozen=True)

    namespace: str
    name: str


class PersistentVolume(BaseModel):
    """
    A persistent volume with its required node-affinity terms and optional
    claim binding.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="The name of the persistent volume.")
    node_affinity_terms: List[NodeSelectorTerm] = Field(
        default_factory=list,
        description="Required node selector terms; empty when the volume has no node affinity.",
    )
    claim_ref: Optional[ClaimReference] = Field(None, description="Bound claim, if any.")
