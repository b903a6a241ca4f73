class KubeUsageError(Exception):
    """Base exception for kubeusage."""

    pass


class ClusterConfigError(KubeUsageError):
    """Raised when the kubeconfig cannot be read or a client cannot be built from it."""

    pass


class ContextNotFoundError(ClusterConfigError):
    """Raised when the requested context is missing from the kubeconfig."""

    def __init__(self, context: str, kubeconfig: str):
        self.context = context
        self.kubeconfig = kubeconfig
        super().__init__(f"Context '{context}' not found in kubeconfig '{kubeconfig}'.")


class ClusterAccessError(KubeUsageError):
    """Raised when listing pods or persistent volumes fails."""

    pass


class MetricsUnavailableError(KubeUsageError):
    """Raised when the metrics of a single pod cannot be fetched."""

    pass
