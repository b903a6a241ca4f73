"""
kubeusage: read-only memory usage and persistent-volume affinity reports
for Kubernetes clusters.
"""

__version__ = "0.1.0"
