"""
Cluster access.

Resolves kubeconfig credentials and locates the Gabi route in a namespace.
"""

from gabi_cli.cluster.credentials import ClusterCredentials, load_credentials
from gabi_cli.cluster.routes import GABI_ROUTE_PREFIX, GabiEndpoint, find_gabi_endpoint

__all__ = [
    "GABI_ROUTE_PREFIX",
    "ClusterCredentials",
    "GabiEndpoint",
    "find_gabi_endpoint",
    "load_credentials",
]
