"""
Gabi CLI.

Interactive command-line client for a Gabi query service running in an
OpenShift cluster.

Architecture:
- Credentials come from the caller's kubeconfig (no login flow)
- The Gabi instance is located by listing routes in the namespace
- Queries are sent over HTTP (httpx) with the kubeconfig bearer token
- Results are rendered as tables with Rich

Usage:
    gabi --help
    gabi -n my-namespace
    python -m gabi_cli -kubeconfig ~/.kube/other-config
"""

__version__ = "0.1.0"
