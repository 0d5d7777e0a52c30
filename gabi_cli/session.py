"""
Session state.

Resolved once at startup and passed explicitly to the client and shell.
"""

from dataclasses import dataclass

from gabi_cli.cluster import ClusterCredentials, GabiEndpoint


@dataclass(frozen=True)
class Session:
    namespace: str
    cluster_host: str
    base_url: str
    token: str

    @classmethod
    def from_cluster(cls, credentials: ClusterCredentials, endpoint: GabiEndpoint) -> "Session":
        return cls(
            namespace=credentials.namespace,
            cluster_host=credentials.host,
            base_url=endpoint.url,
            token=credentials.token,
        )
