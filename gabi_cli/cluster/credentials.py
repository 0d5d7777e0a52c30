"""
Credential Resolver.

Loads cluster connection parameters and the bearer token from kubeconfig.
Authentication must already exist (`oc login`); no login flow happens here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

import yaml
from kubernetes import client, config
from kubernetes.config.config_exception import ConfigException

from gabi_cli.core.exceptions import CredentialsError
from gabi_cli.core.logging import get_logger, log_with_source

logger = get_logger(__name__)

DEFAULT_NAMESPACE = "default"
_BEARER_PREFIX = "Bearer "


@dataclass(frozen=True)
class ClusterCredentials:
    api_client: client.ApiClient
    host: str
    namespace: str
    token: str


def _context_namespace(kubeconfig: Optional[str], context: Optional[str]) -> str:
    """Namespace of the selected (or current) kubeconfig context."""
    contexts, active = config.list_kube_config_contexts(config_file=kubeconfig)
    selected: dict[str, Any] | None = active
    if context:
        selected = next((c for c in contexts if c.get("name") == context), None)
        if selected is None:
            raise CredentialsError(f"context {context!r} not found in kubeconfig")
    return (selected or {}).get("context", {}).get("namespace") or DEFAULT_NAMESPACE


def _bearer_token(api_client: client.ApiClient) -> str:
    """Extract the raw token from the loaded client configuration."""
    authorization = api_client.configuration.get_api_key_with_prefix("authorization") or ""
    if authorization.startswith(_BEARER_PREFIX):
        return authorization[len(_BEARER_PREFIX):].strip()
    return authorization.strip()


def load_credentials(
    *,
    kubeconfig: Optional[str] = None,
    namespace: Optional[str] = None,
    context: Optional[str] = None,
) -> ClusterCredentials:
    """Load kubeconfig and resolve namespace and bearer token.

    The namespace falls back to the context's namespace when not given.

    Raises:
        CredentialsError: kubeconfig cannot be loaded or carries no token
    """

    try:
        api_client = config.new_client_from_config(config_file=kubeconfig, context=context)
        if not namespace:
            namespace = _context_namespace(kubeconfig, context)
        token = _bearer_token(api_client)
    except (ConfigException, yaml.YAMLError, OSError) as exc:
        raise CredentialsError(str(exc)) from exc

    if not token:
        api_client.close()
        raise CredentialsError("no Bearer Token please use `oc login`")

    host = api_client.configuration.host
    log_with_source(logger, "cluster", "debug", "Credentials loaded", host=host, namespace=namespace)

    return ClusterCredentials(api_client=api_client, host=host, namespace=namespace, token=token)
