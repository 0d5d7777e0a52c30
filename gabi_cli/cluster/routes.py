"""
Endpoint Locator.

Finds the Gabi instance by listing OpenShift routes in a namespace and
picking the first one whose name carries the Gabi prefix.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

import urllib3
from kubernetes import client
from kubernetes.client import ApiException

from gabi_cli.core.exceptions import EndpointLookupError, RouteNotFoundError, UnauthorizedError
from gabi_cli.core.logging import get_logger, log_with_source

logger = get_logger(__name__)

GABI_ROUTE_PREFIX = "gabi-"

ROUTE_GROUP = "route.openshift.io"
ROUTE_VERSION = "v1"
ROUTE_PLURAL = "routes"


@dataclass(frozen=True)
class GabiEndpoint:
    url: str
    route_name: str
    tls: bool


def endpoint_url(route: Dict[str, Any]) -> str:
    """Build the base URL for a route object.

    Always https, even when the route has no TLS section.
    """

    spec = route.get("spec") or {}
    return f"https://{spec.get('host', '')}{spec.get('path') or ''}"


def _select_route(routes: Dict[str, Any], prefix: str) -> Optional[Dict[str, Any]]:
    for route in routes.get("items") or []:
        name = (route.get("metadata") or {}).get("name", "")
        if name.startswith(prefix):
            return route
    return None


def find_gabi_endpoint(
    api_client: client.ApiClient,
    namespace: str,
    *,
    prefix: str = GABI_ROUTE_PREFIX,
) -> GabiEndpoint:
    """Locate the Gabi route in ``namespace``.

    Raises:
        UnauthorizedError: the cluster rejected the token (401)
        RouteNotFoundError: no route name starts with ``prefix``
        EndpointLookupError: any other listing failure
    """

    api = client.CustomObjectsApi(api_client)
    try:
        routes = api.list_namespaced_custom_object(
            group=ROUTE_GROUP,
            version=ROUTE_VERSION,
            namespace=namespace,
            plural=ROUTE_PLURAL,
        )
    except ApiException as exc:
        if exc.status == 401:
            raise UnauthorizedError(exc.reason or "Unauthorized") from exc
        raise EndpointLookupError(f"couldn't find Gabi instance: {exc.status} {exc.reason}") from exc
    except (urllib3.exceptions.HTTPError, OSError) as exc:
        raise EndpointLookupError(f"couldn't find Gabi instance: {exc}") from exc

    route = _select_route(routes, prefix)
    if route is None:
        raise RouteNotFoundError(namespace)

    spec = route.get("spec") or {}
    endpoint = GabiEndpoint(
        url=endpoint_url(route),
        route_name=route["metadata"]["name"],
        tls=spec.get("tls") is not None,
    )
    log_with_source(
        logger,
        "cluster",
        "debug",
        "Gabi route selected",
        route=endpoint.route_name,
        tls=endpoint.tls,
        namespace=namespace,
    )
    return endpoint
