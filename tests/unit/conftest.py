"""
Unit Test Fixtures.

Fixtures for unit tests - all external dependencies are mocked.
Unit tests never talk to a real cluster or a real Gabi instance.
"""

from collections.abc import Callable
from pathlib import Path

import httpx
import pytest

from gabi_cli.schemas import QueryResponse

KUBECONFIG_TEMPLATE = """\
apiVersion: v1
kind: Config
current-context: {current}
clusters:
- name: dev-cluster
  cluster:
    server: https://api.dev.example.com:6443
contexts:
- name: dev
  context:
    cluster: dev-cluster
    user: dev-user
    namespace: team-a
- name: bare
  context:
    cluster: dev-cluster
    user: dev-user
- name: certonly
  context:
    cluster: dev-cluster
    user: cert-user
    namespace: team-a
users:
- name: dev-user
  user:
    token: sha256~dev-token
- name: cert-user
  user:
    username: admin
"""


@pytest.fixture
def kubeconfig_factory(tmp_path: Path) -> Callable[[str], str]:
    """
    Write a kubeconfig with the given current context and return its path.

    Contexts:
        dev       - token user, namespace team-a
        bare      - token user, no namespace
        certonly  - user without a token
    """

    def _write(current: str = "dev") -> str:
        path = tmp_path / "kubeconfig"
        path.write_text(KUBECONFIG_TEMPLATE.format(current=current))
        return str(path)

    return _write


class FakeBackend:
    """
    Stand-in for GabiClient used by shell tests.

    Returns queued responses (or raises queued exceptions) in order and
    records every query it receives.
    """

    def __init__(self, *outcomes: QueryResponse | BaseException) -> None:
        self.outcomes = list(outcomes)
        self.queries: list[str] = []
        self.on_query: Callable[[str], None] | None = None

    def query(self, query: str) -> QueryResponse:
        self.queries.append(query)
        if self.on_query is not None:
            self.on_query(query)
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


@pytest.fixture
def fake_backend() -> type[FakeBackend]:
    """The FakeBackend class, for building per-test instances."""
    return FakeBackend


@pytest.fixture
def recorded_requests() -> list[httpx.Request]:
    """Requests seen by mock transports."""
    return []
