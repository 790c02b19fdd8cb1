"""Shared pytest fixtures and test-run configuration."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Callable, Iterator
from pathlib import Path

import httpx
import pytest
from ghreviews.observability import LOGGER_NAME

GraphQLHandler = Callable[[dict[str, object]], httpx.Response]


def pytest_addoption(parser: pytest.Parser) -> None:
    """Add an opt-in flag for tests that reach the live GitHub API."""
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Run tests marked as integration (live GitHub API).",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip integration tests unless explicitly enabled."""
    if config.getoption("--run-integration") or os.getenv("RUN_INTEGRATION_TESTS") == "1":
        return

    skip_marker = pytest.mark.skip(
        reason="Live GitHub tests are off. Use --run-integration or RUN_INTEGRATION_TESTS=1."
    )
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_marker)


@pytest.fixture(autouse=True)
def reset_ghreviews_logger() -> Iterator[None]:
    """Drop handlers installed by setup_logging so streams do not leak across tests."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def make_graphql_client() -> Callable[[GraphQLHandler], httpx.Client]:
    """Build clients whose GraphQL POSTs are answered by a handler over the request body."""

    def _factory(handler: GraphQLHandler) -> httpx.Client:
        def _transport_handler(request: httpx.Request) -> httpx.Response:
            assert request.method == "POST"
            assert request.url.path == "/graphql"
            return handler(json.loads(request.content))

        transport = httpx.MockTransport(_transport_handler)
        return httpx.Client(base_url="https://api.github.com", transport=transport)

    return _factory


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Write YAML config text to a temporary file and return its path."""

    def _write(text: str) -> Path:
        path = tmp_path / "config.yml"
        path.write_text(text, encoding="utf-8")
        return path

    return _write
