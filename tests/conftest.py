"""Shared test fixtures for Freightline."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from freightline.core.artifact_locator import ArtifactLocator
from freightline.core.warehouse_store import DirectoryWarehouseStore, InMemoryWarehouseStore
from freightline.models.origins import FreightOrigin, FreightRequest
from freightline.models.warehouses import (
    ChartSubscription,
    GitSubscription,
    ImageSubscription,
    RepoSubscription,
    Warehouse,
)

TEST_NAMESPACE = "test-namespace"


@pytest.fixture
def origin1() -> FreightOrigin:
    return FreightOrigin(name="test-warehouse")


@pytest.fixture
def origin2() -> FreightOrigin:
    return FreightOrigin(name="some-other-warehouse")


@pytest.fixture
def warehouse_store() -> InMemoryWarehouseStore:
    """Provide an empty in-memory Warehouse store."""
    return InMemoryWarehouseStore()


@pytest.fixture
def directory_store(tmp_path: Path) -> DirectoryWarehouseStore:
    """Provide a Warehouse store rooted in a temp directory."""
    return DirectoryWarehouseStore(tmp_path / "warehouses")


@pytest.fixture
def locator(warehouse_store: InMemoryWarehouseStore) -> ArtifactLocator:
    """Provide an ArtifactLocator reading from the in-memory store."""
    return ArtifactLocator(warehouse_store)


@pytest.fixture
def requests_for() -> Callable[..., list[FreightRequest]]:
    """Factory fixture: FreightRequests for the given origins, in order."""

    def _factory(*origins: FreightOrigin) -> list[FreightRequest]:
        return [FreightRequest(origin=o) for o in origins]

    return _factory


# ---------------------------------------------------------------------------
# Warehouse factory: shared across test modules
# ---------------------------------------------------------------------------


@pytest.fixture
def make_warehouse() -> Callable[..., Warehouse]:
    """Factory fixture: build a Warehouse with sensible defaults.

    ``git`` and ``images`` are repo URLs; ``charts`` are (repo URL, name)
    pairs.
    """

    def _factory(
        name: str = "test-warehouse",
        namespace: str = TEST_NAMESPACE,
        *,
        git: list[str] | None = None,
        images: list[str] | None = None,
        charts: list[tuple[str, str]] | None = None,
        **overrides: Any,
    ) -> Warehouse:
        subs = [RepoSubscription(git=GitSubscription(repo_url=u)) for u in git or []]
        subs += [RepoSubscription(image=ImageSubscription(repo_url=u)) for u in images or []]
        subs += [
            RepoSubscription(chart=ChartSubscription(repo_url=u, name=n))
            for u, n in charts or []
        ]
        defaults: dict[str, Any] = {
            "namespace": namespace,
            "name": name,
            "subscriptions": subs,
        }
        defaults.update(overrides)
        return Warehouse(**defaults)

    return _factory
