"""Warehouse read access.

The locator only ever needs one operation from the object store: fetch a
Warehouse by namespace and name. ``WarehouseGetter`` captures that contract;
the stores here satisfy it for tests and local tooling.

Directory layout: {base_path}/{namespace}/{name}.json
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Protocol, runtime_checkable

from pydantic import ValidationError

from freightline.models.warehouses import Warehouse

logger = logging.getLogger(__name__)

_IDENTIFIER = re.compile(r"^[a-z0-9]([-a-z0-9.]*[a-z0-9])?$")


class WarehouseStoreError(RuntimeError):
    """Raised when a Warehouse cannot be read from or written to a store."""


@runtime_checkable
class WarehouseGetter(Protocol):
    """Protocol for namespaced Warehouse reads.

    Implementations return ``None`` when the Warehouse does not exist and
    raise for any other failure (transport, permissions, corrupt data).
    """

    def get_warehouse(self, namespace: str, name: str) -> Warehouse | None:
        ...


def _check_identifier(kind: str, value: str) -> None:
    if not _IDENTIFIER.match(value):
        raise WarehouseStoreError(
            f"Invalid {kind} {value!r}: must be a lowercase DNS-style name"
        )


class InMemoryWarehouseStore:
    """Dict-backed Warehouse store."""

    def __init__(self, warehouses: list[Warehouse] | None = None) -> None:
        self._warehouses: dict[tuple[str, str], Warehouse] = {}
        for warehouse in warehouses or []:
            self.put(warehouse)

    def put(self, warehouse: Warehouse) -> None:
        self._warehouses[(warehouse.namespace, warehouse.name)] = warehouse

    def get_warehouse(self, namespace: str, name: str) -> Warehouse | None:
        return self._warehouses.get((namespace, name))


class DirectoryWarehouseStore:
    """Warehouses persisted as one JSON document each.

    Parameters
    ----------
    base_path:
        Root directory of the store. Created on first write.
    """

    def __init__(self, base_path: Path) -> None:
        self._base = Path(base_path)

    def _warehouse_path(self, namespace: str, name: str) -> Path:
        _check_identifier("namespace", namespace)
        _check_identifier("name", name)
        return self._base / namespace / f"{name}.json"

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def put(self, warehouse: Warehouse) -> Path:
        """Write a Warehouse, replacing any previous version."""
        path = self._warehouse_path(warehouse.namespace, warehouse.name)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(warehouse.model_dump_json(by_alias=True, indent=2), encoding="utf-8")
        logger.info("Stored Warehouse %s/%s at %s", warehouse.namespace, warehouse.name, path)
        return path

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def get_warehouse(self, namespace: str, name: str) -> Warehouse | None:
        """Read a Warehouse, or ``None`` if it has never been stored."""
        path = self._warehouse_path(namespace, name)
        if not path.exists():
            return None
        try:
            warehouse = Warehouse.model_validate_json(path.read_bytes())
        except (OSError, ValidationError) as exc:
            raise WarehouseStoreError(
                f"Cannot read Warehouse {namespace}/{name} from {path}: {exc}"
            ) from exc
        if (warehouse.namespace, warehouse.name) != (namespace, name):
            raise WarehouseStoreError(
                f"Document at {path} describes Warehouse "
                f"{warehouse.namespace}/{warehouse.name}, expected {namespace}/{name}"
            )
        return warehouse
