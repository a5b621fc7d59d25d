"""Origin resolution and artifact location."""

from freightline.core.artifact_locator import (
    AmbiguousOriginError,
    ArtifactKind,
    ArtifactLocator,
    ArtifactLocatorError,
    UpstreamError,
    WarehouseNotFoundError,
)
from freightline.core.origin_resolver import OriginResolutionError, resolve_origin
from freightline.core.promotion_context import PromotionContext
from freightline.core.warehouse_store import (
    DirectoryWarehouseStore,
    InMemoryWarehouseStore,
    WarehouseGetter,
    WarehouseStoreError,
)

__all__ = [
    "resolve_origin",
    "OriginResolutionError",
    "ArtifactKind",
    "ArtifactLocator",
    "ArtifactLocatorError",
    "AmbiguousOriginError",
    "UpstreamError",
    "WarehouseNotFoundError",
    "PromotionContext",
    "WarehouseGetter",
    "InMemoryWarehouseStore",
    "DirectoryWarehouseStore",
    "WarehouseStoreError",
]
