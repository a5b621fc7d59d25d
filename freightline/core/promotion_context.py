"""Promotion context: the executor's view of one Stage.

Wires ``resolve_origin`` and ``ArtifactLocator`` together: for a mechanism
the executor is about to apply, first compute its effective origin within
the Stage's tree, then locate the artifact from that origin (or infer the
origin when none is configured anywhere on the path).
"""

from __future__ import annotations

from freightline.config import FreightlineConfig
from freightline.core.artifact_locator import ArtifactLocator
from freightline.core.origin_resolver import resolve_origin
from freightline.core.warehouse_store import DirectoryWarehouseStore, WarehouseGetter
from freightline.models.freight import Chart, GitCommit, Image
from freightline.models.mechanisms import ConfigNode
from freightline.models.origins import FreightOrigin
from freightline.models.stages import Stage


class PromotionContext:
    """Resolves artifacts for mechanisms of a single Stage.

    Parameters
    ----------
    stage:
        The Stage being promoted. Its spec and status are read on every call;
        nothing is cached.
    warehouses:
        Warehouse reader for origin inference. Defaults to a
        ``DirectoryWarehouseStore`` at ``config.warehouse_store_path``.
    config:
        Runtime configuration. Uses defaults if not provided.
    """

    def __init__(
        self,
        stage: Stage,
        *,
        warehouses: WarehouseGetter | None = None,
        config: FreightlineConfig | None = None,
    ) -> None:
        self.stage = stage
        self.config = config or FreightlineConfig()
        if warehouses is None:
            warehouses = DirectoryWarehouseStore(self.config.warehouse_store_path)
        self.locator = ArtifactLocator(warehouses)

    @property
    def namespace(self) -> str:
        return self.stage.namespace or self.config.default_namespace

    def origin_for(self, node: ConfigNode) -> FreightOrigin | None:
        """Return the effective origin of ``node`` within this Stage."""
        return resolve_origin(self.stage, node)

    def find_commit(self, node: ConfigNode, repo_url: str) -> GitCommit | None:
        return self.locator.find_commit(
            self.namespace,
            self.stage.spec.requested_freight,
            self.origin_for(node),
            self.stage.status.freight,
            repo_url,
        )

    def find_image(self, node: ConfigNode, repo_url: str) -> Image | None:
        return self.locator.find_image(
            self.namespace,
            self.stage.spec.requested_freight,
            self.origin_for(node),
            self.stage.status.freight,
            repo_url,
        )

    def find_chart(
        self, node: ConfigNode, repo_url: str, chart_name: str = ""
    ) -> Chart | None:
        return self.locator.find_chart(
            self.namespace,
            self.stage.spec.requested_freight,
            self.origin_for(node),
            self.stage.status.freight,
            repo_url,
            chart_name,
        )
