"""Promotion-mechanism configuration tree.

A Stage's promotion mechanisms form a finite tree of heterogeneous node kinds.
Every node exposes the same two capabilities:

- ``own_origin()``: the origin explicitly set on the node, if any.
- ``children()``: the node's present child nodes, in declaration order.

Absent optional slots are omitted from ``children()``. Nodes are ordinary
mutable models; walkers must treat them as read-only.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from freightline.models.origins import FreightOrigin


class ConfigNode(BaseModel):
    """A node of the promotion-mechanism configuration tree."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def own_origin(self) -> FreightOrigin | None:
        return None

    def children(self) -> list[ConfigNode]:
        return []


class MechanismNode(ConfigNode):
    """A configuration node that may pin an origin for itself and its
    descendants."""

    origin: FreightOrigin | None = None

    def own_origin(self) -> FreightOrigin | None:
        return self.origin


def _present(*slots: ConfigNode | None) -> list[ConfigNode]:
    return [s for s in slots if s is not None]


# ---------------------------------------------------------------------------
# git repository updates
# ---------------------------------------------------------------------------


class KustomizeImageUpdate(MechanismNode):
    """Sets an image in a Kustomization file."""

    image: str = ""
    path: str = ""
    use_digest: bool = False


class KustomizePromotionMechanism(MechanismNode):
    images: list[KustomizeImageUpdate] = []

    def children(self) -> list[ConfigNode]:
        return list(self.images)


class HelmImageUpdate(MechanismNode):
    """Writes an image reference into a Helm values file."""

    image: str = ""
    values_file_path: str = ""
    key: str = ""
    value: str = ""  # ImageAndTag, Tag, ImageAndDigest or Digest


class HelmChartDependencyUpdate(MechanismNode):
    """Bumps a chart dependency of an umbrella chart."""

    repository: str = ""
    name: str = ""
    chart_path: str = ""


class HelmPromotionMechanism(MechanismNode):
    images: list[HelmImageUpdate] = []
    charts: list[HelmChartDependencyUpdate] = []

    def children(self) -> list[ConfigNode]:
        return [*self.images, *self.charts]


class RenderImageUpdate(MechanismNode):
    image: str = ""
    use_tag: bool = False
    use_digest: bool = False


class RenderPromotionMechanism(MechanismNode):
    """Renders environment-specific manifests into a branch."""

    images: list[RenderImageUpdate] = []

    def children(self) -> list[ConfigNode]:
        return list(self.images)


class GitRepoUpdate(MechanismNode):
    """Writes promoted artifacts into a git repository."""

    repo_url: str = Field(default="", alias="repoURL")
    read_branch: str = ""
    write_branch: str = ""
    kustomize: KustomizePromotionMechanism | None = None
    helm: HelmPromotionMechanism | None = None
    render: RenderPromotionMechanism | None = None

    def children(self) -> list[ConfigNode]:
        return _present(self.kustomize, self.helm, self.render)


# ---------------------------------------------------------------------------
# Argo CD application updates
# ---------------------------------------------------------------------------


class ArgoCDKustomizeImageUpdate(MechanismNode):
    image: str = ""
    use_digest: bool = False


class ArgoCDKustomize(MechanismNode):
    images: list[ArgoCDKustomizeImageUpdate] = []

    def children(self) -> list[ConfigNode]:
        return list(self.images)


class ArgoCDHelmImageUpdate(MechanismNode):
    image: str = ""
    key: str = ""
    value: str = ""


class ArgoCDHelm(MechanismNode):
    images: list[ArgoCDHelmImageUpdate] = []

    def children(self) -> list[ConfigNode]:
        return list(self.images)


class ArgoCDSourceUpdate(MechanismNode):
    """Updates one source of an Argo CD Application."""

    repo_url: str = Field(default="", alias="repoURL")
    chart: str = ""
    update_target_revision: bool = False
    kustomize: ArgoCDKustomize | None = None
    helm: ArgoCDHelm | None = None

    def children(self) -> list[ConfigNode]:
        return _present(self.kustomize, self.helm)


class ArgoCDAppUpdate(MechanismNode):
    app_name: str = ""
    app_namespace: str = ""
    source_updates: list[ArgoCDSourceUpdate] = []

    def children(self) -> list[ConfigNode]:
        return list(self.source_updates)


# ---------------------------------------------------------------------------
# Root of a Stage's mechanisms
# ---------------------------------------------------------------------------


class PromotionMechanisms(MechanismNode):
    """Everything a Stage does to apply promoted Freight."""

    git_repo_updates: list[GitRepoUpdate] = []
    argocd_app_updates: list[ArgoCDAppUpdate] = Field(
        default=[], alias="argoCDAppUpdates"
    )

    def children(self) -> list[ConfigNode]:
        return [*self.git_repo_updates, *self.argocd_app_updates]
