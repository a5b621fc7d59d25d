"""Freightline data models: all Pydantic v2."""

from freightline.models.freight import Chart, FreightReference, GitCommit, Image
from freightline.models.mechanisms import (
    ArgoCDAppUpdate,
    ArgoCDHelm,
    ArgoCDHelmImageUpdate,
    ArgoCDKustomize,
    ArgoCDKustomizeImageUpdate,
    ArgoCDSourceUpdate,
    ConfigNode,
    GitRepoUpdate,
    HelmChartDependencyUpdate,
    HelmImageUpdate,
    HelmPromotionMechanism,
    KustomizeImageUpdate,
    KustomizePromotionMechanism,
    MechanismNode,
    PromotionMechanisms,
    RenderImageUpdate,
    RenderPromotionMechanism,
)
from freightline.models.origins import (
    FreightOrigin,
    FreightOriginKind,
    FreightRequest,
    FreightSources,
)
from freightline.models.stages import Stage, StageSpec, StageStatus
from freightline.models.warehouses import (
    ChartSubscription,
    GitSubscription,
    ImageSubscription,
    RepoSubscription,
    Warehouse,
)

__all__ = [
    # origins
    "FreightOrigin",
    "FreightOriginKind",
    "FreightRequest",
    "FreightSources",
    # freight
    "GitCommit",
    "Image",
    "Chart",
    "FreightReference",
    # warehouses
    "GitSubscription",
    "ImageSubscription",
    "ChartSubscription",
    "RepoSubscription",
    "Warehouse",
    # mechanisms
    "ConfigNode",
    "MechanismNode",
    "PromotionMechanisms",
    "GitRepoUpdate",
    "KustomizePromotionMechanism",
    "KustomizeImageUpdate",
    "HelmPromotionMechanism",
    "HelmImageUpdate",
    "HelmChartDependencyUpdate",
    "RenderPromotionMechanism",
    "RenderImageUpdate",
    "ArgoCDAppUpdate",
    "ArgoCDSourceUpdate",
    "ArgoCDKustomize",
    "ArgoCDKustomizeImageUpdate",
    "ArgoCDHelm",
    "ArgoCDHelmImageUpdate",
    # stages
    "Stage",
    "StageSpec",
    "StageStatus",
]
