"""Stage models: what a Stage requests and how it promotes it."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from freightline.models.freight import FreightReference
from freightline.models.mechanisms import ConfigNode, PromotionMechanisms
from freightline.models.origins import FreightRequest


class StageSpec(BaseModel):
    """Desired configuration of a Stage."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    requested_freight: list[FreightRequest] = []
    promotion_mechanisms: PromotionMechanisms | None = None


class StageStatus(BaseModel):
    """Observed state of a Stage."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    freight: list[FreightReference] = []  # currently promotable Freight


class Stage(ConfigNode):
    """A deployment stage; the root of its promotion-mechanism tree.

    A Stage never carries an origin of its own.
    """

    namespace: str = ""
    name: str = ""
    spec: StageSpec = Field(default_factory=StageSpec)
    status: StageStatus = Field(default_factory=StageStatus)

    def children(self) -> list[ConfigNode]:
        if self.spec.promotion_mechanisms is None:
            return []
        return [self.spec.promotion_mechanisms]
