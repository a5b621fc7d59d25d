"""Freight origin and request models.

An origin identifies the producer of a piece of Freight. Origins are compared
structurally (kind + name); two separately constructed origins with the same
kind and name are the same origin.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class FreightOriginKind(str, Enum):
    """Kinds of objects that can produce Freight."""

    WAREHOUSE = "Warehouse"


class FreightOrigin(BaseModel):
    """Identity of the producer of a piece of Freight."""

    model_config = ConfigDict(frozen=True)

    kind: FreightOriginKind = FreightOriginKind.WAREHOUSE
    name: str = Field(min_length=1)

    def __str__(self) -> str:
        return f"{self.kind.value}/{self.name}"


class FreightSources(BaseModel):
    """Where a Stage accepts requested Freight from."""

    model_config = ConfigDict(frozen=True)

    direct: bool = False  # straight from the origin
    stages: list[str] = []  # upstream stage names


class FreightRequest(BaseModel):
    """A Stage's declaration that it wants Freight from an origin."""

    model_config = ConfigDict(frozen=True)

    origin: FreightOrigin
    sources: FreightSources = FreightSources()
