"""Freight artifact models: commits, images, charts and the references
that bundle them under a producing origin."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from freightline.models.origins import FreightOrigin

_WIRE = ConfigDict(frozen=True, populate_by_name=True)


class GitCommit(BaseModel):
    """A specific commit from a git repository."""

    model_config = _WIRE

    repo_url: str = Field(alias="repoURL")
    id: str = ""
    branch: str = ""
    tag: str = ""
    message: str = ""
    author: str = ""
    committer: str = ""


class Image(BaseModel):
    """A specific container image revision."""

    model_config = _WIRE

    repo_url: str = Field(alias="repoURL")
    git_repo_url: str = Field(default="", alias="gitRepoURL")
    tag: str = ""
    digest: str = ""


class Chart(BaseModel):
    """A specific Helm chart version.

    For OCI registries ``repo_url`` names the chart itself and ``name`` is
    left empty.
    """

    model_config = _WIRE

    repo_url: str = Field(alias="repoURL")
    name: str = ""
    version: str = ""


class FreightReference(BaseModel):
    """Artifacts produced together by a single origin.

    Within one reference there is at most one commit per repository, one
    image per repository and one chart per (repository, name) pair.
    """

    model_config = _WIRE

    name: str = ""
    origin: FreightOrigin
    commits: list[GitCommit] = []
    images: list[Image] = []
    charts: list[Chart] = []
