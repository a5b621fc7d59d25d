"""Warehouse and repository subscription models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

_WIRE = ConfigDict(frozen=True, populate_by_name=True)


class GitSubscription(BaseModel):
    """Subscription to commits in a git repository."""

    model_config = _WIRE

    repo_url: str = Field(alias="repoURL")
    branch: str = ""


class ImageSubscription(BaseModel):
    """Subscription to tags in a container image repository."""

    model_config = _WIRE

    repo_url: str = Field(alias="repoURL")
    git_repo_url: str = Field(default="", alias="gitRepoURL")
    semver_constraint: str = Field(default="", alias="semverConstraint")


class ChartSubscription(BaseModel):
    """Subscription to versions of a Helm chart."""

    model_config = _WIRE

    repo_url: str = Field(alias="repoURL")
    name: str = ""  # empty for OCI repositories
    semver_constraint: str = Field(default="", alias="semverConstraint")


class RepoSubscription(BaseModel):
    """Exactly one of a git, image or chart subscription."""

    model_config = ConfigDict(frozen=True)

    git: GitSubscription | None = None
    image: ImageSubscription | None = None
    chart: ChartSubscription | None = None

    @model_validator(mode="after")
    def check_exactly_one(self) -> RepoSubscription:
        count = sum(s is not None for s in (self.git, self.image, self.chart))
        if count != 1:
            raise ValueError(
                f"RepoSubscription must set exactly one of git, image, chart; got {count}"
            )
        return self


class Warehouse(BaseModel):
    """A namespaced source of Freight and the repositories it watches."""

    model_config = ConfigDict(frozen=True)

    namespace: str = Field(min_length=1)
    name: str = Field(min_length=1)
    subscriptions: list[RepoSubscription] = []
