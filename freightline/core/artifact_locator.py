"""Artifact location: which commit, image or chart a promotion should use.

Given an origin, location is a pure filter over a Stage's Freight references.
Without one, the origin is first inferred: every Warehouse the Stage requests
Freight from is read, and the Warehouses subscribed to the wanted repository
are the candidates.

- No candidate means the artifact cannot be provided; the answer is ``None``.
- One candidate becomes the origin.
- Several candidates are a configuration defect; ``AmbiguousOriginError``.

A Warehouse named in a request that does not exist is NOT a "no candidate"
case; it raises ``WarehouseNotFoundError``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from enum import Enum

from freightline.core.urls import normalize_git_url
from freightline.core.warehouse_store import WarehouseGetter
from freightline.models.freight import Chart, FreightReference, GitCommit, Image
from freightline.models.origins import FreightOrigin, FreightRequest
from freightline.models.warehouses import RepoSubscription, Warehouse

logger = logging.getLogger(__name__)

Artifact = GitCommit | Image | Chart


class ArtifactKind(str, Enum):
    """The artifact kinds a Warehouse can subscribe to."""

    COMMIT = "commit"
    IMAGE = "image"
    CHART = "chart"


_DESCRIBED = {
    ArtifactKind.COMMIT: "a commit",
    ArtifactKind.IMAGE: "an image",
    ArtifactKind.CHART: "a chart",
}


class ArtifactLocatorError(RuntimeError):
    """Base class for artifact location failures."""


class WarehouseNotFoundError(ArtifactLocatorError):
    """Raised when a requested Warehouse does not exist."""

    def __init__(self, namespace: str, name: str) -> None:
        self.namespace = namespace
        self.name = name
        super().__init__(f'Warehouse "{name}" not found in namespace "{namespace}"')


class AmbiguousOriginError(ArtifactLocatorError):
    """Raised when more than one requested origin could supply an artifact."""

    def __init__(
        self,
        kind: ArtifactKind,
        repo_url: str,
        candidates: list[FreightOrigin],
        chart_name: str = "",
    ) -> None:
        self.kind = kind
        self.repo_url = repo_url
        self.chart_name = chart_name
        self.candidates = candidates
        what = f"{_DESCRIBED[kind]} from repo {repo_url}"
        if chart_name:
            what = f'chart "{chart_name}" from repo {repo_url}'
        super().__init__(
            f"multiple requested Freight could potentially provide {what} "
            f"({', '.join(str(c) for c in candidates)}); "
            "please provide a Freight origin to disambiguate"
        )


class UpstreamError(ArtifactLocatorError):
    """Raised when reading a Warehouse fails for any reason other than absence."""


# ---------------------------------------------------------------------------
# Matching
# ---------------------------------------------------------------------------


def _subscription_matches(
    sub: RepoSubscription, kind: ArtifactKind, repo_url: str, chart_name: str
) -> bool:
    if kind is ArtifactKind.COMMIT:
        return sub.git is not None and normalize_git_url(sub.git.repo_url) == normalize_git_url(repo_url)
    if kind is ArtifactKind.IMAGE:
        return sub.image is not None and sub.image.repo_url == repo_url
    return (
        sub.chart is not None
        and sub.chart.repo_url == repo_url
        and sub.chart.name == chart_name
    )


def _artifacts_of(ref: FreightReference, kind: ArtifactKind) -> Sequence[Artifact]:
    if kind is ArtifactKind.COMMIT:
        return ref.commits
    if kind is ArtifactKind.IMAGE:
        return ref.images
    return ref.charts


def _artifact_matcher(
    kind: ArtifactKind, repo_url: str, chart_name: str
) -> Callable[[Artifact], bool]:
    if kind is ArtifactKind.COMMIT:
        wanted = normalize_git_url(repo_url)
        return lambda a: normalize_git_url(a.repo_url) == wanted
    if kind is ArtifactKind.IMAGE:
        return lambda a: a.repo_url == repo_url
    return lambda a: a.repo_url == repo_url and a.name == chart_name


# ---------------------------------------------------------------------------
# Locator
# ---------------------------------------------------------------------------


class ArtifactLocator:
    """Finds the artifact a promotion should use.

    Holds no state besides its Warehouse reader; safe to share between
    threads when the reader is.

    Parameters
    ----------
    warehouses:
        Read access to Warehouses, used only when an origin must be inferred.
    """

    def __init__(self, warehouses: WarehouseGetter) -> None:
        self._warehouses = warehouses

    def find_commit(
        self,
        namespace: str,
        freight_requests: Sequence[FreightRequest],
        desired_origin: FreightOrigin | None,
        freight_refs: Sequence[FreightReference],
        repo_url: str,
    ) -> GitCommit | None:
        """Return the commit from ``repo_url`` the Stage should use."""
        return self.find_artifact(
            ArtifactKind.COMMIT, namespace, freight_requests,
            desired_origin, freight_refs, repo_url,
        )

    def find_image(
        self,
        namespace: str,
        freight_requests: Sequence[FreightRequest],
        desired_origin: FreightOrigin | None,
        freight_refs: Sequence[FreightReference],
        repo_url: str,
    ) -> Image | None:
        """Return the image from ``repo_url`` the Stage should use."""
        return self.find_artifact(
            ArtifactKind.IMAGE, namespace, freight_requests,
            desired_origin, freight_refs, repo_url,
        )

    def find_chart(
        self,
        namespace: str,
        freight_requests: Sequence[FreightRequest],
        desired_origin: FreightOrigin | None,
        freight_refs: Sequence[FreightReference],
        repo_url: str,
        chart_name: str = "",
    ) -> Chart | None:
        """Return the chart ``chart_name`` from ``repo_url`` the Stage should use.

        Leave ``chart_name`` empty for OCI repositories, whose URL already
        names the chart.
        """
        return self.find_artifact(
            ArtifactKind.CHART, namespace, freight_requests,
            desired_origin, freight_refs, repo_url, chart_name,
        )

    def find_artifact(
        self,
        kind: ArtifactKind,
        namespace: str,
        freight_requests: Sequence[FreightRequest],
        desired_origin: FreightOrigin | None,
        freight_refs: Sequence[FreightReference],
        repo_url: str,
        chart_name: str = "",
    ) -> Artifact | None:
        """Locate an artifact of ``kind``, inferring its origin if needed.

        Returns ``None`` when no requested origin subscribes to the repository
        or when no Freight from the origin carries the artifact yet.

        Raises
        ------
        WarehouseNotFoundError
            If origin inference needs a Warehouse that does not exist.
        AmbiguousOriginError
            If more than one requested origin subscribes to the repository.
        UpstreamError
            If reading a Warehouse fails.
        """
        kind = ArtifactKind(kind)
        if desired_origin is None:
            desired_origin = self.infer_origin(
                kind, namespace, freight_requests, repo_url, chart_name
            )
            if desired_origin is None:
                return None

        matches = _artifact_matcher(kind, repo_url, chart_name)
        for ref in freight_refs:
            if ref.origin != desired_origin:
                continue
            for artifact in _artifacts_of(ref, kind):
                if matches(artifact):
                    return artifact

        logger.debug(
            "No %s from %s in Freight from %s", kind.value, repo_url, desired_origin
        )
        return None

    def infer_origin(
        self,
        kind: ArtifactKind,
        namespace: str,
        freight_requests: Sequence[FreightRequest],
        repo_url: str,
        chart_name: str = "",
    ) -> FreightOrigin | None:
        """Return the single requested origin able to supply the artifact.

        Returns ``None`` when no requested origin subscribes to it.
        """
        # dict preserves request order while de-duplicating
        candidates: dict[FreightOrigin, None] = {}
        for request in freight_requests:
            warehouse = self._get_warehouse(namespace, request.origin.name)
            if any(
                _subscription_matches(sub, kind, repo_url, chart_name)
                for sub in warehouse.subscriptions
            ):
                candidates[request.origin] = None

        if len(candidates) > 1:
            error = AmbiguousOriginError(kind, repo_url, list(candidates), chart_name)
            logger.warning("%s", error)
            raise error
        if not candidates:
            logger.debug(
                "No requested Freight subscribes to %s %s in namespace %s",
                kind.value, repo_url, namespace,
            )
            return None

        origin = next(iter(candidates))
        logger.debug("Inferred origin %s for %s %s", origin, kind.value, repo_url)
        return origin

    def _get_warehouse(self, namespace: str, name: str) -> Warehouse:
        try:
            warehouse = self._warehouses.get_warehouse(namespace, name)
        except Exception as exc:
            raise UpstreamError(
                f'Error getting Warehouse "{name}" in namespace "{namespace}": {exc}'
            ) from exc
        if warehouse is None:
            logger.warning('Warehouse "%s" not found in namespace "%s"', name, namespace)
            raise WarehouseNotFoundError(namespace, name)
        return warehouse
