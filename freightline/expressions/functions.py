"""Freight functions for pipeline expressions.

Exposes ``warehouse()``, ``commitFrom()``, ``imageFrom()`` and
``chartFrom()`` to an expression runtime. Each function validates its own
arguments and then delegates to ``ArtifactLocator``; locator errors propagate
unchanged.

Signatures::

    warehouse(name)                         -> FreightOrigin
    commitFrom(repoURL[, origin])           -> GitCommit | None
    imageFrom(repoURL[, origin])            -> Image | None
    chartFrom(repoURL[, chartName][, origin]) -> Chart | None
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from freightline.core.artifact_locator import ArtifactLocator
from freightline.models.freight import Chart, FreightReference, GitCommit, Image
from freightline.models.origins import FreightOrigin, FreightOriginKind, FreightRequest

ExprFn = Callable[..., Any]


class FunctionArgumentError(TypeError):
    """Raised when an expression function is called with bad arguments."""


def _type_name(value: Any) -> str:
    return type(value).__name__


def _check_arity(args: tuple[Any, ...], low: int, high: int) -> None:
    if not low <= len(args) <= high:
        expected = str(low) if low == high else f"{low}-{high}"
        noun = "argument" if expected == "1" else "arguments"
        raise FunctionArgumentError(f"expected {expected} {noun}, got {len(args)}")


def _repo_url(args: tuple[Any, ...]) -> str:
    if not isinstance(args[0], str):
        raise FunctionArgumentError(
            f"first argument must be string, got {_type_name(args[0])}"
        )
    return args[0]


def warehouse(*args: Any) -> FreightOrigin:
    """Return the origin for the Warehouse with the given name."""
    _check_arity(args, 1, 1)
    name = args[0]
    if not isinstance(name, str):
        raise FunctionArgumentError(f"argument must be string, got {_type_name(name)}")
    if not name:
        raise FunctionArgumentError("name must not be empty")
    return FreightOrigin(kind=FreightOriginKind.WAREHOUSE, name=name)


def freight_operations(
    locator: ArtifactLocator,
    namespace: str,
    freight_requests: Sequence[FreightRequest],
    freight_refs: Sequence[FreightReference],
) -> dict[str, ExprFn]:
    """Return the Freight functions bound to one Stage's Freight.

    The returned mapping is keyed by the names the functions are exposed
    under in expressions.
    """

    def commit_from(*args: Any) -> GitCommit | None:
        _check_arity(args, 1, 2)
        repo_url = _repo_url(args)
        origin = None
        if len(args) == 2:
            if not isinstance(args[1], FreightOrigin):
                raise FunctionArgumentError(
                    f"second argument must be FreightOrigin, got {_type_name(args[1])}"
                )
            origin = args[1]
        return locator.find_commit(
            namespace, freight_requests, origin, freight_refs, repo_url
        )

    def image_from(*args: Any) -> Image | None:
        _check_arity(args, 1, 2)
        repo_url = _repo_url(args)
        origin = None
        if len(args) == 2:
            if not isinstance(args[1], FreightOrigin):
                raise FunctionArgumentError(
                    f"second argument must be FreightOrigin, got {_type_name(args[1])}"
                )
            origin = args[1]
        return locator.find_image(
            namespace, freight_requests, origin, freight_refs, repo_url
        )

    def chart_from(*args: Any) -> Chart | None:
        _check_arity(args, 1, 3)
        repo_url = _repo_url(args)
        chart_name = ""
        origin = None

        if len(args) >= 2:
            if isinstance(args[1], str):
                chart_name = args[1]
            elif isinstance(args[1], FreightOrigin):
                origin = args[1]
            else:
                raise FunctionArgumentError(
                    "second argument must be string or FreightOrigin, "
                    f"got {_type_name(args[1])}"
                )

        if len(args) == 3:
            if origin is not None:
                raise FunctionArgumentError(
                    "when using three arguments, second argument must be string, "
                    "got FreightOrigin"
                )
            if not isinstance(args[2], FreightOrigin):
                raise FunctionArgumentError(
                    f"third argument must be FreightOrigin, got {_type_name(args[2])}"
                )
            origin = args[2]

        return locator.find_chart(
            namespace, freight_requests, origin, freight_refs, repo_url, chart_name
        )

    return {
        "warehouse": warehouse,
        "commitFrom": commit_from,
        "imageFrom": image_from,
        "chartFrom": chart_from,
    }
