"""Effective-origin resolution over a promotion-mechanism tree.

A node's effective origin is the origin set on the node itself or, failing
that, on its nearest ancestor that sets one. The resolver enforces:

- Targets are matched by identity, never by equality. Sibling mechanisms are
  frequently configured identically and must still resolve independently.
- The walk is pre-order and stops at the target; sibling subtrees that do
  not contain the target cannot influence the answer.
- A target that is not reachable from the root is a caller bug and raises
  ``OriginResolutionError`` instead of answering ``None``.
"""

from __future__ import annotations

import logging

from freightline.models.mechanisms import ConfigNode
from freightline.models.origins import FreightOrigin

logger = logging.getLogger(__name__)


class OriginResolutionError(RuntimeError):
    """Raised when ``resolve_origin`` is called with nodes that do not form a
    valid (root, descendant) pair."""


class _Unreached:
    """Marks a subtree walk that did not encounter the target."""


_UNREACHED = _Unreached()


def resolve_origin(root: ConfigNode, target: ConfigNode) -> FreightOrigin | None:
    """Return the effective origin of ``target`` within the tree at ``root``.

    Parameters
    ----------
    root:
        Root of the configuration tree, typically a ``Stage`` or its
        ``PromotionMechanisms``.
    target:
        The node whose origin is wanted. Must be ``root`` itself or an object
        held somewhere beneath it.

    Returns
    -------
    FreightOrigin | None
        ``None`` only when neither the target nor any of its ancestors sets
        an origin.

    Raises
    ------
    OriginResolutionError
        If either argument is not a configuration node, or ``target`` is not
        reachable from ``root``.
    """
    for label, node in (("root", root), ("target", target)):
        if not isinstance(node, ConfigNode):
            raise OriginResolutionError(
                f"{label} must be a promotion configuration node, "
                f"got {type(node).__name__}"
            )

    result = _walk(root, target, None)
    if isinstance(result, _Unreached):
        raise OriginResolutionError(
            f"{type(target).__name__} is not reachable from "
            f"{type(root).__name__}; target must be a node of the root's tree"
        )

    logger.debug(
        "Resolved origin of %s to %s", type(target).__name__, result or "<none>"
    )
    return result


def _walk(
    node: ConfigNode,
    target: ConfigNode,
    inherited: FreightOrigin | None,
) -> FreightOrigin | None | _Unreached:
    own = node.own_origin()
    effective = own if own is not None else inherited
    if node is target:
        return effective
    for child in node.children():
        result = _walk(child, target, effective)
        if not isinstance(result, _Unreached):
            return result
    return _UNREACHED
