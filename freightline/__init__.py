"""Freightline: origin resolution and artifact location for GitOps promotions.

Decides which upstream artifact (git commit, container image or Helm chart),
from which upstream origin, a Stage should use when it is promoted:

  - ``resolve_origin`` computes the effective origin of any node of a Stage's
    promotion-mechanism tree (own origin, else nearest ancestor's).
  - ``ArtifactLocator`` finds the artifact from that origin, inferring the
    origin from Warehouse subscriptions when none is configured.
"""

__version__ = "0.1.0"

from freightline.core.artifact_locator import ArtifactLocator
from freightline.core.origin_resolver import resolve_origin
from freightline.core.promotion_context import PromotionContext

__all__ = ["ArtifactLocator", "PromotionContext", "resolve_origin", "__version__"]
