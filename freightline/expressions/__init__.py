"""Expression-runtime bindings for Freight lookups."""

from freightline.expressions.functions import (
    FunctionArgumentError,
    freight_operations,
    warehouse,
)

__all__ = ["FunctionArgumentError", "freight_operations", "warehouse"]
