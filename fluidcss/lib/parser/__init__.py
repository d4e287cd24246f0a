"""
Parser package for fluid() rewriting.

Provides the replacement pass and the argument resolvers it delegates to.
"""

from .base import FluidParser, ValueResolver, fluid_has
from .resolvers import (
    ArgumentResolver,
    LengthResolver,
    TokenReferenceResolver,
    value_resolve,
)

__all__ = [
    "FluidParser",
    "ValueResolver",
    "fluid_has",
    "ArgumentResolver",
    "LengthResolver",
    "TokenReferenceResolver",
    "value_resolve",
]
