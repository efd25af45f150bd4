"""Filters: Decorators that wrap a Displayable."""
from .base import FilterKind, FilterWrapper, BlackAndWhiteFilter, SepiaFilter, BlurFilter
from .composite import compose, layers, depth, resolve_kind
from .registry import FilterRegistry

__all__ = [
    "FilterKind",
    "FilterWrapper",
    "BlackAndWhiteFilter",
    "SepiaFilter",
    "BlurFilter",
    "compose",
    "layers",
    "depth",
    "resolve_kind",
    "FilterRegistry",
]
