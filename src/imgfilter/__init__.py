"""imgfilter: Decorator pattern demo with cosmetic image filters."""
from .image import Displayable, BaseImage
from .filters import (
    FilterKind,
    FilterWrapper,
    BlackAndWhiteFilter,
    SepiaFilter,
    BlurFilter,
    FilterRegistry,
    compose,
    layers,
    depth,
)
from .demo import run_demo

__all__ = [
    "Displayable",
    "BaseImage",
    "FilterKind",
    "FilterWrapper",
    "BlackAndWhiteFilter",
    "SepiaFilter",
    "BlurFilter",
    "FilterRegistry",
    "compose",
    "layers",
    "depth",
    "run_demo",
]
