"""
Helpers for building and walking filter chains.
"""
from typing import List, Sequence, Union

from ..image import Displayable
from .base import FilterKind, FilterWrapper
from .registry import FilterRegistry


def resolve_kind(kind: Union[FilterKind, str]) -> FilterKind:
    """
    Turn a registry name into a FilterKind (members pass through).

    Raises:
        KeyError: If the name is not registered
        TypeError: If kind is neither a FilterKind nor a string
    """
    if isinstance(kind, FilterKind):
        return kind
    if not isinstance(kind, str):
        raise TypeError(f"Filter must be a FilterKind or a name, got {type(kind).__name__}")
    resolved = FilterRegistry.get_filter(kind)
    if resolved is None:
        raise KeyError(f"No filter named '{kind}' is registered")
    return resolved


def compose(inner: Displayable, kinds: Sequence[Union[FilterKind, str]]) -> Displayable:
    """
    Wrap inner with each filter in turn.

    The first entry ends up innermost, so its line is printed first.

    Example: compose(image, ["blur", "sepia"]) == SepiaFilter(BlurFilter(image))

    Args:
        inner: Image or wrapper to start from
        kinds: Filter kinds or registry names, innermost first

    Returns:
        The outermost wrapper, or inner itself if kinds is empty
    """
    # Resolve everything up front so a bad name doesn't leave a half-built chain
    resolved = [resolve_kind(kind) for kind in kinds]

    result = inner
    for kind in resolved:
        result = FilterWrapper(kind, result)
    return result


def layers(displayable: Displayable) -> List[Displayable]:
    """
    List every node of a chain, base image first and outermost wrapper last.
    """
    nodes = []
    node = displayable
    while isinstance(node, FilterWrapper):
        nodes.append(node)
        node = node.inner
    nodes.append(node)
    nodes.reverse()
    return nodes


def depth(displayable: Displayable) -> int:
    """Number of filter wrappers around the base image."""
    return len(layers(displayable)) - 1
