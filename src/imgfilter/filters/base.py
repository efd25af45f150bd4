"""
Filter wrapper: a Displayable that decorates another Displayable.
"""
from enum import Enum

from ..constants import BLACK_AND_WHITE_MESSAGE, SEPIA_MESSAGE, BLUR_MESSAGE
from ..image import Displayable


class FilterKind(Enum):
    """
    Closed set of filter variants.

    Each member carries a human-readable label and the line it prints when
    a wrapper of that kind is rendered.
    """

    BLACK_AND_WHITE = ("Black and White", BLACK_AND_WHITE_MESSAGE)
    SEPIA = ("Sepia", SEPIA_MESSAGE)
    BLUR = ("Blur", BLUR_MESSAGE)

    def __init__(self, label: str, message: str):
        self.label = label
        self.message = message


class FilterWrapper(Displayable):
    """
    Decorator node holding exactly one inner Displayable.

    Rendering delegates to the inner object first, then prints the message
    of this wrapper's kind, so output runs innermost to outermost.
    """

    def __init__(self, kind: FilterKind, inner: Displayable):
        """
        Initialize the wrapper.

        Args:
            kind: Which filter this wrapper applies
            inner: Image or wrapper to decorate

        Raises:
            ValueError: If inner is None
            TypeError: If kind is not a FilterKind or inner is not Displayable
        """
        if inner is None:
            raise ValueError("Inner image cannot be None")
        if not isinstance(inner, Displayable):
            raise TypeError(f"Inner must be Displayable, got {type(inner).__name__}")
        if not isinstance(kind, FilterKind):
            raise TypeError(f"Invalid filter kind {kind!r}")

        self._kind = kind
        self._inner = inner

    @property
    def kind(self) -> FilterKind:
        return self._kind

    @property
    def inner(self) -> Displayable:
        return self._inner

    def render(self) -> None:
        self._inner.render()
        print(self._kind.message)

    def __repr__(self) -> str:
        """String representation of the wrapper."""
        return f"{self.__class__.__name__}(kind={self._kind.name}, inner={self._inner!r})"


def BlackAndWhiteFilter(inner: Displayable) -> FilterWrapper:
    """Wrap inner with a black-and-white filter.

    Factory function, not a class: check the result with
    ``wrapper.kind is FilterKind.BLACK_AND_WHITE`` rather than isinstance.
    """
    return FilterWrapper(FilterKind.BLACK_AND_WHITE, inner)


def SepiaFilter(inner: Displayable) -> FilterWrapper:
    """Wrap inner with a sepia filter (factory function, not a class)."""
    return FilterWrapper(FilterKind.SEPIA, inner)


def BlurFilter(inner: Displayable) -> FilterWrapper:
    """Wrap inner with a blur filter (factory function, not a class)."""
    return FilterWrapper(FilterKind.BLUR, inner)
