"""
Displayable interface and the base image leaf.
"""
from abc import ABC, abstractmethod

from .constants import LOADING_MESSAGE, DISPLAY_MESSAGE


class Displayable(ABC):
    """
    Abstract base class for anything that can be rendered as trace output.

    Both the base image and filter wrappers implement this, so a wrapper can
    hold either one as its inner object.
    """

    @abstractmethod
    def render(self) -> None:
        """
        Print this object's trace lines to stdout.

        Rendering has no effect other than the printed output and may be
        repeated any number of times.
        """
        pass


class BaseImage(Displayable):
    """
    Leaf of a filter chain, identified only by its name.
    """

    def __init__(self, name: str):
        """
        Initialize the base image.

        Args:
            name: Image name (not validated)
        """
        self._name = name
        print(LOADING_MESSAGE.format(name=name))

    @property
    def name(self) -> str:
        return self._name

    def render(self) -> None:
        print(DISPLAY_MESSAGE.format(name=self._name))

    def __repr__(self) -> str:
        """String representation of the image."""
        return f"{self.__class__.__name__}(name='{self._name}')"
