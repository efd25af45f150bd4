"""
Global filter registry mapping names to filter kinds.
"""
from typing import Dict, Optional
from .base import FilterKind


BUILTIN_FILTERS: Dict[str, FilterKind] = {
    "black-and-white": FilterKind.BLACK_AND_WHITE,
    "bw": FilterKind.BLACK_AND_WHITE,
    "sepia": FilterKind.SEPIA,
    "blur": FilterKind.BLUR,
}


class FilterRegistry:
    """
    Singleton registry for looking up filter kinds by name.

    Lets chains be described as lists of strings, e.g. ["blur", "sepia"].
    Names are matched case-insensitively.
    """

    _instance: Optional['FilterRegistry'] = None
    _filters: Dict[str, FilterKind]

    def __new__(cls):
        """Ensure singleton pattern."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._filters = dict(BUILTIN_FILTERS)
        return cls._instance

    @classmethod
    def register_filter(cls, name: str, kind: FilterKind) -> None:
        """
        Register a name for a filter kind.

        Args:
            name: Name to register (stored lower-cased)
            kind: Filter kind the name resolves to

        Raises:
            ValueError: If name is empty or kind is None
            TypeError: If kind is not a FilterKind
        """
        if not name:
            raise ValueError("Filter name cannot be empty")
        if kind is None:
            raise ValueError("Filter kind cannot be None")
        if not isinstance(kind, FilterKind):
            raise TypeError(f"Invalid filter kind {kind!r}")

        instance = cls()
        instance._filters[name.lower()] = kind

    @classmethod
    def get_filter(cls, name: str) -> Optional[FilterKind]:
        """
        Retrieve a registered filter kind by name.

        Returns:
            FilterKind if found, None otherwise
        """
        instance = cls()
        return instance._filters.get(name.lower())

    @classmethod
    def has_filter(cls, name: str) -> bool:
        instance = cls()
        return name.lower() in instance._filters

    @classmethod
    def list_filters(cls) -> list[str]:
        """Get list of all registered filter names."""
        instance = cls()
        return list(instance._filters.keys())

    @classmethod
    def unregister_filter(cls, name: str) -> bool:
        """
        Unregister a filter name.

        Returns:
            True if the name was removed, False if it didn't exist
        """
        instance = cls()
        key = name.lower()
        if key in instance._filters:
            del instance._filters[key]
            return True
        return False

    @classmethod
    def clear(cls) -> None:
        """Clear all registered names, built-ins included."""
        instance = cls()
        instance._filters.clear()

    @classmethod
    def reset(cls) -> None:
        """Restore the built-in names."""
        instance = cls()
        instance._filters = dict(BUILTIN_FILTERS)
