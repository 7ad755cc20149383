"""
Dictionary-like object with attribute access and dot-path lookups.

Used as the backing store for configuration so that values can be read
as ``cfg.launcher.mode`` or ``cfg.get("launcher.mode")``.
"""

import builtins
from collections.abc import ItemsView, KeysView, ValuesView
from typing import Any


class DotDict:
    """
    Dictionary-like object with attribute-style access and nested structure support.

    Nested dictionaries are converted to DotDict instances on assignment, so
    attribute access works at every level.
    """

    # Keys that would shadow methods commonly called on config objects
    _RESERVED_KEYS = frozenset({"set", "clear", "dict", "to_dict", "get", "has"})

    def __init__(self, **kwargs: Any) -> None:
        self.set(**kwargs)

    def set(self, **kwargs: Any) -> "DotDict":
        """
        Set multiple key-value pairs, converting nested dicts.

        Returns:
            self: For method chaining
        """
        for key, val in kwargs.items():
            self._set_item(key, val)
        return self

    def _set_item(self, key: Any, val: Any) -> None:
        if not isinstance(key, str):
            key = str(key)

        if key in self._RESERVED_KEYS:
            raise ValueError(
                f"Key '{key}' is reserved and cannot be used (would shadow method)"
            )

        if isinstance(val, dict):
            setattr(self, key, DotDict(**val))
        elif isinstance(val, list):
            setattr(self, key, [self._map_entry(v) for v in val])
        else:
            setattr(self, key, val)

    @staticmethod
    def _map_entry(entry: Any) -> Any:
        if isinstance(entry, dict):
            return DotDict(**entry)
        return entry

    def clear(self) -> None:
        """Remove all keys."""
        for k in list(self.__dict__.keys()):
            delattr(self, k)

    def dict(self) -> dict[str, Any]:
        """Convert to a dict, converting nested DotDict values one level deep each."""
        result = {}
        for key, val in self.__dict__.items():
            if key.startswith("_"):
                continue
            result[key] = val.dict() if isinstance(val, DotDict) else val
        return result

    def to_dict(self) -> builtins.dict[str, Any]:
        """Recursively convert to plain dicts, including DotDicts inside lists."""
        result: dict[str, Any] = {}
        for key, val in self.__dict__.items():
            if key.startswith("_"):
                continue
            if isinstance(val, DotDict):
                result[key] = val.to_dict()
            elif isinstance(val, list):
                result[key] = [
                    item.to_dict() if isinstance(item, DotDict) else item
                    for item in val
                ]
            else:
                result[key] = val
        return result

    def keys(self) -> KeysView[str]:
        return self.to_dict().keys()

    def values(self) -> ValuesView[Any]:
        return self.to_dict().values()

    def items(self) -> ItemsView[str, Any]:
        return self.to_dict().items()

    def __contains__(self, key: Any) -> bool:
        return key in self.__dict__ and not str(key).startswith("_")

    def __getitem__(self, key: str) -> Any:
        return getattr(self, key) if key in self.__dict__ else None

    def __setitem__(self, key: str, val: Any) -> None:
        if key in self.__dict__:
            delattr(self, key)
        self._set_item(key, val)

    def __len__(self) -> int:
        return len(self.dict())

    def __str__(self) -> str:
        return str(self.dict())

    def has(self, path: str) -> bool:
        """
        Check if a dot-separated path exists.

        Args:
            path: Dot-separated path (e.g., "launcher.targets.dev")
        """
        missing = object()
        return self.get(path, missing) is not missing

    def get(self, path: str, default: Any = None) -> Any:
        """
        Get value by dot-separated path.

        Follows dict.get() semantics: returns default if the path is not found.

        Args:
            path: Dot-separated path (e.g., "logging.level")
            default: Value returned when the path does not exist
        """
        if not path:
            return default

        cur: Any = self
        for item in (p for p in path.split(".") if p):
            if not isinstance(cur, DotDict) or item not in cur.__dict__:
                return default
            cur = cur.__dict__[item]
        return cur


class DotDictPathNotFoundError(Exception):
    """Raised when a referenced path does not exist in a DotDict."""

    def __init__(self, obj: DotDict, path: str) -> None:
        self.obj = obj
        self.path = path
        super().__init__(f"Path '{path}' not found")
