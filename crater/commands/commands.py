#!/usr/bin/env python3
# crater/commands/commands.py
from __future__ import annotations

"""
Builtin registry and decorator utilities.

This module provides:
- BuiltinRegistry: name -> Builtin mapping that is frozen after boot.
- builtin: decorator to register functions as builtins.
"""

from types import MappingProxyType
from typing import Callable, Dict, Mapping, Optional

from crater.commands.command_types import Builtin, BuiltinAction


class BuiltinRegistry:
    """Holds the builtin table. Lookups are exact and case-sensitive."""

    def __init__(self) -> None:
        self._builtins_by_name: Dict[str, Builtin] = {}
        self._frozen = False

    # ---------------- Registration ----------------

    def register(self, builtin_obj: Builtin) -> None:
        """Register a builtin, refusing duplicates and late additions."""
        if self._frozen:
            raise RuntimeError(
                f"Cannot register '{builtin_obj.name}': registry is frozen.")
        if not builtin_obj.name or builtin_obj.name != builtin_obj.name.strip():
            raise ValueError(f"Invalid builtin name: {builtin_obj.name!r}")
        if builtin_obj.name in self._builtins_by_name:
            raise ValueError(
                f"Builtin '{builtin_obj.name}' already registered.")
        self._builtins_by_name[builtin_obj.name] = builtin_obj

    def freeze(self) -> None:
        """Make the table read-only for the rest of the process."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    # ---------------- Lookup ----------------

    def get(self, name: str) -> Optional[Builtin]:
        """Return the builtin registered under exactly `name`, or None."""
        return self._builtins_by_name.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._builtins_by_name

    def __len__(self) -> int:
        return len(self._builtins_by_name)

    def all(self) -> list[Builtin]:
        """Return builtins in registration order."""
        return list(self._builtins_by_name.values())

    def names(self) -> tuple[str, ...]:
        return tuple(self._builtins_by_name)

    def as_mapping(self) -> Mapping[str, Builtin]:
        """Read-only view of the table."""
        return MappingProxyType(self._builtins_by_name)


# Global registry used across the app
REGISTRY = BuiltinRegistry()


def builtin(
    *,
    name: str | None = None,
    description: str | None = None,
    usage: str | None = None,
    registry: BuiltinRegistry | None = None,
) -> Callable[[BuiltinAction], BuiltinAction]:
    """
    Decorator to register a function as a builtin.

    - `name` defaults to the function name without a trailing 'builtin_' prefix.
    - `description` defaults to the first docstring line.
    """

    def wrapper(func: BuiltinAction) -> BuiltinAction:
        func_name = getattr(func, "__name__", "")
        doc = (getattr(func, "__doc__", None) or "").strip()
        builtin_name = name or func_name.removeprefix("builtin_")
        builtin_obj = Builtin(
            name=builtin_name,
            description=description or (doc.splitlines()[0] if doc else ""),
            usage=usage or builtin_name,
            action=func,
        )
        (registry or REGISTRY).register(builtin_obj)
        return func

    return wrapper
