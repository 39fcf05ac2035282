"""
Shared plumbing for the builders.

Setters validate their arguments with the helpers below before touching any
state, so a rejected call never leaves a builder half-updated.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any

from ..errors import ArgumentEmptyError, ArgumentNullError, ArgumentTypeError, InvalidArgumentError
from ..nodes import AccessModifier, CSharpNode
from ..rendering import CSharpSerializer


def require_not_none(value: Any, argument: str) -> Any:
    if value is None:
        raise ArgumentNullError(argument)
    return value


def require_not_blank(value: str | None, argument: str) -> str:
    require_not_none(value, argument)
    if not value.strip():
        raise ArgumentEmptyError(argument)
    return value


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def type_name_of(value: str | type, argument: str = "type") -> str:
    """Return the C# type name for a type given by name or as a Python type."""
    require_not_none(value, argument)
    if isinstance(value, type):
        return value.__name__
    return value


def require_access_modifier(value: AccessModifier | None) -> AccessModifier:
    require_not_none(value, "access_modifier")
    try:
        return AccessModifier(value)
    except ValueError as e:
        raise InvalidArgumentError(f"'{value}' is not a valid access modifier.") from e


def require_int_or_none(value: Any, argument: str) -> int | None:
    # bool is a subclass of int
    if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
        raise ArgumentTypeError(argument, f"The argument '{argument}' must be an integer, got {type(value).__name__}.")
    return value


def collect(items: tuple[Any, ...], argument: str) -> list[Any]:
    """
    Normalize the arguments of a bulk ``with_*s`` method.

    Both ``with_fields(a, b)`` and ``with_fields([a, b])`` are accepted. None
    items are rejected before anything is returned.
    """
    if len(items) == 1 and isinstance(items[0], Iterable) and not isinstance(items[0], str):
        items = tuple(items[0])
    for item in items:
        require_not_none(item, argument)
    return list(items)


def collect_names(items: tuple[Any, ...], argument: str) -> list[str]:
    names = collect(items, argument)
    for name in names:
        require_not_blank(name, argument)
    return names


def names_match(candidate: str | None, name: str, case_sensitive: bool) -> bool:
    if candidate is None:
        return False
    if case_sensitive:
        return candidate == name
    return candidate.casefold() == name.casefold()


def has_staged_member(
    builders: Iterable[Any],
    name: str,
    access_modifier: AccessModifier | None,
    case_sensitive: bool,
) -> bool:
    """Whether one of the staged `builders` has the given name (and access modifier, if any)."""
    return any(
        names_match(builder.name, name, case_sensitive) and (access_modifier is None or builder.access_modifier == access_modifier)
        for builder in builders
    )


class SourceBuilder(ABC):
    """Base class for builders whose result can be rendered on its own."""

    @abstractmethod
    def build(self) -> CSharpNode:
        """
        Validate the configuration and return a freshly built entity.

        Raises:
            MissingBuilderSettingError: If a required setting is missing
            CSharpSyntaxError: If the configuration would produce invalid C#
        """

    def to_source_code(self) -> str:
        """Build and return the C# source code."""
        return CSharpSerializer().serialize(self.build())

    def __str__(self) -> str:
        return self.to_source_code()
