"""Lookup table from method names to interpolation methods.

The four built-in methods are registered under a canonical name and a few
aliases. Lookup is case/spacing/punctuation insensitive, so
``"newton-forward"``, ``"Newton Forward"``, ``"newton_forward"`` and
``"newtonForward"`` all resolve to the same class.

Examples:
    >>> from interpkit.registry import available_methods, resolve_method
    >>> available_methods()
    ['lagrange', 'newton-backward', 'newton-divided', 'newton-forward']
    >>> resolve_method("newtonForward").name
    'newton-forward'
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Iterable, Mapping, NamedTuple, Type

from interpkit.methods import (
    LagrangeInterpolator,
    NewtonBackwardInterpolator,
    NewtonDividedInterpolator,
    NewtonForwardInterpolator,
    PolynomialInterpolator,
)

__all__ = [
    "MethodInfo",
    "available_methods",
    "method_info",
    "register_method",
    "resolve_method",
]


class MethodInfo(NamedTuple):
    """Display metadata for a method."""

    name: str
    label: str
    description: str


# Built-in methods, in display order.
_METHOD_SPECS: list[tuple[str, Type[PolynomialInterpolator], list[str]]] = [
    ("lagrange", LagrangeInterpolator, ["lag", "l"]),
    ("newton-forward", NewtonForwardInterpolator, ["forward", "nf"]),
    ("newton-backward", NewtonBackwardInterpolator, ["backward", "nb"]),
    ("newton-divided", NewtonDividedInterpolator, ["divided", "divided-difference", "nd"]),
]


def _norm(s: str) -> str:
    """Normalize a method string for robust matching (case/spacing/punct insensitive).

    Args:
        s: Input string.

    Returns:
        Normalized string.
    """
    return re.sub(r"[^a-z0-9]+", "", s.lower())


@lru_cache(maxsize=1)
def _method_maps() -> tuple[Mapping[str, tuple[str, Type[PolynomialInterpolator]]], tuple[str, ...]]:
    """Construct and cache lookup tables for interpolation methods.

    Returns:
        A pair ``(method_map, canonical_names)`` where ``method_map`` maps
        normalized names and aliases to ``(canonical_name, class)`` and
        ``canonical_names`` lists the sorted canonical names.
    """
    method_map: dict[str, tuple[str, Type[PolynomialInterpolator]]] = {}
    canonical: set[str] = set()
    for name, cls, aliases in _METHOD_SPECS:
        method_map[_norm(name)] = (name, cls)
        canonical.add(name)
        for a in aliases:
            method_map[_norm(a)] = (name, cls)
    return method_map, tuple(sorted(canonical))


def register_method(
    name: str,
    cls: Type[PolynomialInterpolator],
    *,
    aliases: Iterable[str] = (),
) -> None:
    """Register an additional interpolation method.

    The internal cache is cleared and rebuilt on the next lookup.

    Args:
        name: Canonical public name of the method.
        cls: Subclass of :class:`PolynomialInterpolator`.
        aliases: Additional accepted spellings.
    """
    _METHOD_SPECS.append((name, cls, list(aliases)))
    _method_maps.cache_clear()


def _lookup(method: str) -> tuple[str, Type[PolynomialInterpolator]]:
    method_map, canon = _method_maps()
    try:
        return method_map[_norm(method)]
    except KeyError:
        opts = ", ".join(canon)
        raise ValueError(
            f"Unknown interpolation method '{method}'. Choose one of {{{opts}}}."
        ) from None


def resolve_method(method: str) -> Type[PolynomialInterpolator]:
    """Resolve a user-provided method name or alias to its class.

    Raises:
        ValueError: If ``method`` is not recognized.
    """
    return _lookup(method)[1]


def canonical_name(method: str) -> str:
    """Returns the canonical name for a method name or alias."""
    return _lookup(method)[0]


def available_methods() -> list[str]:
    """List canonical method names.

    Returns:
        List of method names.
    """
    _, canon = _method_maps()
    return list(canon)


def method_info(method: str) -> MethodInfo:
    """Returns the display label and description of a method."""
    name, cls = _lookup(method)
    return MethodInfo(name=name, label=cls.label or name, description=cls.description)
