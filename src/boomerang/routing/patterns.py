"""Reverse-match patterns.

A pattern maps parameter names to one of three terms:

* ``Literal(value)``: the input must carry exactly *value*.
* ``Present()``: the input must carry the key; any value is accepted.
* ``Nested(pattern)``: the input must carry a mapping satisfying *pattern*.

``Present`` is distinct from ``Literal(None)``: the latter only accepts an
explicit ``None``.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, TypeAlias


@dataclass(frozen=True, slots=True)
class Literal:
    value: Any


@dataclass(frozen=True, slots=True)
class Present:
    pass


@dataclass(frozen=True, slots=True)
class Nested:
    pattern: "Pattern"


Term: TypeAlias = Literal | Present | Nested
Pattern: TypeAlias = tuple[tuple[str, Term], ...]

PRESENT = Present()


def term_for(value: Any) -> Term:
    """Build the term matching a registered parameter value."""
    if isinstance(value, Mapping):
        return Nested(pattern_for(value))
    return Literal(value)


def pattern_for(params: Mapping[str, Any], bound: tuple[str, ...] = ()) -> Pattern:
    """Build a pattern from registered params plus the template's bindings.

    Bound names map to ``PRESENT``, overriding any fixed value of the
    same name. Key order follows *params*, then bindings.
    """
    terms: dict[str, Term] = {str(key): term_for(value) for key, value in params.items()}
    for name in bound:
        terms[name] = PRESENT
    return tuple(terms.items())


def consume(pattern: Pattern, params: Mapping[str, Any]) -> dict[str, Any] | None:
    """Match *params* against *pattern*.

    Returns a new dict holding what the pattern did not consume, or
    ``None`` when the pattern is not satisfied. Keys matched by ``Literal``
    and ``Nested`` terms are removed; keys matched by ``Present`` stay,
    since their values are still needed to rebuild the path. *params* is
    never mutated.
    """
    remaining = dict(params)
    for key, term in pattern:
        match term:
            case Nested(pattern=inner):
                value = remaining.get(key)
                if not isinstance(value, Mapping):
                    return None
                if consume(inner, value) is None:
                    return None
                del remaining[key]
            case Present():
                if key not in remaining:
                    return None
            case Literal(value=expected):
                if key not in remaining or remaining[key] != expected:
                    return None
                del remaining[key]
    return remaining
