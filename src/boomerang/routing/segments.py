"""Path template compilation.

A template like ``/blog/{{ id }}/edit`` compiles into an ordered tuple of
segments, each either a literal or a binding::

    "/blog"               -> (Segment("blog"),)
    "/blog/{{ id }}/edit" -> (Segment("blog"), Segment("{{ id }}", name="id"), Segment("edit"))

There is no escaping. A segment carrying only one of the two markers is
a plain literal.
"""

from collections.abc import Iterable
from dataclasses import dataclass

SEPARATOR = "/"
BINDING_OPEN = "{{"
BINDING_CLOSE = "}}"


@dataclass(frozen=True, slots=True)
class Segment:
    """A compiled segment of a path template.

    Literal: ``blog``       (name=None)
    Binding: ``{{ id }}``   (name="id")
    """

    value: str
    name: str | None = None

    @property
    def is_binding(self) -> bool:
        return self.name is not None


def split_path(path: str) -> list[str]:
    """Split a path on ``/``, dropping empty parts.

    Leading, trailing and repeated separators are ignored.
    """
    return [part for part in path.split(SEPARATOR) if part]


def join_path(parts: Iterable[str]) -> str:
    """Join path parts into an absolute path (``[]`` -> ``"/"``)."""
    return SEPARATOR + SEPARATOR.join(parts)


def has_binding(text: str) -> bool:
    """True iff *text* contains both the open and the close marker."""
    return BINDING_OPEN in text and BINDING_CLOSE in text


def binding_name(text: str) -> str:
    """Extract the parameter name from a binding segment.

    The markers are the first and last two characters of the segment;
    surrounding whitespace inside them is trimmed.
    """
    return text[len(BINDING_OPEN) : -len(BINDING_CLOSE)].strip()


def compile_path(template: str) -> tuple[Segment, ...]:
    """Compile a path template into its segments, left to right."""
    segments: list[Segment] = []
    for part in split_path(template):
        if has_binding(part):
            segments.append(Segment(value=part, name=binding_name(part)))
        else:
            segments.append(Segment(value=part))
    return tuple(segments)


def path_with_id(base_path: str) -> str:
    """Append an ``id`` binding to *base_path* (used by REST expansion)."""
    return base_path.rstrip(SEPARATOR) + SEPARATOR + BINDING_OPEN + " id " + BINDING_CLOSE
