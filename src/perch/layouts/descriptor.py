"""Layout descriptors: what is being rendered.

Constructed by the page-rendering orchestrator per render request and
discarded after resolution.  Frozen and hashable, so a descriptor can be
used directly as part of the resolution cache key.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum


class Kind(StrEnum):
    """Structural page kinds with a built-in lookup rule."""

    HOME = "home"
    PAGE = "page"
    SECTION = "section"
    TAXONOMY = "taxonomy"
    TERM = "term"
    NOT_FOUND = "404"


@dataclass(frozen=True, slots=True)
class LayoutDescriptor:
    """Describes a piece of content to find layouts for.

    Attributes:
        kind: A ``Kind`` value, or the hook identifier (e.g.
            ``"render-link"``) when ``rendering_hook`` is set.
        type: Content type, used as a directory prefix for pages. May be
            nested (``"blog/post"``).
        section: Section name (taxonomy plural for taxonomy and term kinds).
        layout: Explicit layout override. Ignored for rendering hooks.
        lang: Language tag; adds language-qualified candidates.
        rendering_hook: The kind is a render-hook identifier.
        baseof: Request the layered base template instead of the page
            template.
    """

    kind: str
    type: str = ""
    section: str = ""
    layout: str = ""
    lang: str = ""
    rendering_hook: bool = False
    baseof: bool = False

    def with_baseof(self) -> LayoutDescriptor:
        """Return a copy that requests the layered base template."""
        return replace(self, baseof=True)
