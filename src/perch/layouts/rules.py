"""Per-kind lookup rules, as data.

Each kind maps to an ordered list of base names and an ordered list of
directory prefixes.  Entries are either literal strings or placeholder
tokens filled from the descriptor at resolution time; a placeholder whose
value is unset is skipped.  Adding a kind is a new ``KindRule`` entry, not
new control flow.
"""

from dataclasses import dataclass
from enum import Enum

from perch.errors import UnsupportedKindError
from perch.layouts.descriptor import Kind, LayoutDescriptor


class Slot(Enum):
    """Placeholder filled from the descriptor."""

    LAYOUT = "layout"  # descriptor.layout
    SECTION = "section"  # descriptor.section
    SECTION_TERMS = "section_terms"  # descriptor.section + ".terms"
    TYPE = "type"  # descriptor.type
    KIND = "kind"  # descriptor.kind (render hook identifier)
    DEFAULT = "default"  # config.default_dir


Entry = str | Slot


@dataclass(frozen=True, slots=True)
class KindRule:
    """Lookup rule for one kind.

    Attributes:
        names: Base names, most specific first.
        prefixes: Directory prefixes, most specific first. ``""`` is the
            template root.
        baseof_prefixes: Prefixes to use instead when the layered base
            template is requested. ``None`` means same as ``prefixes``.
        list_fallback: The names end in the generic ``list``; a format's
            legacy alias is inserted before it.
        render_hook: Candidates get the markup directory inserted before
            the base name.
    """

    names: tuple[Entry, ...]
    prefixes: tuple[Entry, ...]
    baseof_prefixes: tuple[Entry, ...] | None = None
    list_fallback: bool = False
    render_hook: bool = False

    def prefixes_for(self, baseof: bool) -> tuple[Entry, ...]:
        if baseof and self.baseof_prefixes is not None:
            return self.baseof_prefixes
        return self.prefixes


KIND_RULES: dict[str, KindRule] = {
    Kind.HOME: KindRule(
        names=("index", "home", "list"),
        prefixes=("", Slot.DEFAULT),
        list_fallback=True,
    ),
    Kind.PAGE: KindRule(
        names=(Slot.LAYOUT, "single"),
        prefixes=(Slot.TYPE, Slot.DEFAULT),
    ),
    # The root-level 404 only falls back to _default for the base template.
    Kind.NOT_FOUND: KindRule(
        names=("404",),
        prefixes=("",),
        baseof_prefixes=("", Slot.DEFAULT),
    ),
    Kind.SECTION: KindRule(
        names=(Slot.LAYOUT, Slot.SECTION, "section", "list"),
        prefixes=(Slot.SECTION, "section", Slot.DEFAULT),
        list_fallback=True,
    ),
    Kind.TAXONOMY: KindRule(
        names=(Slot.SECTION_TERMS, "terms", "taxonomy", "list"),
        prefixes=(Slot.SECTION, "taxonomy", Slot.DEFAULT),
        list_fallback=True,
    ),
    Kind.TERM: KindRule(
        names=("term", Slot.SECTION, "taxonomy", "list"),
        prefixes=("term", "taxonomy", Slot.SECTION, Slot.DEFAULT),
        list_fallback=True,
    ),
}

RENDER_HOOK_RULE = KindRule(
    names=(Slot.KIND,),
    prefixes=(Slot.SECTION, Slot.DEFAULT),
    render_hook=True,
)


def rule_for(descriptor: LayoutDescriptor) -> KindRule:
    """Return the lookup rule for *descriptor*'s kind.

    Rendering hooks share one rule regardless of their identifier.

    Raises:
        UnsupportedKindError: If the kind is neither a known ``Kind`` nor
            a rendering hook.
    """
    if descriptor.rendering_hook:
        if not descriptor.kind:
            raise UnsupportedKindError(descriptor.kind)
        return RENDER_HOOK_RULE
    try:
        return KIND_RULES[descriptor.kind]
    except KeyError:
        raise UnsupportedKindError(descriptor.kind) from None
