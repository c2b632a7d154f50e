"""Base-name list builder and layered base-template expander."""

from dataclasses import dataclass

from perch.config import ResolverConfig
from perch.formats import Format
from perch.layouts.descriptor import LayoutDescriptor
from perch.layouts.rules import Entry, KindRule, Slot

LIST_NAME = "list"


@dataclass(frozen=True, slots=True)
class NameEntry:
    """A base name in lookup order.

    ``alias`` marks a format's legacy alias: it is composed with the plain
    extension only, in the tagged pass's position.
    """

    name: str
    alias: bool = False


def _fill(entry: Entry, descriptor: LayoutDescriptor, rule: KindRule) -> str:
    if isinstance(entry, str):
        return entry
    match entry:
        case Slot.LAYOUT:
            return "" if rule.render_hook else descriptor.layout
        case Slot.SECTION:
            return descriptor.section
        case Slot.SECTION_TERMS:
            return f"{descriptor.section}.terms" if descriptor.section else ""
        case Slot.KIND:
            return descriptor.kind
        case _:
            msg = f"{entry!r} is not valid in a name list"
            raise ValueError(msg)


def build_names(
    descriptor: LayoutDescriptor,
    fmt: Format,
    rule: KindRule,
) -> list[NameEntry]:
    """Build the ordered base names for *descriptor*.

    Unset placeholders (no layout, no section) are skipped.  When the
    format has a legacy alias and the kind falls back to ``list``, the
    alias goes immediately before ``list``.  The layered base template
    never looks up the alias.
    """
    entries: list[NameEntry] = []
    for entry in rule.names:
        name = _fill(entry, descriptor, rule)
        if not name:
            continue
        # Only the generic trailing list, never a section or layout named "list"
        if (
            entry == LIST_NAME
            and rule.list_fallback
            and fmt.legacy_alias
            and not descriptor.baseof
        ):
            entries.append(NameEntry(fmt.legacy_alias, alias=True))
        entries.append(NameEntry(name))
    return entries


def expand_baseof(entries: list[NameEntry], config: ResolverConfig) -> list[NameEntry]:
    """Rewrite names for the layered base template.

    ``single`` becomes ``single-baseof``, and one generic ``baseof`` entry
    is appended once at the end.
    """
    expanded = [
        NameEntry(f"{e.name}{config.baseof_suffix}")
        for e in entries
        if not e.alias
    ]
    expanded.append(NameEntry(config.baseof_name))
    return expanded
