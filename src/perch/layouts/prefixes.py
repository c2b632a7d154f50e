"""Directory-prefix builder."""

from perch.config import ResolverConfig
from perch.layouts.descriptor import LayoutDescriptor
from perch.layouts.rules import Entry, KindRule, Slot


def _fill(entry: Entry, descriptor: LayoutDescriptor, config: ResolverConfig) -> str | None:
    """Resolve one prefix entry. ``None`` drops it, ``""`` is the root."""
    if isinstance(entry, str):
        return entry
    match entry:
        case Slot.DEFAULT:
            return config.default_dir
        case Slot.SECTION:
            value = descriptor.section
        case Slot.TYPE:
            value = descriptor.type.strip("/")
        case _:
            msg = f"{entry!r} is not valid in a prefix list"
            raise ValueError(msg)
    # Reserved top-level directories are never searched as content prefixes
    if not value or value in config.reserved_names:
        return None
    return value


def build_prefixes(
    descriptor: LayoutDescriptor,
    rule: KindRule,
    config: ResolverConfig,
) -> list[str]:
    """Build the ordered directory prefixes for *descriptor*.

    Section and type values are dropped when unset or when they name a
    reserved directory (``shortcodes``, ``partials``); literal prefixes
    always apply.  A nested type (``blog/post``) is used verbatim.
    """
    prefixes: list[str] = []
    for entry in rule.prefixes_for(descriptor.baseof):
        value = _fill(entry, descriptor, config)
        if value is not None:
            prefixes.append(value)
    return prefixes


def join_path(*parts: str) -> str:
    """Join path segments with ``/``, skipping empty ones."""
    return "/".join(p for p in parts if p)
