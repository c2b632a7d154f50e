"""Layout candidate resolution.

Turns a ``LayoutDescriptor`` and an output ``Format`` into the ordered
template names to try, most specific first.
"""

from perch.layouts.cache import ResolutionCache
from perch.layouts.descriptor import Kind, LayoutDescriptor
from perch.layouts.resolver import LayoutResolver, resolve_layouts
from perch.layouts.rules import KIND_RULES, KindRule, Slot

__all__ = [
    "KIND_RULES",
    "Kind",
    "KindRule",
    "LayoutDescriptor",
    "LayoutResolver",
    "ResolutionCache",
    "Slot",
    "resolve_layouts",
]
