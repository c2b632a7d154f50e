"""Extension and format composition.

For each directory prefix, candidates are produced in *passes*.  A format
with suffixes gets two passes:

1. tagged, ``name.<format>.<suffix>`` (``list.amp.html``)
2. plain, ``name.<suffix>`` (``list.html``)

Both always run, even when tag and suffix coincide (``index.html.html``
then ``index.html``), so the lookup order reads the same for every format.
A format without suffixes gets a single pass using its lowercased name as
the extension (``_redirects.nem``).

A legacy alias only ever gets the plain extension, placed in the tagged
pass's slot (``home.rss.xml``, ``rss.xml``, ``list.rss.xml``).
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from perch.config import ResolverConfig
from perch.formats import Format
from perch.layouts.names import NameEntry


@dataclass(frozen=True, slots=True)
class ExtensionPass:
    """One composition pass over the base names of a prefix.

    Attributes:
        extension: Extension for ordinary names, without the leading dot.
        alias_extension: Extension for legacy alias names, or ``None``
            when aliases are skipped in this pass.
    """

    extension: str
    alias_extension: str | None

    def extension_for(self, entry: NameEntry) -> str | None:
        return self.alias_extension if entry.alias else self.extension


def passes_for(fmt: Format, config: ResolverConfig) -> tuple[ExtensionPass, ...]:
    """Return the composition passes for *fmt*, in lookup order."""
    suffix = fmt.media_type.first_suffix
    if not suffix:
        return (ExtensionPass(fmt.tag, fmt.tag),)
    tagged = f"{fmt.tag}{config.extension_separator}{suffix}"
    return (
        ExtensionPass(tagged, suffix),
        ExtensionPass(suffix, None),
    )


def compose(name: str, extension: str, lang: str, config: ResolverConfig) -> str:
    """Compose ``name[.lang].extension``."""
    sep = config.extension_separator
    if lang:
        return f"{name}{sep}{lang}{sep}{extension}"
    return f"{name}{sep}{extension}"


def compose_pass(
    entries: Sequence[NameEntry],
    ext_pass: ExtensionPass,
    lang: str,
    config: ResolverConfig,
) -> Iterator[str]:
    """Yield the file names one pass produces for *entries*.

    With a language set, each language-qualified name comes immediately
    before its unqualified counterpart, or, with
    ``config.group_language_variants``, all qualified names come first as
    a block.
    """
    composed = [
        (entry.name, ext)
        for entry in entries
        if (ext := ext_pass.extension_for(entry)) is not None
    ]
    if not lang:
        for name, ext in composed:
            yield compose(name, ext, "", config)
    elif config.group_language_variants:
        for name, ext in composed:
            yield compose(name, ext, lang, config)
        for name, ext in composed:
            yield compose(name, ext, "", config)
    else:
        for name, ext in composed:
            yield compose(name, ext, lang, config)
            yield compose(name, ext, "", config)
