"""Output formats and their media types.

A ``Format`` describes what a page is rendered *to*: its short name is
used as the tag in tagged candidates (``index.amp.html``) and its media
type's first suffix as the file extension.  Formats are produced by the
caller's format registry; the built-ins below cover the common cases.

Format-specific lookup exceptions are plain optional fields rather than
special cases in the resolver:

- ``legacy_alias``: an extra base name inserted before ``list`` (RSS
  only: ``rss.xml``).
- ``internal_fallback``: one fixed candidate appended after everything
  else (RSS only: ``_internal/_default/rss.xml``).
"""

from dataclasses import dataclass

from perch.errors import UnknownFormatError


@dataclass(frozen=True, slots=True)
class MediaType:
    """A media type with its known file suffixes.

    Attributes:
        main_type: Top-level type, e.g. ``"text"``.
        sub_type: Subtype, e.g. ``"html"``.
        suffixes: Known file extensions without the dot. The first one is
            canonical. May be empty.
        delimiter: Separator declared for the suffix. Carried as data;
            candidate composition always uses the resolver's separator.
    """

    main_type: str
    sub_type: str
    suffixes: tuple[str, ...] = ()
    delimiter: str = "."

    @property
    def type(self) -> str:
        return f"{self.main_type}/{self.sub_type}"

    @property
    def first_suffix(self) -> str:
        return self.suffixes[0] if self.suffixes else ""

    def __str__(self) -> str:
        return self.type


@dataclass(frozen=True, slots=True)
class Format:
    """An output format a page can be rendered to.

    Attributes:
        name: Short identifier, e.g. ``"HTML"``, ``"AMP"``, ``"RSS"``.
        media_type: The media type, supplying the file suffixes.
        base_name: Canonical root file name for this format.
        legacy_alias: Optional extra base name tried before ``list``.
        internal_fallback: Optional always-available last candidate.
    """

    name: str
    media_type: MediaType
    base_name: str = "index"
    legacy_alias: str = ""
    internal_fallback: str = ""

    @property
    def tag(self) -> str:
        """Lowercased name, used in tagged candidates."""
        return self.name.lower()


HTML_TYPE = MediaType("text", "html", ("html",))
XML_TYPE = MediaType("application", "xml", ("xml",))
RSS_TYPE = MediaType("application", "rss+xml", ("xml", "rss"))
JSON_TYPE = MediaType("application", "json", ("json",))
CSS_TYPE = MediaType("text", "css", ("css",))
CSV_TYPE = MediaType("text", "csv", ("csv",))
CALENDAR_TYPE = MediaType("text", "calendar", ("ics",))
TEXT_TYPE = MediaType("text", "plain", ("txt",))

HTML = Format("HTML", HTML_TYPE)
AMP = Format("AMP", HTML_TYPE)
RSS = Format(
    "RSS",
    RSS_TYPE,
    legacy_alias="rss",
    internal_fallback="_internal/_default/rss.xml",
)
JSON = Format("JSON", JSON_TYPE)
CSS = Format("CSS", CSS_TYPE, base_name="styles")
CSV = Format("CSV", CSV_TYPE)
CALENDAR = Format("Calendar", CALENDAR_TYPE)
ROBOTS_TXT = Format("ROBOTS", TEXT_TYPE, base_name="robots")
SITEMAP = Format("Sitemap", XML_TYPE, base_name="sitemap")

BUILTIN_FORMATS: dict[str, Format] = {
    f.tag: f for f in (HTML, AMP, RSS, JSON, CSS, CSV, CALENDAR, ROBOTS_TXT, SITEMAP)
}


def get_format(name: str) -> Format:
    """Look up a built-in format by name, case-insensitively.

    Raises:
        UnknownFormatError: If no built-in format has this name.
    """
    try:
        return BUILTIN_FORMATS[name.lower()]
    except KeyError:
        raise UnknownFormatError(name) from None
