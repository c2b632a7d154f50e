"""Tests for the per-kind rule table, name-list builder, prefix builder and composer."""

import pytest

from perch.config import ResolverConfig
from perch.errors import UnsupportedKindError
from perch.formats import AMP, HTML, RSS, Format, MediaType
from perch.layouts.compose import ExtensionPass, compose, compose_pass, passes_for
from perch.layouts.descriptor import Kind, LayoutDescriptor
from perch.layouts.names import NameEntry, build_names, expand_baseof
from perch.layouts.prefixes import build_prefixes, join_path
from perch.layouts.rules import KIND_RULES, RENDER_HOOK_RULE, rule_for

CONFIG = ResolverConfig()


def _names(descriptor: LayoutDescriptor, fmt: Format = AMP) -> list[str]:
    return [e.name for e in build_names(descriptor, fmt, rule_for(descriptor))]


def _prefixes(descriptor: LayoutDescriptor) -> list[str]:
    return build_prefixes(descriptor, rule_for(descriptor), CONFIG)


class TestRuleTable:
    def test_every_kind_has_a_rule(self) -> None:
        assert set(KIND_RULES) == set(Kind)

    def test_hook_rule_for_any_identifier(self) -> None:
        d = LayoutDescriptor(kind="render-codeblock", rendering_hook=True)
        assert rule_for(d) is RENDER_HOOK_RULE

    def test_unknown_kind(self) -> None:
        with pytest.raises(UnsupportedKindError):
            rule_for(LayoutDescriptor(kind="archive"))

    def test_hook_without_identifier(self) -> None:
        with pytest.raises(UnsupportedKindError):
            rule_for(LayoutDescriptor(kind="", rendering_hook=True))

    def test_only_404_has_baseof_prefixes(self) -> None:
        with_override = [k for k, r in KIND_RULES.items() if r.baseof_prefixes is not None]
        assert with_override == [Kind.NOT_FOUND]


class TestBuildNames:
    def test_home(self) -> None:
        assert _names(LayoutDescriptor(kind="home")) == ["index", "home", "list"]

    def test_page_with_layout(self) -> None:
        assert _names(LayoutDescriptor(kind="page", layout="wide")) == ["wide", "single"]

    def test_section(self) -> None:
        d = LayoutDescriptor(kind="section", section="blog", layout="wide")
        assert _names(d) == ["wide", "blog", "section", "list"]

    def test_taxonomy(self) -> None:
        d = LayoutDescriptor(kind="taxonomy", section="tags")
        assert _names(d) == ["tags.terms", "terms", "taxonomy", "list"]

    def test_term(self) -> None:
        d = LayoutDescriptor(kind="term", section="tags")
        assert _names(d) == ["term", "tags", "taxonomy", "list"]

    def test_hook_ignores_layout(self) -> None:
        d = LayoutDescriptor(kind="render-link", rendering_hook=True, layout="wide")
        assert _names(d) == ["render-link"]

    def test_alias_before_list(self) -> None:
        entries = build_names(LayoutDescriptor(kind="home"), RSS, KIND_RULES[Kind.HOME])
        assert entries == [
            NameEntry("index"),
            NameEntry("home"),
            NameEntry("rss", alias=True),
            NameEntry("list"),
        ]

    def test_no_alias_without_list(self) -> None:
        assert _names(LayoutDescriptor(kind="page"), RSS) == ["single"]

    def test_no_alias_for_baseof(self) -> None:
        assert "rss" not in _names(LayoutDescriptor(kind="home", baseof=True), RSS)

    def test_alias_only_before_generic_list(self) -> None:
        d = LayoutDescriptor(kind="section", section="list", layout="list")
        assert _names(d, RSS) == ["list", "list", "section", "rss", "list"]

    def test_expand_baseof(self) -> None:
        entries = [NameEntry("wide"), NameEntry("single")]
        assert [e.name for e in expand_baseof(entries, CONFIG)] == [
            "wide-baseof",
            "single-baseof",
            "baseof",
        ]

    def test_expand_baseof_custom_names(self) -> None:
        config = ResolverConfig(baseof_name="shell", baseof_suffix="_shell")
        expanded = expand_baseof([NameEntry("single")], config)
        assert [e.name for e in expanded] == ["single_shell", "shell"]


class TestBuildPrefixes:
    def test_home(self) -> None:
        assert _prefixes(LayoutDescriptor(kind="home")) == ["", "_default"]

    def test_page_type(self) -> None:
        assert _prefixes(LayoutDescriptor(kind="page", type="blog/post")) == [
            "blog/post",
            "_default",
        ]

    def test_section(self) -> None:
        d = LayoutDescriptor(kind="section", section="blog")
        assert _prefixes(d) == ["blog", "section", "_default"]

    def test_reserved_section_dropped(self) -> None:
        d = LayoutDescriptor(kind="section", section="shortcodes")
        assert _prefixes(d) == ["section", "_default"]

    def test_term(self) -> None:
        d = LayoutDescriptor(kind="term", section="tags")
        assert _prefixes(d) == ["term", "taxonomy", "tags", "_default"]

    def test_404(self) -> None:
        assert _prefixes(LayoutDescriptor(kind="404")) == [""]
        assert _prefixes(LayoutDescriptor(kind="404", baseof=True)) == ["", "_default"]

    def test_hook(self) -> None:
        d = LayoutDescriptor(kind="render-link", rendering_hook=True, section="docs")
        assert _prefixes(d) == ["docs", "_default"]

    def test_join_path(self) -> None:
        assert join_path("", "_markup", "a.html") == "_markup/a.html"
        assert join_path("blog", "", "a.html") == "blog/a.html"
        assert join_path("", "", "a.html") == "a.html"


class TestCompose:
    def test_two_passes(self) -> None:
        assert passes_for(AMP, CONFIG) == (
            ExtensionPass("amp.html", "html"),
            ExtensionPass("html", None),
        )

    def test_html_tag_equals_suffix(self) -> None:
        assert [p.extension for p in passes_for(HTML, CONFIG)] == ["html.html", "html"]

    def test_single_pass_without_suffix(self) -> None:
        fmt = Format("NEM", MediaType("text", "plain", ()))
        assert passes_for(fmt, CONFIG) == (ExtensionPass("nem", "nem"),)

    def test_compose(self) -> None:
        assert compose("list", "amp.html", "", CONFIG) == "list.amp.html"
        assert compose("list", "amp.html", "fr", CONFIG) == "list.fr.amp.html"

    def test_alias_only_in_tagged_slot(self) -> None:
        entries = [NameEntry("home"), NameEntry("rss", alias=True), NameEntry("list")]
        tagged, plain = passes_for(RSS, CONFIG)
        assert list(compose_pass(entries, tagged, "", CONFIG)) == [
            "home.rss.xml",
            "rss.xml",
            "list.rss.xml",
        ]
        assert list(compose_pass(entries, plain, "", CONFIG)) == ["home.xml", "list.xml"]

    def test_language_interleaved(self) -> None:
        entries = [NameEntry("index"), NameEntry("list")]
        plain = passes_for(AMP, CONFIG)[1]
        assert list(compose_pass(entries, plain, "fr", CONFIG)) == [
            "index.fr.html",
            "index.html",
            "list.fr.html",
            "list.html",
        ]

    def test_language_grouped(self) -> None:
        config = ResolverConfig(group_language_variants=True)
        entries = [NameEntry("index"), NameEntry("list")]
        plain = passes_for(AMP, config)[1]
        assert list(compose_pass(entries, plain, "fr", config)) == [
            "index.fr.html",
            "list.fr.html",
            "index.html",
            "list.html",
        ]
