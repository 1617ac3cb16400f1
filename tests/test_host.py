"""Tests for host bound style sheets and the entry point."""

import gc

import pytest

import cssfactory
from cssfactory import (
    MissingGeneratorError,
    OptionsError,
    StyleSheetError,
    StyleSheetRegistry,
    create_style_sheet,
)


class Host:
    """Stand in for an element which hosts a style sheet."""


def paragraph(css):
    css.select("p", lambda p: p.write("margin: 0;\n"))


@pytest.fixture(autouse=True)
def clean_registry():
    cssfactory.registry.clear()
    yield
    cssfactory.registry.clear()


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class TestRegistry:
    def test_builds_once_per_host(self):
        registry = StyleSheetRegistry()
        host = Host()
        first = registry.get_or_build(host, paragraph)
        second = registry.get_or_build(host, paragraph)
        assert first is second
        assert len(registry) == 1

    def test_rebuild_accumulates(self):
        registry = StyleSheetRegistry()
        host = Host()
        registry.render(host, paragraph)
        assert registry.render(host, paragraph) == "p {\nmargin: 0;\n}\n" * 2

    def test_rebuild_with_clear_on_reset(self):
        registry = StyleSheetRegistry()
        host = Host()
        registry.render(host, paragraph, clear_on_reset=True)
        assert registry.render(host, paragraph) == "p {\nmargin: 0;\n}\n"

    def test_hosts_are_independent(self):
        registry = StyleSheetRegistry()
        a, b = Host(), Host()
        registry.render(a, paragraph)
        assert registry.render(b, lambda css: css.select("h1", lambda h: h.write("x: 1;\n"))) == "h1 {\nx: 1;\n}\n"
        assert len(registry) == 2

    def test_root_knows_its_host(self):
        registry = StyleSheetRegistry()
        host = Host()
        sheet = registry.get_or_build(host, paragraph)
        assert sheet.host is host
        assert sheet.children[0].host is host

    def test_release(self):
        registry = StyleSheetRegistry()
        host = Host()
        sheet = registry.get_or_build(host, paragraph)
        assert registry.release(host) is sheet
        assert host not in registry
        assert registry.release(host) is None

    def test_entry_dies_with_host(self):
        registry = StyleSheetRegistry()
        host = Host()
        registry.render(host, paragraph)
        assert host in registry
        del host
        gc.collect()
        assert len(registry) == 0

    def test_failed_build_is_not_cached(self):
        registry = StyleSheetRegistry()
        host = Host()

        def broken(css):
            raise ValueError("bad generator")

        with pytest.raises(ValueError):
            registry.get_or_build(host, broken)
        assert registry.get(host) is None

    def test_missing_generator(self):
        with pytest.raises(MissingGeneratorError):
            StyleSheetRegistry().get_or_build(Host(), None)


# ---------------------------------------------------------------------------
# create_style_sheet
# ---------------------------------------------------------------------------


class TestCreateStyleSheet:
    def test_without_host(self):
        assert create_style_sheet(paragraph) == "p {\nmargin: 0;\n}\n"
        assert len(cssfactory.registry) == 0

    def test_without_host_is_always_fresh(self):
        create_style_sheet(paragraph)
        assert create_style_sheet(paragraph) == "p {\nmargin: 0;\n}\n"

    def test_with_host_uses_registry(self):
        host = Host()
        assert create_style_sheet(host, paragraph) == "p {\nmargin: 0;\n}\n"
        assert host in cssfactory.registry

    def test_with_host_resets_existing(self):
        host = Host()
        create_style_sheet(host, paragraph)
        css = create_style_sheet(host, lambda css: css.select("a", lambda a: a.write("color: red;\n")))
        assert css == "p {\nmargin: 0;\n}\na {\ncolor: red;\n}\n"

    def test_host_without_generator(self):
        with pytest.raises(MissingGeneratorError) as info:
            create_style_sheet(Host())
        assert str(info.value) == "You must provide a valid CSS generator"

    def test_options(self):
        css = create_style_sheet(
            lambda css: css.select(":root", lambda r: r.define("gap", "1rem")),
            emit_custom_properties=True,
        )
        assert css == ":root {\n--gap: 1rem;\n}\n"

    def test_unknown_option(self):
        with pytest.raises(StyleSheetError):
            create_style_sheet(paragraph, colour=True)
        with pytest.raises(OptionsError):
            create_style_sheet(paragraph, colour=True)

    def test_callable_host_by_keyword(self):
        class Widget:
            def __call__(self):
                return "rendered"

        widget = Widget()
        assert create_style_sheet(paragraph, host=widget) == "p {\nmargin: 0;\n}\n"
        assert widget in cssfactory.registry
        assert cssfactory.registry.get(widget).host is widget

    def test_class_host_by_keyword(self):
        assert create_style_sheet(paragraph, host=Host) == "p {\nmargin: 0;\n}\n"
        assert Host in cssfactory.registry

    def test_keyword_host_without_generator(self):
        with pytest.raises(MissingGeneratorError):
            create_style_sheet(None, host=Host())

    def test_host_given_twice(self):
        with pytest.raises(StyleSheetError):
            create_style_sheet(Host(), paragraph, host=Host())
