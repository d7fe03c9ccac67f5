import warnings

import pytest

from flu import FluWarning, Style, StyleRegistry


def test_empty_registry() -> None:
    registry = StyleRegistry()
    assert "red" not in registry
    assert registry.get_style("red") is None
    assert registry.get_factory("rgb") is None
    assert list(registry.names()) == []


def test_default_registry() -> None:
    registry = StyleRegistry.default()
    assert registry.get_style("bold") == Style("\x1b[1m", "\x1b[22m")
    assert registry.get_factory("rgb") is not None
    names = list(registry.names())
    assert names[0] == "reset"
    assert names[-4:] == ["rgb", "bgRgb", "hex", "bgHex"]
    assert len(names) == len(set(names))


def test_default_registries_are_independent() -> None:
    a = StyleRegistry.default()
    b = StyleRegistry.default()
    a.register_style("bold", "<", ">")
    assert b.get_style("bold") == Style("\x1b[1m", "\x1b[22m")


def test_register_and_extend() -> None:
    registry = StyleRegistry()
    registry.register_style("a", "<a>", "</a>")
    registry.register_dynamic_style("b", lambda: Style("<b>", "</b>"))
    registry.extend({"c": ("<c>", "</c>"), "a": {"open": "[", "close": "]"}})
    assert "b" in registry
    assert registry.get_style("a") == Style("[", "]")
    assert registry.get_style("c") == Style("<c>", "</c>")
    assert list(registry.names()) == ["a", "c", "b"]


@pytest.mark.parametrize("name", ["styles", "extend", "registerStyle", "_hidden"])
def test_unreachable_names_warn(name: str) -> None:
    registry = StyleRegistry()
    with pytest.warns(FluWarning, match=repr(name)):
        registry.register_style(name, "<", ">")
    # Registration still succeeds.
    assert registry.get_style(name) == Style("<", ">")

    with pytest.warns(FluWarning, match=repr(name)):
        registry.register_dynamic_style(name, lambda: Style("<", ">"))
    assert registry.get_factory(name) is not None


def test_reachable_names_dont_warn() -> None:
    registry = StyleRegistry()
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        registry.register_style("brand", "<", ">")
        registry.extend({"stylish": ("<", ">"), "tag": lambda: Style("<", ">")})
