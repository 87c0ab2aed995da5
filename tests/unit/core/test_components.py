"""Unit tests for core/components.py"""

import logging

from mdxview.core.components import Components


def test_add_discards_bundle(bundle):
    """Components registered with add are called without arguments."""
    calls = []
    components = Components()
    components.add("hello", lambda: calls.append("called") or "view")

    assert components.lookup("hello")(bundle) == "view"
    assert calls == ["called"]


def test_add_with_props_runs_adapter_first(bundle):
    """The adapter turns the bundle into the component's own props before the call."""
    order = []

    def adapter(props):
        order.append("adapter")
        return {"ident": props.id, "flags": props.classes}

    def component(props):
        order.append("component")
        return props

    components = Components()
    components.add_with_props("card", component, adapter)

    assert components.lookup("card")(bundle) == {"ident": "main", "flags": ["a", "b"]}
    assert order == ["adapter", "component"]


def test_lookup_unregistered_returns_none():
    assert Components().lookup("missing") is None


def test_last_registration_wins(bundle):
    components = Components()
    components.add("x", lambda: "first")
    components.add_with_props("x", lambda props: props, lambda bundle: "second")

    assert components.lookup("x")(bundle) == "second"
    assert len(components) == 1


def test_replacement_is_logged(caplog):
    components = Components()
    with caplog.at_level(logging.DEBUG, logger="mdxview.core.components"):
        components.add("x", lambda: None)
        components.add("x", lambda: None)
    assert "registering component `x`" in caplog.text
    assert "replacing component `x`" in caplog.text


def test_registry_container_protocol():
    components = Components()
    components.add("b", lambda: None)
    components.add("a", lambda: None)

    assert "a" in components
    assert "c" not in components
    assert components.names() == ["b", "a"]
    assert list(components) == ["b", "a"]
    assert len(components) == 2
