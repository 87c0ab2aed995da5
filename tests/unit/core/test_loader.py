"""Unit tests for core/loader.py"""

import pytest

from mdxview.core.components import Components
from mdxview.core.loader import load_components


MODULE_SOURCE = """\
from mdxview.core.components import Components

registry = Components()
registry.add("hello", lambda: "hi")


def build():
    components = Components()
    components.add("made", lambda: "by factory")
    return components


not_a_registry = 42
"""


@pytest.fixture(name="module_name")
def module_name_fixture(tmp_path, monkeypatch, request):
    """Write an importable components module with a per-test unique name."""
    name = f"loader_mod_{request.node.name.replace('[', '_').replace(']', '_').replace('-', '_')}"
    (tmp_path / f"{name}.py").write_text(MODULE_SOURCE)
    monkeypatch.syspath_prepend(str(tmp_path))
    return name


def test_load_components_instance(module_name):
    components = load_components(f"{module_name}:registry")
    assert isinstance(components, Components)
    assert "hello" in components


def test_load_components_factory(module_name):
    components = load_components(f"{module_name}:build")
    assert components.names() == ["made"]


def test_load_components_wrong_type(module_name):
    with pytest.raises(ValueError, match="expected Components"):
        load_components(f"{module_name}:not_a_registry")


def test_load_components_missing_attribute(module_name):
    with pytest.raises(ValueError, match="has no attribute 'nope'"):
        load_components(f"{module_name}:nope")


def test_load_components_missing_module():
    with pytest.raises(ValueError, match="Cannot import components module"):
        load_components("definitely_not_a_module_xyz:registry")


@pytest.mark.parametrize("target", ["no_colon", ":attr", "module:"])
def test_load_components_bad_path(target):
    with pytest.raises(ValueError, match="expected 'module:attr'"):
        load_components(target)
