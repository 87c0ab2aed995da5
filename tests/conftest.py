"""Root test configuration: environment isolation and shared component fixtures"""

import logging
import os
from dataclasses import dataclass

import pytest
from bs4 import BeautifulSoup

from mdxview.core.components import Components
from mdxview.core.models import PropertyBundle


EXAMPLE_SOURCE = """\
---
title: "Hello, world!"
---

# Hello, world!

This is a **markdown** file with some *content*, but also custom components!

<custom-title />

<layout>

## subtitle

</layout>
"""


@dataclass
class LayoutProps:
    children: list


def custom_title():
    soup = BeautifulSoup("", "html.parser")
    title = soup.new_tag("h1")
    title.string = "Some custom title!"
    return title


def layout(props: LayoutProps):
    soup = BeautifulSoup("", "html.parser")
    div = soup.new_tag("div")
    div["class"] = "layout"
    for child in props.children:
        div.append(child)
    return div


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Drop MDXVIEW_* variables so settings come only from what each test sets."""
    for name in list(os.environ):
        if name.startswith("MDXVIEW_"):
            monkeypatch.delenv(name)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo configure_logging calls so handlers never outlive the test that added them."""
    root = logging.getLogger()
    level = root.level
    yield
    # pytest's own capture handlers are subclasses; only drop the plain ones configure_logging adds
    for handler in root.handlers[:]:
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


@pytest.fixture(name="example_source")
def example_source_fixture():
    return EXAMPLE_SOURCE


@pytest.fixture(name="components")
def components_fixture():
    """Registry with a no-props title component and a props-adapted layout."""
    components = Components()
    components.add("custom-title", custom_title)
    components.add_with_props(
        "layout", layout, lambda props: LayoutProps(children=props.children)
    )
    return components


@pytest.fixture(name="bundle")
def bundle_fixture():
    return PropertyBundle(id="main", classes=["a", "b"], attributes={"data-x": "1", "hidden": None}, children=[])
