"""Resolve a component registry from a 'package.module:attr' import path"""

import importlib

from mdxview.core.components import Components


def load_components(target: str) -> Components:
    """Import target and return the Components it names.

    attr may be a Components instance or a zero-argument callable returning one.
    """
    module_name, sep, attr = target.partition(':')
    if not sep or not module_name or not attr:
        raise ValueError(f"Invalid components path {target!r}: expected 'module:attr'")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ValueError(f"Cannot import components module {module_name!r}: {e}") from e

    try:
        obj = getattr(module, attr)
    except AttributeError as e:
        raise ValueError(f"Module {module_name!r} has no attribute {attr!r}") from e

    if not isinstance(obj, Components) and callable(obj):
        obj = obj()
    if not isinstance(obj, Components):
        raise ValueError(f"{target!r} resolved to {type(obj).__name__}, expected Components")
    return obj
