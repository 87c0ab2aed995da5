"""Registry of custom components keyed by the tag name that invokes them"""

import logging
from typing import Any, Callable, Iterator, Optional, TypeVar

from mdxview.core.models import PropertyBundle


logger = logging.getLogger(__name__)

Props = TypeVar("Props")
RenderFn = Callable[[PropertyBundle], Any]


class Components:
    """Tag name -> render function taking a PropertyBundle.

    Registering a name twice replaces the earlier entry. Build the registry
    fully before rendering; it is only read during a render call.
    """

    def __init__(self) -> None:
        self._components: dict[str, RenderFn] = {}

    def _register(self, name: str, render: RenderFn) -> None:
        if name in self._components:
            logger.debug("replacing component `%s`", name)
        else:
            logger.debug("registering component `%s`", name)
        self._components[name] = render

    def add(self, name: str, component: Callable[[], Any]) -> None:
        """Register a component that takes no props; the bundle is discarded."""
        def render(_props: PropertyBundle) -> Any:
            return component()
        self._register(name, render)

    def add_with_props(
        self,
        name: str,
        component: Callable[[Props], Any],
        adapter: Callable[[PropertyBundle], Props],
        ) -> None:
        """Register a component whose own props are built from the bundle by adapter."""
        def render(props: PropertyBundle) -> Any:
            return component(adapter(props))
        self._register(name, render)

    def lookup(self, name: str) -> Optional[RenderFn]:
        return self._components.get(name)

    def names(self) -> list[str]:
        return list(self._components)

    def __contains__(self, name: object) -> bool:
        return name in self._components

    def __len__(self) -> int:
        return len(self._components)

    def __iter__(self) -> Iterator[str]:
        return iter(self._components)
