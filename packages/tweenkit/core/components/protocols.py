"""Host component model.

An entity owns at most one component per type. ComponentContainer is a
plain in-memory implementation; engine bindings provide their own.
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable

C = TypeVar("C")


@runtime_checkable
class ComponentHost(Protocol):
    """Object that owns components keyed by type."""

    def get_components(self) -> list[Any]: ...

    def get_component(self, component_type: type[C]) -> C | None: ...

    def add_component(self, component_type: type[C]) -> C: ...


class ComponentContainer:
    """In-memory ComponentHost.

    Components are created with their no-argument constructor and kept in
    insertion order.
    """

    def __init__(self, name: str = "entity") -> None:
        self.name = name
        self._components: dict[type, Any] = {}

    def get_components(self) -> list[Any]:
        return list(self._components.values())

    def get_component(self, component_type: type[C]) -> C | None:
        return self._components.get(component_type)

    def add_component(self, component_type: type[C]) -> C:
        if component_type in self._components:
            raise ValueError(f"{self.name} already has a {component_type.__name__} component")
        component = component_type()
        self._components[component_type] = component
        return component

    def __repr__(self) -> str:
        names = ", ".join(t.__name__ for t in self._components)
        return f"ComponentContainer(name={self.name!r}, components=[{names}])"
