"""Copy component state between objects.

Copies are best effort: an attribute that cannot be read or written is
skipped and the rest of the copy continues. Skips are logged at DEBUG.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from tweenkit.core.components.protocols import ComponentHost

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _slot_names(cls: type) -> list[str]:
    names: list[str] = []
    for klass in cls.__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        names.extend(s for s in slots if s not in ("__dict__", "__weakref__"))
    return names


def _instance_attributes(obj: Any) -> list[str]:
    names = list(getattr(obj, "__dict__", {}))
    names.extend(name for name in _slot_names(type(obj)) if hasattr(obj, name))
    return list(dict.fromkeys(names))


def public_fields(obj: Any) -> list[str]:
    """List public instance attribute names of an object.

    Covers ``__dict__`` entries and initialized ``__slots__``; names starting
    with an underscore are excluded.

    Example:
        >>> class Light:
        ...     def __init__(self):
        ...         self.intensity = 1.0
        ...         self._cache = None
        >>> public_fields(Light())
        ['intensity']
    """
    return [name for name in _instance_attributes(obj) if not name.startswith("_")]


def writable_properties(cls: type, *, declared_only: bool = False) -> dict[str, property]:
    """Find properties with a setter on a class.

    Args:
        cls: Class to inspect
        declared_only: Only consider properties defined on cls itself, and
            include non-public ones. Otherwise walk the MRO and keep public
            names only.

    Returns:
        Mapping of property name to property object
    """
    if declared_only:
        return {
            name: attr
            for name, attr in vars(cls).items()
            if isinstance(attr, property) and attr.fset is not None
        }

    found: dict[str, property] = {}
    for klass in reversed(cls.__mro__):
        for name, attr in vars(klass).items():
            if name.startswith("_") or not isinstance(attr, property):
                continue
            if attr.fset is None:
                found.pop(name, None)
            else:
                found[name] = attr
    return found


def _readable_properties(cls: type) -> set[str]:
    return {
        name
        for klass in cls.__mro__
        for name, attr in vars(klass).items()
        if isinstance(attr, property) and attr.fget is not None
    }


def copy_properties(copy_from: Any, copy_to: Any) -> int:
    """Copy writable properties that both objects expose by name.

    Args:
        copy_from: Source object
        copy_to: Destination object

    Returns:
        Number of properties copied
    """
    source_names = _readable_properties(type(copy_from))
    copied = 0
    for name in writable_properties(type(copy_to)):
        if name not in source_names:
            continue
        try:
            setattr(copy_to, name, getattr(copy_from, name))
        except Exception as e:
            logger.debug("Skipped property %s on %s: %s", name, type(copy_to).__name__, e)
            continue
        copied += 1
    return copied


def copy_fields(copy_from: Any, copy_to: Any) -> int:
    """Copy public instance attributes that both objects have.

    Args:
        copy_from: Source object
        copy_to: Destination object

    Returns:
        Number of fields copied
    """
    source_names = set(public_fields(copy_from))
    copied = 0
    for name in public_fields(copy_to):
        if name not in source_names:
            continue
        try:
            setattr(copy_to, name, getattr(copy_from, name))
        except Exception as e:
            logger.debug("Skipped field %s on %s: %s", name, type(copy_to).__name__, e)
            continue
        copied += 1
    return copied


def copy_components(copy_from: ComponentHost, copy_to: ComponentHost) -> None:
    """Copy every component of one host onto another.

    Components missing on the destination are added first; then properties
    and fields are copied onto the destination's component of the same type.

    Args:
        copy_from: Source host
        copy_to: Destination host
    """
    for component in copy_from.get_components():
        component_type = type(component)
        target = copy_to.get_component(component_type)
        if target is None:
            target = copy_to.add_component(component_type)

        copy_properties(component, target)
        copy_fields(component, target)
        logger.debug("Copied %s component", component_type.__name__)


def get_copy_of(component: T, other: T) -> T | None:
    """Overwrite a component with the state of another of the same type.

    Properties declared directly on the type (public or not) are copied
    best effort; every instance attribute is then copied and failures
    propagate.

    Args:
        component: Destination component
        other: Source component

    Returns:
        component, or None if the two types differ
    """
    component_type = type(component)
    if component_type is not type(other):
        return None

    for name in writable_properties(component_type, declared_only=True):
        try:
            setattr(component, name, getattr(other, name))
        except Exception as e:
            logger.debug("Skipped property %s on %s: %s", name, component_type.__name__, e)

    for name in _instance_attributes(other):
        setattr(component, name, getattr(other, name))

    return component


def add_component_copy(host: ComponentHost, to_add: T) -> T | None:
    """Add a component of to_add's type to host, initialized as a copy of it."""
    return get_copy_of(host.add_component(type(to_add)), to_add)
