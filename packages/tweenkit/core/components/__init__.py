"""Component state copying over a host component model."""

from tweenkit.core.components.copier import (
    add_component_copy,
    copy_components,
    copy_fields,
    copy_properties,
    get_copy_of,
    public_fields,
    writable_properties,
)
from tweenkit.core.components.protocols import ComponentContainer, ComponentHost

__all__ = [
    "ComponentContainer",
    "ComponentHost",
    "add_component_copy",
    "copy_components",
    "copy_fields",
    "copy_properties",
    "get_copy_of",
    "public_fields",
    "writable_properties",
]
