"""
C++ identifier generators for structs, enums and enum masks.

All names are built from the component name plus sanitized schema names.
"""

from typing import Sequence

from ..core.naming import to_safe_cpp_string


def generate_struct_name(component_name: str, parts: Sequence[str] = ()) -> str:
    """
    Name the struct generated for an object prop.

    ``generate_struct_name("Foo")`` is ``"FooStruct"`` and
    ``generate_struct_name("Foo", ["bar-baz"])`` is ``"FooBarBazStruct"``.

    Args:
        component_name: Component the struct belongs to
        parts: Path of prop names leading to the object, outermost first

    Returns:
        Struct name
    """
    additional = "".join(to_safe_cpp_string(part) for part in parts)
    return f"{component_name}{additional}Struct"


def get_enum_name(component_name: str, prop_name: str) -> str:
    """Name the enum generated for a string-enum prop, e.g. ``FooResizeMode``."""
    return f"{component_name}{to_safe_cpp_string(prop_name)}"


def get_enum_mask_name(enum_name: str) -> str:
    """Name the bitmask type used by array-of-enum props."""
    return f"{enum_name}Mask"
