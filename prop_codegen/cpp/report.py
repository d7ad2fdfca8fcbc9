"""
Per-prop summary of everything the C++ mapping derives.

Used by the CLI to show, for each prop, the C++ type it is declared with and
the default it is initialised to.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..core.schema import (
    ArrayTypeAnnotation,
    NativePrimitiveTypeAnnotation,
    ObjectTypeAnnotation,
    PropTypeShape,
    StringEnumTypeAnnotation,
)
from .defaults import convert_default_type_to_string
from .naming import generate_struct_name, get_enum_mask_name, get_enum_name
from .types import CppTypeMapper


@dataclass(frozen=True)
class PropSummary:
    """Derived C++ information for one prop."""

    name: str
    type: str
    cpp_type: Optional[str]
    default: str


def cpp_type_for_prop(
    component_name: str, prop: PropTypeShape, mapper: Optional[CppTypeMapper] = None
) -> Optional[str]:
    """
    Name the C++ type a prop is declared with, where this package can name it.

    Native primitives and arrays of anything but enums return None; their
    spelling belongs to the platform headers.
    """
    mapper = mapper or CppTypeMapper()
    annotation = prop.type_annotation

    if isinstance(annotation, StringEnumTypeAnnotation):
        return get_enum_name(component_name, prop.name)
    if isinstance(annotation, ArrayTypeAnnotation):
        if isinstance(annotation.element_type, StringEnumTypeAnnotation):
            return get_enum_mask_name(get_enum_name(component_name, prop.name))
        return None
    if isinstance(annotation, ObjectTypeAnnotation):
        return generate_struct_name(component_name, [prop.name])
    if isinstance(annotation, NativePrimitiveTypeAnnotation):
        return None
    return mapper.map_annotation_type(annotation)


def describe_props(
    component_name: str,
    properties: Sequence[PropTypeShape],
    mapper: Optional[CppTypeMapper] = None,
) -> List[PropSummary]:
    """Summarize each prop of a component in declaration order."""
    mapper = mapper or CppTypeMapper()
    return [
        PropSummary(
            name=prop.name,
            type=prop.type_annotation.type,
            cpp_type=cpp_type_for_prop(component_name, prop, mapper),
            default=convert_default_type_to_string(component_name, prop),
        )
        for prop in properties
    ]
