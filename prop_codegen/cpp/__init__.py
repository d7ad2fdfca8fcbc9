"""
C++ mapping for component props.

Type names, include statements, identifiers and default literals for the
native side of a component's props.
"""

from .defaults import convert_default_type_to_string, render_floating_point
from .imports import CppImportResolver, get_imports
from .naming import generate_struct_name, get_enum_mask_name, get_enum_name
from .report import PropSummary, cpp_type_for_prop, describe_props
from .types import CppTypeMapper, get_cpp_type_for_annotation

__all__ = [
    "CppTypeMapper",
    "get_cpp_type_for_annotation",
    "CppImportResolver",
    "get_imports",
    "generate_struct_name",
    "get_enum_name",
    "get_enum_mask_name",
    "convert_default_type_to_string",
    "render_floating_point",
    "PropSummary",
    "cpp_type_for_prop",
    "describe_props",
]
