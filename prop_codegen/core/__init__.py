"""
Core prop generation components.

Schema model, naming, configuration and errors shared by the C++ mapping.
"""

from .config import ConfigManager, CppTypeConfig, load_config
from .errors import (
    ConfigError,
    GeneratorError,
    InvalidIdentifierError,
    MissingDefaultError,
    SchemaError,
    UnknownTypeAnnotationError,
)
from .naming import to_safe_cpp_string, upper_case_first
from .schema import (
    ArrayTypeAnnotation,
    BooleanTypeAnnotation,
    DoubleTypeAnnotation,
    FloatTypeAnnotation,
    Int32TypeAnnotation,
    NativePrimitiveName,
    NativePrimitiveTypeAnnotation,
    ObjectTypeAnnotation,
    PropTypeShape,
    ScalarTypeAnnotation,
    StringEnumTypeAnnotation,
    StringTypeAnnotation,
    TypeAnnotation,
    convert_prop,
    convert_props,
    convert_type_annotation,
)

__all__ = [
    # Schema model
    "PropTypeShape",
    "TypeAnnotation",
    "ScalarTypeAnnotation",
    "BooleanTypeAnnotation",
    "StringTypeAnnotation",
    "Int32TypeAnnotation",
    "DoubleTypeAnnotation",
    "FloatTypeAnnotation",
    "NativePrimitiveName",
    "NativePrimitiveTypeAnnotation",
    "StringEnumTypeAnnotation",
    "ArrayTypeAnnotation",
    "ObjectTypeAnnotation",
    "convert_prop",
    "convert_props",
    "convert_type_annotation",
    # Naming
    "to_safe_cpp_string",
    "upper_case_first",
    # Configuration
    "CppTypeConfig",
    "ConfigManager",
    "load_config",
    # Errors
    "GeneratorError",
    "UnknownTypeAnnotationError",
    "MissingDefaultError",
    "InvalidIdentifierError",
    "SchemaError",
    "ConfigError",
]
