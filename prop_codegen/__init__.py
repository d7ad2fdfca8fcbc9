"""
prop_codegen

Translates the typed props of a UI component into C++ source fragments:
type names, default literals, enum and struct identifiers, and includes.
"""

from .core import (
    ArrayTypeAnnotation,
    BooleanTypeAnnotation,
    ConfigError,
    CppTypeConfig,
    DoubleTypeAnnotation,
    FloatTypeAnnotation,
    GeneratorError,
    Int32TypeAnnotation,
    InvalidIdentifierError,
    MissingDefaultError,
    NativePrimitiveName,
    NativePrimitiveTypeAnnotation,
    ObjectTypeAnnotation,
    PropTypeShape,
    SchemaError,
    StringEnumTypeAnnotation,
    StringTypeAnnotation,
    TypeAnnotation,
    UnknownTypeAnnotationError,
    convert_props,
    load_config,
    to_safe_cpp_string,
)
from .cpp import (
    CppImportResolver,
    CppTypeMapper,
    convert_default_type_to_string,
    describe_props,
    generate_struct_name,
    get_cpp_type_for_annotation,
    get_enum_mask_name,
    get_enum_name,
    get_imports,
)

__version__ = "0.1.0"

__all__ = [
    "PropTypeShape",
    "TypeAnnotation",
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
    "convert_props",
    "to_safe_cpp_string",
    "get_cpp_type_for_annotation",
    "CppTypeMapper",
    "get_imports",
    "CppImportResolver",
    "generate_struct_name",
    "get_enum_name",
    "get_enum_mask_name",
    "convert_default_type_to_string",
    "describe_props",
    "CppTypeConfig",
    "load_config",
    "GeneratorError",
    "UnknownTypeAnnotationError",
    "MissingDefaultError",
    "InvalidIdentifierError",
    "SchemaError",
    "ConfigError",
]
