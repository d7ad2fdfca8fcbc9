"""
Core schema representation for prop code generation.

Models the typed props of a component as a closed set of frozen dataclasses,
and converts the upstream schema JSON shape into that model.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Dict, Mapping, Optional, Sequence, Tuple, Union

from ..logging_config import get_logger
from .errors import SchemaError, UnknownTypeAnnotationError

logger = get_logger(__name__)


class NativePrimitiveName(str, Enum):
    """Platform value types that map onto existing native code."""

    COLOR = "ColorPrimitive"
    POINT = "PointPrimitive"
    IMAGE_SOURCE = "ImageSourcePrimitive"


@dataclass(frozen=True)
class BooleanTypeAnnotation:
    type: ClassVar[str] = "BooleanTypeAnnotation"

    default: bool = False


@dataclass(frozen=True)
class StringTypeAnnotation:
    type: ClassVar[str] = "StringTypeAnnotation"

    default: Optional[str] = None


@dataclass(frozen=True)
class Int32TypeAnnotation:
    type: ClassVar[str] = "Int32TypeAnnotation"

    default: int = 0


@dataclass(frozen=True)
class DoubleTypeAnnotation:
    type: ClassVar[str] = "DoubleTypeAnnotation"

    default: float = 0.0


@dataclass(frozen=True)
class FloatTypeAnnotation:
    type: ClassVar[str] = "FloatTypeAnnotation"

    default: float = 0.0


@dataclass(frozen=True)
class NativePrimitiveTypeAnnotation:
    type: ClassVar[str] = "NativePrimitiveTypeAnnotation"

    name: NativePrimitiveName


@dataclass(frozen=True)
class StringEnumTypeAnnotation:
    """String enum; ``default`` names one of ``options``."""

    type: ClassVar[str] = "StringEnumTypeAnnotation"

    default: Optional[str] = None
    options: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ArrayTypeAnnotation:
    """Array of any other annotation, nested arrays included."""

    type: ClassVar[str] = "ArrayTypeAnnotation"

    element_type: "TypeAnnotation"


@dataclass(frozen=True)
class ObjectTypeAnnotation:
    """Nested group of properties, generated as its own struct."""

    type: ClassVar[str] = "ObjectTypeAnnotation"

    properties: Tuple["PropTypeShape", ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class PropTypeShape:
    """A single typed property of a component."""

    name: str
    type_annotation: "TypeAnnotation"
    optional: bool = False


ScalarTypeAnnotation = Union[
    BooleanTypeAnnotation,
    StringTypeAnnotation,
    Int32TypeAnnotation,
    DoubleTypeAnnotation,
    FloatTypeAnnotation,
]

TypeAnnotation = Union[
    ScalarTypeAnnotation,
    NativePrimitiveTypeAnnotation,
    StringEnumTypeAnnotation,
    ArrayTypeAnnotation,
    ObjectTypeAnnotation,
]

SCALAR_ANNOTATION_CLASSES: Tuple[type, ...] = (
    BooleanTypeAnnotation,
    StringTypeAnnotation,
    Int32TypeAnnotation,
    DoubleTypeAnnotation,
    FloatTypeAnnotation,
)

ANNOTATION_CLASSES: Dict[str, type] = {
    cls.type: cls
    for cls in (
        *SCALAR_ANNOTATION_CLASSES,
        NativePrimitiveTypeAnnotation,
        StringEnumTypeAnnotation,
        ArrayTypeAnnotation,
        ObjectTypeAnnotation,
    )
}


def _require(data: Mapping[str, Any], key: str, context: str) -> Any:
    """Get a required key or raise SchemaError."""
    if not isinstance(data, Mapping):
        raise SchemaError(f"Expected an object for {context}, got {type(data).__name__}")
    if key not in data:
        raise SchemaError(f"Missing '{key}' in {context}")
    return data[key]


def convert_native_primitive_name(name: str) -> NativePrimitiveName:
    """Map a native primitive name string onto the closed name set."""
    try:
        return NativePrimitiveName(name)
    except ValueError:
        raise UnknownTypeAnnotationError(name, "native primitive name") from None


def convert_type_annotation(data: Mapping[str, Any]) -> TypeAnnotation:
    """
    Convert a ``typeAnnotation`` object into the dataclass model.

    Args:
        data: Upstream JSON shape, e.g. ``{"type": "Int32TypeAnnotation", "default": 0}``

    Returns:
        The matching annotation instance

    Raises:
        UnknownTypeAnnotationError: If the ``type`` tag is not one of the known variants
        SchemaError: If a key required by the variant is missing
    """
    tag = _require(data, "type", "typeAnnotation")
    cls = ANNOTATION_CLASSES.get(tag) if isinstance(tag, str) else None
    if cls is None:
        logger.error("Unknown typeAnnotation tag in schema input: %r", tag)
        raise UnknownTypeAnnotationError(tag)

    if cls is NativePrimitiveTypeAnnotation:
        name = _require(data, "name", tag)
        return NativePrimitiveTypeAnnotation(name=convert_native_primitive_name(name))

    if cls is StringEnumTypeAnnotation:
        return StringEnumTypeAnnotation(
            default=data.get("default"),
            options=tuple(
                option["name"] if isinstance(option, Mapping) else option
                for option in data.get("options", ())
            ),
        )

    if cls is ArrayTypeAnnotation:
        element = _require(data, "elementType", tag)
        return ArrayTypeAnnotation(element_type=convert_type_annotation(element))

    if cls is ObjectTypeAnnotation:
        return ObjectTypeAnnotation(properties=convert_props(_require(data, "properties", tag)))

    # Scalars: a missing or null default falls back to the dataclass default
    default = data.get("default")
    if default is None:
        return cls()
    return cls(default=default)


def convert_prop(data: Mapping[str, Any]) -> PropTypeShape:
    """Convert one property object (``name``, ``optional``, ``typeAnnotation``)."""
    name = _require(data, "name", "property")
    annotation = _require(data, "typeAnnotation", f"property '{name}'")
    return PropTypeShape(
        name=name,
        type_annotation=convert_type_annotation(annotation),
        optional=bool(data.get("optional", False)),
    )


def convert_props(data: Sequence[Mapping[str, Any]]) -> Tuple[PropTypeShape, ...]:
    """
    Convert an ordered list of property objects, preserving declaration order.

    Args:
        data: List of upstream property objects

    Returns:
        Tuple of PropTypeShape in the same order
    """
    if isinstance(data, (str, bytes)) or not isinstance(data, Sequence):
        raise SchemaError(f"Expected a list of properties, got {type(data).__name__}")

    props = tuple(convert_prop(item) for item in data)
    logger.debug("Converted %d properties", len(props))
    return props

