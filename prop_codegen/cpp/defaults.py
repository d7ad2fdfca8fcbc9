"""
Default value rendering for C++ props.

Turns the declared default of a prop into the C++ literal or expression used
to initialise it. An empty string means there is no inline default to emit.
"""

from typing import Union

from ..logging_config import get_logger
from ..core.errors import MissingDefaultError, assert_unreachable
from ..core.naming import to_safe_cpp_string
from ..core.schema import (
    ArrayTypeAnnotation,
    BooleanTypeAnnotation,
    DoubleTypeAnnotation,
    FloatTypeAnnotation,
    Int32TypeAnnotation,
    NativePrimitiveName,
    NativePrimitiveTypeAnnotation,
    ObjectTypeAnnotation,
    PropTypeShape,
    StringEnumTypeAnnotation,
    StringTypeAnnotation,
)
from .naming import get_enum_mask_name, get_enum_name

logger = get_logger(__name__)

# Whole numbers from here up are written in exponent form, as C++ and JS do
_FIXED_NOTATION_LIMIT = 1e21


def render_floating_point(value: Union[int, float]) -> str:
    """
    Render a double/float default as a C++ literal.

    Whole numbers always carry a decimal point (``5`` -> ``5.0``); anything
    else uses the shortest string that round-trips to the same double, so no
    digits are invented or lost (``5.25``, ``1e+21``). Negative zero renders
    as ``0.0``.
    """
    # Adding 0.0 folds -0.0 into 0.0
    number = float(value) + 0.0
    if number.is_integer() and abs(number) < _FIXED_NOTATION_LIMIT:
        return f"{number:.1f}"
    return repr(number)


def _render_enum_member(component_name: str, prop_name: str, member: str) -> str:
    return f"{get_enum_name(component_name, prop_name)}::{to_safe_cpp_string(member)}"


def _native_primitive_default(name: NativePrimitiveName) -> str:
    # Native primitives are default-initialised by their own C++ types
    match name:
        case NativePrimitiveName.COLOR | NativePrimitiveName.IMAGE_SOURCE | NativePrimitiveName.POINT:
            return ""
        case _:
            assert_unreachable(name, "native primitive name")


def convert_default_type_to_string(component_name: str, prop: PropTypeShape) -> str:
    """
    Render the default value of a prop as C++ source text.

    Args:
        component_name: Component the prop belongs to, used to name enums
        prop: The prop to render

    Returns:
        A C++ literal or expression, or ``""`` when there is no inline default

    Raises:
        MissingDefaultError: If a string-enum prop (scalar or array) or a numeric
            prop built without the schema converter has a null default
        UnknownTypeAnnotationError: If the annotation or native primitive is not known
    """
    annotation = prop.type_annotation
    logger.debug("Rendering default for %s.%s", component_name, prop.name)

    match annotation:
        case BooleanTypeAnnotation(default=value):
            return "true" if value else "false"

        case StringTypeAnnotation(default=None):
            return ""

        case StringTypeAnnotation(default=value):
            return f'"{value}"'

        case (
            Int32TypeAnnotation(default=None)
            | DoubleTypeAnnotation(default=None)
            | FloatTypeAnnotation(default=None)
        ):
            raise MissingDefaultError(prop.name, f"A default is required for {annotation.type}")

        case Int32TypeAnnotation(default=value):
            return str(value)

        case DoubleTypeAnnotation(default=value) | FloatTypeAnnotation(default=value):
            return render_floating_point(value)

        case NativePrimitiveTypeAnnotation(name=name):
            return _native_primitive_default(name)

        case ArrayTypeAnnotation(element_type=StringEnumTypeAnnotation(default=member)):
            if member is None:
                raise MissingDefaultError(
                    prop.name, "A default is required for array StringEnumTypeAnnotation"
                )
            enum_mask_name = get_enum_mask_name(get_enum_name(component_name, prop.name))
            default_value = _render_enum_member(component_name, prop.name, member)
            return f"static_cast<{enum_mask_name}>({default_value})"

        case ArrayTypeAnnotation():
            return ""

        case ObjectTypeAnnotation():
            # Nested struct members get their defaults from the struct itself
            return ""

        case StringEnumTypeAnnotation(default=member):
            if member is None:
                raise MissingDefaultError(
                    prop.name, "A default is required for StringEnumTypeAnnotation"
                )
            return _render_enum_member(component_name, prop.name, member)

        case _:
            logger.error("Cannot render default for %s.%s: %r", component_name, prop.name, annotation)
            assert_unreachable(annotation)
