"""Shared fixtures for prop_codegen tests."""

import pytest

from prop_codegen.core.schema import (
    ArrayTypeAnnotation,
    NativePrimitiveName,
    NativePrimitiveTypeAnnotation,
    ObjectTypeAnnotation,
    PropTypeShape,
    StringTypeAnnotation,
)


@pytest.fixture
def image_prop():
    return PropTypeShape(
        name="source",
        type_annotation=NativePrimitiveTypeAnnotation(name=NativePrimitiveName.IMAGE_SOURCE),
    )


@pytest.fixture
def color_prop():
    return PropTypeShape(
        name="tintColor",
        type_annotation=NativePrimitiveTypeAnnotation(name=NativePrimitiveName.COLOR),
    )


@pytest.fixture
def nested_image_object_prop(image_prop):
    """Object prop with an image source two levels down."""
    inner = PropTypeShape(
        name="thumb",
        type_annotation=ObjectTypeAnnotation(
            properties=(
                PropTypeShape(name="label", type_annotation=StringTypeAnnotation()),
                image_prop,
            )
        ),
    )
    return PropTypeShape(name="style", type_annotation=ObjectTypeAnnotation(properties=(inner,)))


@pytest.fixture
def image_array_prop():
    return PropTypeShape(
        name="images",
        type_annotation=ArrayTypeAnnotation(
            element_type=NativePrimitiveTypeAnnotation(name=NativePrimitiveName.IMAGE_SOURCE)
        ),
    )
