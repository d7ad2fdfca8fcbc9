"""
Tests for per-prop summaries.
"""
import pytest

from prop_codegen.core.config import CppTypeConfig
from prop_codegen.core.errors import MissingDefaultError
from prop_codegen.core.schema import convert_props
from prop_codegen.cpp.report import PropSummary, describe_props
from prop_codegen.cpp.types import CppTypeMapper

SLIDER_PROPS = [
    {"name": "disabled", "typeAnnotation": {"type": "BooleanTypeAnnotation", "default": False}},
    {"name": "maximumValue", "typeAnnotation": {"type": "DoubleTypeAnnotation", "default": 1}},
    {"name": "thumbTintColor", "typeAnnotation": {"type": "NativePrimitiveTypeAnnotation", "name": "ColorPrimitive"}},
    {"name": "resize-mode", "typeAnnotation": {"type": "StringEnumTypeAnnotation", "default": "cover"}},
    {
        "name": "modes",
        "typeAnnotation": {
            "type": "ArrayTypeAnnotation",
            "elementType": {"type": "StringEnumTypeAnnotation", "default": "auto"},
        },
    },
    {
        "name": "labels",
        "typeAnnotation": {"type": "ArrayTypeAnnotation", "elementType": {"type": "StringTypeAnnotation"}},
    },
    {
        "name": "track-style",
        "typeAnnotation": {
            "type": "ObjectTypeAnnotation",
            "properties": [{"name": "width", "typeAnnotation": {"type": "FloatTypeAnnotation", "default": 2}}],
        },
    },
]


def test_describe_props():
    summaries = describe_props("Slider", convert_props(SLIDER_PROPS))

    assert summaries == [
        PropSummary("disabled", "BooleanTypeAnnotation", "bool", "false"),
        PropSummary("maximumValue", "DoubleTypeAnnotation", "double", "1.0"),
        PropSummary("thumbTintColor", "NativePrimitiveTypeAnnotation", None, ""),
        PropSummary("resize-mode", "StringEnumTypeAnnotation", "SliderResizeMode", "SliderResizeMode::Cover"),
        PropSummary(
            "modes",
            "ArrayTypeAnnotation",
            "SliderModesMask",
            "static_cast<SliderModesMask>(SliderModes::Auto)",
        ),
        PropSummary("labels", "ArrayTypeAnnotation", None, ""),
        PropSummary("track-style", "ObjectTypeAnnotation", "SliderTrackStyleStruct", ""),
    ]


def test_describe_props_with_mapper():
    props = convert_props(SLIDER_PROPS[:2])
    mapper = CppTypeMapper(CppTypeConfig(double_type="CGFloat"))
    assert [summary.cpp_type for summary in describe_props("Slider", props, mapper)] == ["bool", "CGFloat"]


def test_describe_props_propagates_errors():
    props = convert_props(
        [
            {
                "name": "modes",
                "typeAnnotation": {"type": "ArrayTypeAnnotation", "elementType": {"type": "StringEnumTypeAnnotation"}},
            }
        ]
    )
    with pytest.raises(MissingDefaultError):
        describe_props("Slider", props)
