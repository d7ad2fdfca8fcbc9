"""
Tests for the prop-codegen command line.
"""
import io
import json

import pytest
from rich.console import Console

from prop_codegen import cli


@pytest.fixture
def output(monkeypatch):
    buffer = io.StringIO()
    monkeypatch.setattr(cli, "console", Console(file=buffer, width=200, color_system=None))
    return buffer


def write_schema(tmp_path, data):
    path = tmp_path / "props.json"
    path.write_text(json.dumps(data))
    return path


def test_report(tmp_path, output):
    path = write_schema(
        tmp_path,
        {
            "props": [
                {"name": "resizeMode", "typeAnnotation": {"type": "StringEnumTypeAnnotation", "default": "auto"}},
                {"name": "source", "typeAnnotation": {"type": "NativePrimitiveTypeAnnotation", "name": "ImageSourcePrimitive"}},
            ]
        },
    )

    assert cli.main([str(path), "--component", "Foo"]) == 0

    text = output.getvalue()
    assert "FooResizeMode::Auto" in text
    assert "#include <react/components/image/conversions.h>" in text


def test_report_without_includes(tmp_path, output):
    path = write_schema(
        tmp_path, [{"name": "opacity", "typeAnnotation": {"type": "FloatTypeAnnotation", "default": 1}}]
    )

    assert cli.main([str(path), "-c", "Foo"]) == 0
    assert "1.0" in output.getvalue()
    assert "No includes needed" in output.getvalue()


def test_config_file(tmp_path, output):
    path = write_schema(
        tmp_path, [{"name": "label", "typeAnnotation": {"type": "StringTypeAnnotation", "default": "x"}}]
    )
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"string_type": "folly::fbstring"}))

    assert cli.main([str(path), "-c", "Foo", "--config", str(config)]) == 0
    assert "folly::fbstring" in output.getvalue()


def test_generator_error_exit_code(tmp_path, output):
    path = write_schema(tmp_path, [{"name": "x", "typeAnnotation": {"type": "MixedTypeAnnotation"}}])

    assert cli.main([str(path), "-c", "Foo"]) == 1
    assert "MixedTypeAnnotation" in output.getvalue()


def test_missing_file(tmp_path, output):
    assert cli.main([str(tmp_path / "missing.json"), "-c", "Foo"]) == 1
    assert "File not found" in output.getvalue()


def test_wrong_shape(tmp_path, output):
    path = write_schema(tmp_path, {"name": "x"})

    assert cli.main([str(path), "-c", "Foo"]) == 1
    assert "props" in output.getvalue()


def test_component_required(tmp_path):
    with pytest.raises(SystemExit):
        cli.main([str(write_schema(tmp_path, []))])


def test_null_numeric_default(tmp_path, output):
    path = write_schema(
        tmp_path, [{"name": "maximumValue", "typeAnnotation": {"type": "DoubleTypeAnnotation", "default": None}}]
    )

    assert cli.main([str(path), "-c", "Foo"]) == 0
    assert "0.0" in output.getvalue()
