"""
Exception types raised by the prop code generator.

Every failure is a hard failure: nothing here is meant to be caught and
recovered from inside a generation pass.
"""

from typing import Any, Never, NoReturn


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class UnknownTypeAnnotationError(GeneratorError):
    """A type annotation tag or native primitive name reached a dispatch point unhandled."""

    def __init__(self, value: Any, kind: str = "typeAnnotation"):
        self.value = value
        self.kind = kind
        super().__init__(f"Received invalid {kind}: {value!r}")


class MissingDefaultError(GeneratorError):
    """A property that needs a default value to render has none."""

    def __init__(self, prop_name: str, message: str):
        self.prop_name = prop_name
        super().__init__(f"{message} (prop '{prop_name}')")


class InvalidIdentifierError(GeneratorError, ValueError):
    """An identifier fragment cannot be sanitized."""

    pass


class SchemaError(GeneratorError):
    """Structured schema input is missing required keys or has the wrong shape."""

    pass


class ConfigError(GeneratorError):
    """Exception raised for configuration-related errors."""

    pass


def assert_unreachable(value: Never, kind: str = "typeAnnotation") -> NoReturn:
    """
    Fallback branch of an exhaustive dispatch.

    Type checkers reject calls whose argument is not narrowed to ``Never``,
    so an unhandled variant is reported statically; at runtime the value is
    named in the raised error.
    """
    raise UnknownTypeAnnotationError(value, kind)
