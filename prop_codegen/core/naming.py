"""
Naming utilities for safe C++ identifier generation.

Schema names are hyphen-separated fragments (``resize-mode``) that have to
become PascalCase pieces of C++ identifiers (``ResizeMode``).
"""

from .errors import InvalidIdentifierError


def upper_case_first(value: str) -> str:
    """Upper-case the first character of ``value``, leaving the rest unchanged."""
    if not value:
        raise InvalidIdentifierError("Cannot upper-case the first character of an empty string")
    return value[0].upper() + value[1:]


def to_safe_cpp_string(value: str) -> str:
    """
    Convert a hyphenated name into a PascalCase identifier fragment.

    Each ``-`` separated segment gets its first character upper-cased and the
    segments are joined without a separator: ``"a-b-c"`` becomes ``"ABC"``,
    ``"resize-mode"`` becomes ``"ResizeMode"``.

    Args:
        value: Non-empty name without empty segments

    Returns:
        Sanitized identifier fragment

    Raises:
        InvalidIdentifierError: If ``value`` is empty or has an empty segment
    """
    try:
        return "".join(upper_case_first(segment) for segment in value.split("-"))
    except InvalidIdentifierError:
        raise InvalidIdentifierError(
            f"Cannot build an identifier from {value!r}: empty name segment"
        ) from None
