"""
C++ type mapping for scalar prop annotations.

Only the five scalar annotations have a direct C++ spelling; enums, arrays,
objects and native primitives are named by the identifier generators or by
code outside this package.
"""

from typing import Dict, Optional, Union

from ..logging_config import get_logger
from ..core.config import CppTypeConfig
from ..core.errors import UnknownTypeAnnotationError
from ..core.schema import (
    BooleanTypeAnnotation,
    DoubleTypeAnnotation,
    FloatTypeAnnotation,
    Int32TypeAnnotation,
    ScalarTypeAnnotation,
    StringTypeAnnotation,
)

logger = get_logger(__name__)

AnnotationTag = Union[str, type, ScalarTypeAnnotation]


class CppTypeMapper:
    """
    Maps scalar type annotation tags to C++ type names.

    The set of tags is closed; anything outside it is a programming error in
    the schema producer and raises instead of falling back to a guess.
    """

    def __init__(self, config: Optional[CppTypeConfig] = None):
        """Initialize with type configuration."""
        self.config = config or CppTypeConfig()
        self._scalar_types = self._build_scalar_type_map()

    def _build_scalar_type_map(self) -> Dict[str, str]:
        """Build mapping of scalar annotation tags to C++ type names."""
        return {
            BooleanTypeAnnotation.type: self.config.bool_type,
            StringTypeAnnotation.type: self.config.string_type,
            Int32TypeAnnotation.type: self.config.int_type,
            DoubleTypeAnnotation.type: self.config.double_type,
            FloatTypeAnnotation.type: self.config.float_type,
        }

    def map_annotation_type(self, tag: AnnotationTag) -> str:
        """
        Map a scalar annotation to its C++ type name.

        Args:
            tag: Tag string (``"Int32TypeAnnotation"``), annotation class or instance

        Returns:
            C++ type name

        Raises:
            UnknownTypeAnnotationError: If ``tag`` is not one of the scalar tags
        """
        tag_name = tag if isinstance(tag, str) else getattr(tag, "type", tag)

        cpp_type = self._scalar_types.get(tag_name) if isinstance(tag_name, str) else None
        if cpp_type is None:
            logger.error("No C++ type for typeAnnotation %r", tag_name)
            raise UnknownTypeAnnotationError(tag_name)

        return cpp_type


_default_mapper = CppTypeMapper()


def get_cpp_type_for_annotation(tag: AnnotationTag) -> str:
    """Map a scalar annotation tag to its C++ type name using the default config."""
    return _default_mapper.map_annotation_type(tag)
