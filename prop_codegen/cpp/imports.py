"""
Header includes required by native primitive props.

Walks a property list, including array element types and nested object
properties, and collects the ``#include`` statements the generated props need.
"""

from typing import Dict, List, Optional, Sequence

from ..logging_config import get_logger
from ..core.config import CppTypeConfig
from ..core.errors import assert_unreachable
from ..core.schema import (
    ArrayTypeAnnotation,
    NativePrimitiveName,
    NativePrimitiveTypeAnnotation,
    ObjectTypeAnnotation,
    PropTypeShape,
)

logger = get_logger(__name__)


class CppImportResolver:
    """Resolves native primitive props to the include statements they need."""

    def __init__(self, config: Optional[CppTypeConfig] = None):
        self.config = config or CppTypeConfig()

    def include_for_native_primitive(self, name: NativePrimitiveName) -> Optional[str]:
        """Return the include for a native primitive, or None when it needs none."""
        match name:
            case NativePrimitiveName.COLOR | NativePrimitiveName.POINT:
                return None
            case NativePrimitiveName.IMAGE_SOURCE:
                return self.config.image_source_include
            case _:
                assert_unreachable(name, "native primitive name")

    def resolve(self, properties: Sequence[PropTypeShape]) -> List[str]:
        """
        Collect the includes needed by a property list.

        Args:
            properties: Props of a component or of a nested object

        Returns:
            Include statements, each once, in first-discovery order

        Raises:
            UnknownTypeAnnotationError: If a native primitive name is not known
        """
        # dict keeps insertion order, so output is stable across runs
        imports: Dict[str, None] = {}
        self._collect(properties, imports)
        return list(imports)

    def _collect(self, properties: Sequence[PropTypeShape], imports: Dict[str, None]) -> None:
        for prop in properties:
            annotation = prop.type_annotation

            if isinstance(annotation, NativePrimitiveTypeAnnotation):
                self._add(annotation.name, imports)

            elif isinstance(annotation, ArrayTypeAnnotation) and isinstance(
                annotation.element_type, NativePrimitiveTypeAnnotation
            ):
                self._add(annotation.element_type.name, imports)

            elif isinstance(annotation, ObjectTypeAnnotation):
                self._collect(annotation.properties, imports)

    def _add(self, name: NativePrimitiveName, imports: Dict[str, None]) -> None:
        include = self.include_for_native_primitive(name)
        if include is not None and include not in imports:
            logger.debug("Native primitive %s needs %s", name, include)
            imports[include] = None


_default_resolver = CppImportResolver()


def get_imports(properties: Sequence[PropTypeShape]) -> List[str]:
    """Collect the includes needed by a property list using the default config."""
    return _default_resolver.resolve(properties)
