"""
Conversion errors

Only data-integrity problems are raised; degenerate input yields no feature.
"""

from typing import List


class ConversionError(Exception):
    """Base class for converter errors"""


class DataIntegrityError(ConversionError):
    """Input elements are inconsistent with each other"""


class CyclicRelationError(DataIntegrityError):
    """A relation is reachable from its own members"""

    def __init__(self, path: List[str]):
        self.path = path
        super().__init__(f"Cyclic relation membership: {' -> '.join(path)}")


class MissingElementError(DataIntegrityError):
    """A way or relation references an element that was not supplied"""

    def __init__(self, ref: str, referenced_by: str):
        self.ref = ref
        self.referenced_by = referenced_by
        super().__init__(f"{referenced_by} references missing element {ref}")
