"""
Hash algorithm adapters and registry.

Every adapter implements the Hasher contract; most share the generic
IncrementalHasher body and differ only in engine and digest width.
"""

from .algorithms import BUILTIN_HASHERS
from .base import BaseHasher
from .checksums import ChecksumEngine
from .incremental import IncrementalHasher, variable_width, width32, width64
from .perceptual import PerceptualHasher
from .registry import HashAlgorithmRegistry, get_registry

__all__ = [
    "BUILTIN_HASHERS",
    "BaseHasher",
    "ChecksumEngine",
    "HashAlgorithmRegistry",
    "IncrementalHasher",
    "PerceptualHasher",
    "get_registry",
    "variable_width",
    "width32",
    "width64",
]
