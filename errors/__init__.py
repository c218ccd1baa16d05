"""
errsift Error Module
Raisable node errors and result assembly
"""

from .node_error import (
    ErrorKind,
    ResolvedError,
    ErrorNormalizer,
    NodeError,
    DEFAULT_NORMALIZER,
    join_code_and_description,
)

__all__ = [
    "ErrorKind",
    "ResolvedError",
    "ErrorNormalizer",
    "NodeError",
    "DEFAULT_NORMALIZER",
    "join_code_and_description",
]
