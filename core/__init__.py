"""
errsift Core Module
Field search, status classification and payload extraction
"""

from .resolver import ErrorFieldResolver, is_traversable, stringify_number
from .status_codes import StatusCodeClassifier, status_class
from .payload import payload_from_error, response_body

__all__ = [
    "ErrorFieldResolver",
    "is_traversable",
    "stringify_number",
    "StatusCodeClassifier",
    "status_class",
    "payload_from_error",
    "response_body",
]
