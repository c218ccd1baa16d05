"""
errsift Field Resolver
Guided search for message and status fields in nested error payloads
"""

import logging
import math
from collections.abc import Mapping
from typing import Any, FrozenSet, List, Optional, Sequence, Tuple

from config import ARRAY_JOIN_SEPARATOR, MAX_TRAVERSAL_DEPTH

logger = logging.getLogger(__name__)


# ==========================================
# VALUE HELPERS
# ==========================================

def is_traversable(value: Any) -> bool:
    """True for a mapping with at least one key"""
    return isinstance(value, Mapping) and len(value) > 0


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def stringify_number(value) -> str:
    """Decimal form of a number, integral floats without the trailing .0"""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def is_present(value: Any) -> bool:
    """Whether a JSON-like value counts as set (None, "", 0, NaN and empty containers do not)"""
    if isinstance(value, float) and math.isnan(value):
        return False
    if isinstance(value, (str, int, float, list, tuple, Mapping)):
        return bool(value)
    return False


# ==========================================
# RESOLVER
# ==========================================

class ErrorFieldResolver:
    """
    Finds the most plausible value for an ordered list of candidate keys.

    At every level the candidate keys are tried first, in order. Only when none
    of them yields a value does the search descend into the traversal keys, so a
    lower-priority candidate next to the root beats a higher-priority one found
    deeper down.
    """

    def __init__(self, max_depth: int = MAX_TRAVERSAL_DEPTH):
        self.max_depth = max_depth

    def resolve(self, node: Any, field_spec: Sequence[str],
                traversal_spec: Sequence[str]) -> Optional[str]:
        """Return the first matching value as a string, or None if nothing matched"""
        if not is_traversable(node):
            return None
        return self._find(node, tuple(field_spec), tuple(traversal_spec), 0, frozenset())

    def _find(self, node: Mapping, field_spec: Tuple[str, ...], traversal_spec: Tuple[str, ...],
              depth: int, path: FrozenSet[int]) -> Optional[str]:
        if depth > self.max_depth:
            logger.debug("Error search stopped at depth %d (max %d)", depth, self.max_depth)
            return None
        if id(node) in path:
            logger.debug("Error search skipped a circular reference at depth %d", depth)
            return None
        path = path | {id(node)}

        for key in field_spec:
            value = node.get(key)
            if not is_present(value):
                continue
            if isinstance(value, str):
                return value
            if is_number(value):
                return stringify_number(value)
            if isinstance(value, (list, tuple)):
                resolved = self._resolve_items(value, field_spec, traversal_spec, depth, path)
                if resolved:
                    return ARRAY_JOIN_SEPARATOR.join(resolved)

        for key in traversal_spec:
            value = node.get(key)
            if not is_traversable(value):
                continue
            found = self._find(value, field_spec, traversal_spec, depth + 1, path)
            if found is not None:
                return found

        return None

    def _resolve_items(self, items: Sequence[Any], field_spec: Tuple[str, ...],
                       traversal_spec: Tuple[str, ...], depth: int,
                       path: FrozenSet[int]) -> List[str]:
        resolved = []
        for item in items:
            if isinstance(item, str):
                resolved.append(item)
            elif is_number(item):
                resolved.append(stringify_number(item))
            elif is_traversable(item):
                found = self._find(item, field_spec, traversal_spec, depth + 1, path)
                if found is not None:
                    resolved.append(found)
        return resolved
