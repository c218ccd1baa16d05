"""
errsift Node Errors
Result assembly and the raisable error wrapper
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, asdict
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional, Sequence, Tuple

from config import (
    ERROR_MESSAGE_PROPERTIES, ERROR_CODE_PROPERTIES, ERROR_NESTING_PROPERTIES,
    ERROR_LIST_SEPARATOR
)
from core.payload import payload_from_error
from core.resolver import ErrorFieldResolver
from core.status_codes import StatusCodeClassifier

logger = logging.getLogger(__name__)


# ==========================================
# RESOLVED ERROR
# ==========================================

class ErrorKind(Enum):
    OPERATION = "operation"
    API = "api"


ERROR_NAMES = {
    ErrorKind.OPERATION: "NodeOperationError",
    ErrorKind.API: "NodeApiError",
}


@dataclass(frozen=True)
class ResolvedError:
    message: str
    description: Optional[str] = None
    http_code: Optional[str] = None

    def to_dict(self) -> Dict[str, Optional[str]]:
        return asdict(self)


def join_code_and_description(http_code: Optional[str],
                              description: Optional[str]) -> Optional[str]:
    """Prefix the description with the status code when both are known"""
    if http_code and description:
        return f"{http_code} - {description}"
    return description


def get_path(payload: Any, path: Sequence[str]) -> Any:
    value = payload
    for key in path:
        if not isinstance(value, Mapping):
            return None
        value = value.get(key)
    return value


# ==========================================
# NORMALIZER
# ==========================================

class ErrorNormalizer:
    """Composes field resolution and status classification into a ResolvedError"""

    def __init__(
        self,
        resolver: Optional[ErrorFieldResolver] = None,
        classifier: Optional[StatusCodeClassifier] = None,
        message_properties: Sequence[str] = ERROR_MESSAGE_PROPERTIES,
        code_properties: Sequence[str] = ERROR_CODE_PROPERTIES,
        nesting_properties: Sequence[str] = ERROR_NESTING_PROPERTIES,
    ):
        self.resolver = resolver or ErrorFieldResolver()
        self.classifier = classifier or StatusCodeClassifier()
        self.message_properties = tuple(message_properties)
        self.code_properties = tuple(code_properties)
        self.nesting_properties = tuple(nesting_properties)

    def _classified(self, node_name: str, payload: Any) -> Tuple[str, Optional[str]]:
        http_code = self.resolver.resolve(payload, self.code_properties, self.nesting_properties)
        return f"{node_name}: {self.classifier.classify(http_code)}", http_code

    def normalize(self, node_name: str, payload: Any) -> ResolvedError:
        """Search the payload for a status code and a description"""
        message, http_code = self._classified(node_name, payload)
        description = self.resolver.resolve(payload, self.message_properties, self.nesting_properties)
        return ResolvedError(
            message=message,
            description=join_code_and_description(http_code, description),
            http_code=http_code,
        )

    def from_overrides(
        self,
        node_name: str,
        message: Optional[str] = None,
        description: Optional[str] = None,
        http_code: Optional[str] = None,
    ) -> ResolvedError:
        """Use caller-supplied values instead of searching a payload"""
        http_code = str(http_code) if http_code else None
        if not message:
            message = self.classifier.classify(http_code)

        if http_code and not description:
            description = f"Status Code: {http_code}"
        else:
            description = join_code_and_description(http_code, description)

        return ResolvedError(
            message=f"{node_name}: {message}",
            description=description or None,
            http_code=http_code,
        )

    def from_error_list(self, node_name: str, payload: Any, path: Sequence[str]) -> ResolvedError:
        """
        Build the description from a known list of error objects.

        The list found at ``path`` is expected to hold mappings with a
        ``message`` key; their messages are joined with "|". The status code is
        still searched for the usual way.
        """
        message, http_code = self._classified(node_name, payload)

        items = get_path(payload, path)
        description = None
        if isinstance(items, (list, tuple)):
            messages = [
                str(item["message"]) for item in items
                if isinstance(item, Mapping) and item.get("message")
            ]
            description = ERROR_LIST_SEPARATOR.join(messages) or None
        else:
            logger.debug("No error list at %s for node %s", "/".join(path), node_name)

        return ResolvedError(
            message=message,
            description=join_code_and_description(http_code, description),
            http_code=http_code,
        )


DEFAULT_NORMALIZER = ErrorNormalizer()


# ==========================================
# NODE ERROR
# ==========================================

class NodeError(Exception):
    """
    Error raised on behalf of a node (any named operation).

    ``kind`` tells operation errors (a failure of our own logic, described by a
    plain message) from API errors (a failure reported by an external service,
    whose payload is searched for a status code and description).
    """

    def __init__(self, kind: ErrorKind, node: str, cause: Any, resolved: ResolvedError):
        super().__init__(resolved.message)
        self.kind = kind
        self.name = ERROR_NAMES[kind]
        self.node = node
        self.cause = cause
        self.resolved = resolved
        self.timestamp = datetime.now(timezone.utc)

    @property
    def message(self) -> str:
        return self.resolved.message

    @property
    def description(self) -> Optional[str]:
        return self.resolved.description

    @property
    def http_code(self) -> Optional[str]:
        return self.resolved.http_code

    @classmethod
    def operation(cls, node: str, error: Any) -> "NodeError":
        """Wrap a failure of the node itself; strings are used as the message as-is"""
        text = error if isinstance(error, str) else str(error)
        return cls(ErrorKind.OPERATION, node, error, ResolvedError(message=f"{node}: {text}"))

    @classmethod
    def api(
        cls,
        node: str,
        error: Any,
        *,
        message: Optional[str] = None,
        description: Optional[str] = None,
        http_code: Optional[str] = None,
        error_list_path: Optional[Sequence[str]] = None,
        normalizer: Optional[ErrorNormalizer] = None,
    ) -> "NodeError":
        """Wrap an error reported by an external service"""
        normalizer = normalizer or DEFAULT_NORMALIZER

        if message or description or http_code:
            resolved = normalizer.from_overrides(node, message, description, http_code)
        else:
            payload = payload_from_error(error)
            if error_list_path:
                resolved = normalizer.from_error_list(node, payload, error_list_path)
            else:
                resolved = normalizer.normalize(node, payload)

        logger.debug("%s for %s resolved to code %s", ERROR_NAMES[ErrorKind.API], node, resolved.http_code)
        return cls(ErrorKind.API, node, error, resolved)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "name": self.name,
            "node": self.node,
            "message": self.message,
            "description": self.description,
            "http_code": self.http_code,
            "timestamp": self.timestamp.isoformat(),
        }
