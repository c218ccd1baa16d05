"""
errsift Payload Extraction
Turns caught errors into JSON-like payloads the field resolver can search
"""

import logging
from collections.abc import Mapping
from typing import Any, Dict

import httpx
import openai

logger = logging.getLogger(__name__)

JSON_TYPES = (str, int, float, bool, type(None), list, tuple, Mapping)


def response_body(response: httpx.Response) -> Any:
    """Parsed JSON body of a response, its text if it is not JSON, None if unread"""
    try:
        return response.json()
    except ValueError:
        logger.debug("Response body of %s is not JSON, using text", response.status_code)
    except httpx.ResponseNotRead:
        logger.debug("Response body of %s was never read", response.status_code)
        return None
    return response.text


def _with_body(payload: Dict[str, Any], body: Any, fallback_message: str) -> Dict[str, Any]:
    # A structured body goes under a nesting key so its own message wins
    # over the client library's generic one.
    if isinstance(body, Mapping) and body:
        payload["error"] = body
    elif isinstance(body, str) and body.strip():
        payload["message"] = body
    else:
        payload["message"] = fallback_message
    return payload


def payload_from_error(error: Any) -> Any:
    """
    Build a searchable payload from a caught error.

    Mappings pass through unchanged, strings become {"message": ...}. HTTP
    status errors from httpx and openai carry their status code and decoded
    body; any other exception contributes its JSON-like instance attributes.
    """
    if isinstance(error, Mapping):
        return error

    if isinstance(error, str):
        return {"message": error}

    if isinstance(error, httpx.HTTPStatusError):
        payload = {"statusCode": error.response.status_code}
        return _with_body(payload, response_body(error.response), str(error))

    if isinstance(error, openai.APIStatusError):
        payload = {"statusCode": error.status_code}
        return _with_body(payload, error.body, error.message)

    if isinstance(error, BaseException):
        payload = {
            key: value
            for key, value in getattr(error, "__dict__", {}).items()
            if not key.startswith("__") and isinstance(value, JSON_TYPES)
        }
        if not payload.get("message"):
            payload["message"] = str(error)
        return payload

    return error
