"""
errsift Configuration
Field lists, status-code table and resolution limits
"""

import os
from types import MappingProxyType

# App Info
APP_NAME = "errsift"
APP_VERSION = "1.0"
APP_DESCRIPTION = "Normalizes unstructured error payloads into readable errors"

# Candidate keys for the human-readable part of an error, highest priority first
ERROR_MESSAGE_PROPERTIES = (
    "message",
    "Message",
    "msg",
    "messages",
    "description",
    "reason",
    "detail",
    "details",
    "errors",
    "errorMessage",
    "errorMessages",
    "ErrorMessage",
    "error_message",
    "_error_message",
    "errorDescription",
    "error_description",
    "error_summary",
    "title",
    "text",
    "field",
    "error",
    "err",
    "type",
)

# Candidate keys for the status code
ERROR_CODE_PROPERTIES = (
    "statusCode",
    "status",
    "code",
    "status_code",
    "errorCode",
    "error_code",
)

# Keys followed one level down when nothing matched at the current level
ERROR_NESTING_PROPERTIES = ("error", "err", "response", "body", "data")

# Status codes
UNKNOWN_KEY = "UNKNOWN"
CLIENT_ERROR_CLASS = "4XX"
SERVER_ERROR_CLASS = "5XX"

UNKNOWN_ERROR_MESSAGE = "UNKNOWN ERROR - check the detailed error for more information"

STATUS_CODE_MESSAGES = MappingProxyType({
    CLIENT_ERROR_CLASS: "Your request is invalid or could not get processed by the service",
    "400": "Bad Request - please check the payload of your request",
    "401": "Authorization failed - please check your Credentials",
    "402": "Payment required - please check your payment details",
    "403": "Forbidden - please check your Credentials",
    "404": "The resource you are requesting has not been found",
    "405": "Method not allowed - please check if you are using the right HTTP-Method",
    "429": "Too many requests - take a break! the service is receiving too many requests from you",

    SERVER_ERROR_CLASS: "The service failed to process your request - try again later",
    "500": "The service was not able to process your request and returned an error",
    "502": "Bad Gateway- service failed to handle your request",
    "503": "Service unavailable - try again later",
    "504": "Gateway timed out - try again later",

    UNKNOWN_KEY: UNKNOWN_ERROR_MESSAGE,
})

# Resolution limits
DEFAULT_MAX_TRAVERSAL_DEPTH = 32
MAX_TRAVERSAL_DEPTH = int(os.environ.get("ERRSIFT_MAX_DEPTH") or DEFAULT_MAX_TRAVERSAL_DEPTH)

# Separators
ARRAY_JOIN_SEPARATOR = " | "
ERROR_LIST_SEPARATOR = "|"
