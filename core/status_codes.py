"""
errsift Status Codes
Maps resolved status codes to canned explanations
"""

from types import MappingProxyType
from typing import Mapping, Optional

from config import (
    STATUS_CODE_MESSAGES, UNKNOWN_ERROR_MESSAGE, UNKNOWN_KEY,
    CLIENT_ERROR_CLASS, SERVER_ERROR_CLASS
)

STATUS_CLASSES = {
    "4": CLIENT_ERROR_CLASS,
    "5": SERVER_ERROR_CLASS,
}


def status_class(code: Optional[str]) -> Optional[str]:
    """Coarse class of a code by its leading digit ("4XX", "5XX"), None otherwise"""
    if not code:
        return None
    return STATUS_CLASSES.get(str(code)[0])


class StatusCodeClassifier:
    """Turns a status code into a human explanation, never fails"""

    def __init__(self, table: Mapping[str, str] = STATUS_CODE_MESSAGES):
        self.table = MappingProxyType(dict(table))

    @property
    def unknown_message(self) -> str:
        return self.table.get(UNKNOWN_KEY) or UNKNOWN_ERROR_MESSAGE

    def classify(self, code: Optional[str]) -> str:
        """Exact match first, then the 4XX/5XX class, then the unknown entry"""
        if not code:
            return self.unknown_message

        code = str(code)
        if self.table.get(code):
            return self.table[code]

        code_class = status_class(code)
        if code_class:
            return self.table.get(code_class) or self.unknown_message

        return self.unknown_message
