"""Failure taxonomy of the menu analysis pipeline."""

from enum import Enum
from typing import Optional


class FailureKind(str, Enum):
    TRANSPORT_FAILURE = "transport_failure"
    EMPTY_COMPLETION = "empty_completion"
    NO_JSON_FOUND = "no_json_found"
    MALFORMED_JSON = "malformed_json"


class MenuAnalysisError(Exception):
    """Base class; every subclass sets its own ``kind``."""

    kind: FailureKind

    def __init__(self, message: str, raw_text: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.raw_text = raw_text


class TransportFailure(MenuAnalysisError):
    """The vision call never completed or the provider returned an error."""

    kind = FailureKind.TRANSPORT_FAILURE

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class EmptyCompletion(MenuAnalysisError):
    """The vision call succeeded but returned no text."""

    kind = FailureKind.EMPTY_COMPLETION


class NoJsonFound(MenuAnalysisError):
    """The completion contains no JSON array or object."""

    kind = FailureKind.NO_JSON_FOUND


class MalformedJson(MenuAnalysisError):
    """A JSON candidate was found but could not be parsed."""

    kind = FailureKind.MALFORMED_JSON

    def __init__(self, message: str, raw_text: str):
        super().__init__(message, raw_text=raw_text)
