"""Detection error kinds.

Every stage of the pipeline raises one of these at the point where it
detects a failure. Each kind carries the fixed user-facing message and the
HTTP status the API answers with; raw causes stay in the logs.
"""

from typing import Optional


class DetectionError(Exception):
    """Base class for all classified detection failures."""

    status_code = 500
    message = "Internal server error"

    def __init__(self, message: Optional[str] = None, *, status_code: Optional[int] = None):
        super().__init__(message or self.message)
        if message:
            self.message = message
        if status_code is not None:
            self.status_code = status_code


class InvalidInput(DetectionError):
    """No text, headline or URL was supplied."""

    status_code = 400
    message = "Please provide URL, text, or headline"


class InvalidURL(DetectionError):
    status_code = 400
    message = "Invalid URL format"


class FetchTimeout(DetectionError):
    status_code = 400
    message = "Request timeout - the website took too long to respond"


class FetchError(DetectionError):
    """Acquisition failed: non-2xx answer, transport error or unparsable markup."""

    status_code = 400
    message = "Failed to fetch or parse URL content"

    def __init__(self, message: Optional[str] = None, *, upstream_status: Optional[int] = None):
        super().__init__(message)
        self.upstream_status = upstream_status


class MalformedUpstreamResponse(DetectionError):
    """The remote classifier answered with something that is not a valid verdict."""

    status_code = 500
    message = "Invalid response from AI"


class UpstreamError(DetectionError):
    status_code = 502
    message = "Failed to analyze content"


class ClassifierUnavailable(DetectionError):
    status_code = 500
    message = "API key not configured"


class InternalError(DetectionError):
    status_code = 500
    message = "Internal server error"
