"""
Follow Manager exception classes
"""

from __future__ import annotations


class FollowDataError(Exception):
    """Base error for a failed analysis attempt.

    ``code`` is stable and doubles as the localization key of the message
    shown to the user.
    """

    code = "invalidFile"

    def __init__(self, message: str = "") -> None:
        self.message = message
        super().__init__(self.message)


class MissingInput(FollowDataError):
    """One or both required file payloads are absent"""

    code = "missingFiles"


class UnparseableContent(FollowDataError):
    """Raw content is not valid JSON"""

    code = "invalidFile"


class InvalidFormat(FollowDataError):
    """Valid JSON, but no recognizable user list in either input"""

    code = "invalidFile"


class RemoteFetchFailed(FollowDataError):
    """The remote analysis service failed or could not be reached"""

    code = "fetchError"

    def __init__(
        self, message: str = "", status_code: int = 0, response: dict | None = None
    ) -> None:
        self.status_code = status_code
        self.response = response or {}
        super().__init__(message)
