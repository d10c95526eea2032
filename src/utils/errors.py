"""Custom exception hierarchy for the feedback service.

All application exceptions inherit from :class:`FeedbackServiceError`, which
carries the HTTP ``status_code`` the error maps to, so the error middleware
can turn any of them into a response without a lookup table.

    FeedbackServiceError  (base -- catch-all for any service error)
    +-- InvalidSubmissionError  (400: form is missing a required field)
    |   +-- InvalidTitleError   (400: title is not filename-safe)
    +-- StorageError            (500: filesystem failure other than "exists")
    +-- ConfigurationError      (500: startup / missing config)

A duplicate title is NOT an error: the store reports it as
``PutOutcome.CONFLICT`` and the route redirects to the conflict page.
"""


class FeedbackServiceError(Exception):
    """Base exception for all feedback service errors.

    ``message`` is safe to show to the client.  Anything sensitive (paths,
    errno details) belongs in the log call that accompanies the raise.
    """

    status_code: int = 500

    def __init__(self, message: str = "An unexpected error occurred") -> None:
        self._message = message
        super().__init__(self._message)

    @property
    def message(self) -> str:
        return self._message


# ---------------------------------------------------------------------------
# Client errors
# ---------------------------------------------------------------------------

class InvalidSubmissionError(FeedbackServiceError):
    """Raised when a submission is missing a required form field."""

    status_code = 400

    def __init__(self, message: str = "Invalid feedback submission") -> None:
        super().__init__(message=message)


class InvalidTitleError(InvalidSubmissionError):
    """Raised when a title cannot be used as a filename stem."""

    def __init__(self, message: str = "Title is not a valid file name") -> None:
        super().__init__(message=message)


# ---------------------------------------------------------------------------
# Server errors
# ---------------------------------------------------------------------------

class StorageError(FeedbackServiceError):
    """Raised when the feedback store fails for any reason but a duplicate.

    The original ``OSError`` is chained as ``__cause__``.
    """

    def __init__(self, message: str = "Could not store feedback") -> None:
        super().__init__(message=message)


class ConfigurationError(FeedbackServiceError):
    """Raised when configuration is invalid or missing at startup."""

    def __init__(self, message: str = "Invalid or missing configuration") -> None:
        super().__init__(message=message)
