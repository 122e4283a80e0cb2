class AnalysisError(Exception):
    """Raised when document analysis fails."""


class MissingCredentialsError(AnalysisError):
    """Raised before any remote call when the backend has no API key configured."""


class UnsupportedLanguageError(AnalysisError, ValueError):
    """Raised when the requested report language is not supported."""


class EmptyDocumentError(AnalysisError, ValueError):
    """Raised when the uploaded document contains no bytes."""


class AttemptError(AnalysisError):
    """One tier of the invocation ladder failed; the next tier may still succeed."""

    def __init__(self, message: str, tier: int | None = None) -> None:
        super().__init__(message)
        self.tier = tier


class AnalysisNetworkError(AttemptError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""


class AnalysisResponseError(AttemptError):
    """Raised when the AI provider returns an empty or non-JSON body."""


class AnalysisValidationError(AnalysisResponseError):
    """Raised when a parsed response violates the analysis result schema."""


class AnalysisExhaustedError(AnalysisError):
    """Raised when every tier failed. The message is safe to show to users."""

    USER_MESSAGE = "Analysis failed. The document might be too complex or unreadable."

    def __init__(self, attempts: int, last_cause: BaseException | None) -> None:
        super().__init__(self.USER_MESSAGE)
        self.attempts = attempts
        self.last_cause = last_cause
