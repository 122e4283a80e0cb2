from abc import ABC, abstractmethod

from lexguard.analysis.models import InvocationRequest


class BaseAnalysisClient(ABC):
    """Contract for provider-specific generative AI clients."""

    @abstractmethod
    def ensure_configured(self) -> None:
        """Fail fast before any network call.

        Raises:
            MissingCredentialsError: if the provider has no usable credentials.
        """

    @abstractmethod
    async def generate(self, request: InvocationRequest) -> str:
        """Send one request and return the raw response text.

        Raises:
            AnalysisNetworkError: on transport or provider-side errors.
            AnalysisResponseError: if the provider returns no text.
        """
