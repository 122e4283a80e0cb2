from lexguard.analysis.analyzer import Analyzer
from lexguard.analysis.client_base import BaseAnalysisClient
from lexguard.analysis.example_client_adapter import ExampleClientAdapter
from lexguard.analysis.gemini_client_adapter import GeminiClientAdapter
from lexguard.analysis.openai_client_adapter import OpenAIClientAdapter
from lexguard.config.settings import Settings

SUPPORTED_PROVIDERS = ("example", "gemini", "openai", "openai_compatible")


class AnalyzerFactory:
    """Creates an Analyzer wired to the configured AI provider."""

    @classmethod
    def create(cls, settings: Settings) -> Analyzer:
        """Create a configured analyzer from application settings."""
        return Analyzer(
            client=cls.create_client(settings),
            timeout_seconds=settings.attempt_timeout_seconds,
        )

    @classmethod
    def create_client(cls, settings: Settings) -> BaseAnalysisClient:
        provider = settings.analysis_provider.lower()
        if provider == "example":
            return ExampleClientAdapter()
        if provider == "gemini":
            return GeminiClientAdapter(
                api_key=settings.gemini_api_key,
                model=settings.gemini_model_name,
                timeout_seconds=settings.attempt_timeout_seconds,
            )
        if provider == "openai":
            return OpenAIClientAdapter(
                api_key=settings.openai_api_key,
                model=settings.openai_model_name,
                timeout_seconds=settings.attempt_timeout_seconds,
            )
        if provider == "openai_compatible":
            base_url = settings.openai_compatible_base_url.strip()
            if not base_url:
                raise ValueError(
                    "openai_compatible_base_url is required for "
                    "analysis_provider=openai_compatible"
                )
            return OpenAIClientAdapter(
                api_key=settings.openai_compatible_api_key,
                model=settings.openai_compatible_model_name,
                timeout_seconds=settings.attempt_timeout_seconds,
                base_url=base_url,
            )
        raise ValueError(
            f"Unknown analysis provider '{provider}'. Choose from: {list(SUPPORTED_PROVIDERS)}"
        )
