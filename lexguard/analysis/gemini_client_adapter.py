import httpx
from google import genai
from google.genai import errors, types

from lexguard.analysis.client_base import BaseAnalysisClient
from lexguard.analysis.exceptions import (
    AnalysisNetworkError,
    AnalysisResponseError,
    MissingCredentialsError,
)
from lexguard.analysis.models import InvocationRequest


class GeminiClientAdapter(BaseAnalysisClient):
    """Analysis client built on the google-genai async API."""

    def __init__(self, *, api_key: str, model: str, timeout_seconds: int) -> None:
        self._api_key = api_key
        self._model = model
        self._timeout_seconds = timeout_seconds
        self._client: genai.Client | None = None

    def ensure_configured(self) -> None:
        if not self._api_key.strip():
            raise MissingCredentialsError("Gemini API key is missing. Set GEMINI_API_KEY.")

    async def generate(self, request: InvocationRequest) -> str:
        tier = request.tier.number
        try:
            response = await self._get_client().aio.models.generate_content(
                model=self._model,
                contents=[types.Content(role="user", parts=self._build_parts(request))],
                config=self._build_config(request),
            )
        except httpx.TransportError as exc:
            raise AnalysisNetworkError(f"AI provider network error: {exc}", tier=tier) from exc
        except errors.APIError as exc:
            raise AnalysisNetworkError(f"AI provider API error: {exc}", tier=tier) from exc

        text = response.text
        if not text:
            raise AnalysisResponseError("AI returned empty response", tier=tier)
        return text

    def _get_client(self) -> genai.Client:
        if self._client is None:
            self._client = genai.Client(
                api_key=self._api_key,
                http_options=types.HttpOptions(timeout=self._timeout_seconds * 1000),
            )
        return self._client

    @staticmethod
    def _build_parts(request: InvocationRequest) -> list[types.Part]:
        content = request.content
        if content.is_text:
            return [types.Part.from_text(text=request.prompt_text())]
        return [
            types.Part.from_bytes(data=content.decoded_bytes(), mime_type=content.mime_type),
            types.Part.from_text(text=request.prompt_text()),
        ]

    @staticmethod
    def _build_config(request: InvocationRequest) -> types.GenerateContentConfig:
        tier = request.tier
        return types.GenerateContentConfig(
            system_instruction=request.system_prompt,
            thinking_config=(
                types.ThinkingConfig(thinking_level=types.ThinkingLevel.HIGH)
                if tier.deep_reasoning
                else None
            ),
            tools=[types.Tool(google_search=types.GoogleSearch())] if tier.web_search else None,
            response_mime_type="application/json",
            response_json_schema=request.json_schema,
        )
