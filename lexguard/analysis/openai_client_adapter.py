import httpx
import openai

from lexguard.analysis.client_base import BaseAnalysisClient
from lexguard.analysis.exceptions import (
    AnalysisNetworkError,
    AnalysisResponseError,
    MissingCredentialsError,
)
from lexguard.analysis.models import InvocationRequest


class OpenAIClientAdapter(BaseAnalysisClient):
    """Analysis client built on the OpenAI Responses API (or a compatible endpoint)."""

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._timeout_seconds = timeout_seconds
        self._base_url = base_url
        self._client: openai.AsyncOpenAI | None = None

    def ensure_configured(self) -> None:
        if not self._api_key.strip():
            raise MissingCredentialsError("OpenAI API key is missing. Set OPENAI_API_KEY.")

    async def generate(self, request: InvocationRequest) -> str:
        tier = request.tier.number
        try:
            response = await self._get_client().responses.create(**self._build_kwargs(request))
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise AnalysisNetworkError(f"AI provider network error: {exc}", tier=tier) from exc
        except openai.APIError as exc:
            raise AnalysisNetworkError(f"AI provider API error: {exc}", tier=tier) from exc

        content = response.output_text
        if not content:
            raise AnalysisResponseError("AI returned empty response", tier=tier)
        return content

    def _get_client(self) -> openai.AsyncOpenAI:
        if self._client is None:
            self._client = openai.AsyncOpenAI(
                api_key=self._api_key,
                timeout=self._timeout_seconds,
                base_url=self._base_url,
            )
        return self._client

    def _build_kwargs(self, request: InvocationRequest) -> dict[str, object]:
        kwargs: dict[str, object] = {
            "model": self._model,
            "instructions": request.system_prompt,
            "input": [{"role": "user", "content": self._build_content(request)}],
            "text": {
                "format": {
                    "type": "json_schema",
                    "name": "analysis_result",
                    "strict": True,
                    "schema": request.json_schema,
                },
            },
        }
        if request.tier.deep_reasoning:
            kwargs["reasoning"] = {"effort": "high"}
        if request.tier.web_search:
            kwargs["tools"] = [{"type": "web_search"}]
        return kwargs

    @staticmethod
    def _build_content(request: InvocationRequest) -> list[dict[str, str]]:
        content = request.content
        prompt = {"type": "input_text", "text": request.prompt_text()}
        if content.is_text:
            return [prompt]
        data_url = f"data:{content.mime_type};base64,{content.inline_data}"
        if content.mime_type is not None and content.mime_type.startswith("image/"):
            return [{"type": "input_image", "image_url": data_url}, prompt]
        return [
            {"type": "input_file", "filename": request.document_name, "file_data": data_url},
            prompt,
        ]
