from pathlib import Path

from lexguard.analysis.capabilities import CapabilityProfile
from lexguard.analysis.models import InvocationRequest, Language
from lexguard.analysis.prompt_loader import (
    load_json_schema,
    load_system_prompt,
    load_user_prompt_template,
)
from lexguard.extraction.models import ContentBlock


class RequestBuilder:
    """Builds one invocation request per capability tier.

    Prompts, content and schema are identical across tiers; only the tier's
    capabilities differ.
    """

    def __init__(
        self,
        *,
        system_prompt_path: Path | None = None,
        user_prompt_path: Path | None = None,
        json_schema_path: Path | None = None,
    ) -> None:
        self._system_prompt = load_system_prompt(system_prompt_path)
        self._user_prompt_template = load_user_prompt_template(user_prompt_path)
        self._json_schema = load_json_schema(json_schema_path)

    def build(
        self,
        content: ContentBlock,
        language: Language,
        profile: CapabilityProfile,
        document_name: str = "document",
    ) -> list[InvocationRequest]:
        user_prompt = self._user_prompt_template.format(language=language.value).strip()
        return [
            InvocationRequest(
                tier=tier,
                system_prompt=self._system_prompt,
                user_prompt=user_prompt,
                content=content,
                json_schema=self._json_schema,
                document_name=document_name,
            )
            for tier in profile
        ]
