import json
from pathlib import Path

from lexguard.analysis.exceptions import AnalysisError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_system_prompt(path: Path | None = None) -> str:
    """Load the fixed system instruction.

    Raises:
        AnalysisError: if the file cannot be read.
    """
    return _read(path or _DEFAULT_PROMPT_DIR / "system_prompt.txt", "system prompt")


def load_user_prompt_template(path: Path | None = None) -> str:
    """Load the user instruction template with a ``{language}`` placeholder.

    Raises:
        AnalysisError: if the file cannot be read.
    """
    return _read(path or _DEFAULT_PROMPT_DIR / "user_prompt.txt", "user prompt template")


def load_json_schema(path: Path | None = None) -> dict[str, object]:
    """Load and parse the response JSON schema.

    Raises:
        AnalysisError: if the file cannot be read or is not a JSON object.
    """
    raw = _read(path or _DEFAULT_PROMPT_DIR / "analysis_schema.json", "JSON schema")
    try:
        schema = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise AnalysisError(f"Invalid JSON schema: {exc}") from exc
    if not isinstance(schema, dict):
        raise AnalysisError("JSON schema must be an object")
    return schema


def _read(path: Path, label: str) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise AnalysisError(f"Failed to load {label}: {exc}") from exc
