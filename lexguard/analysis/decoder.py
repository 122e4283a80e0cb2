"""Parses a raw model response into an AnalysisResult.

Enumerated values are matched exactly; anything outside the closed sets is a
validation failure rather than being coerced.
"""

import json
from typing import Any

from lexguard.analysis.exceptions import AnalysisResponseError, AnalysisValidationError
from lexguard.analysis.models import AnalysisResult, RiskFinding, RiskLevel, Verdict

_RISK_LEVELS = {level.value: level for level in RiskLevel}
_VERDICTS = {verdict.value: verdict for verdict in Verdict}
_FINDING_TEXT_FIELDS = ("clause", "violation", "recommendation")


def decode_result(raw: str | None) -> AnalysisResult:
    """Parse and validate a response body.

    Raises:
        AnalysisResponseError: if the body is empty or not a JSON object.
        AnalysisValidationError: if the object violates the result schema.
    """
    data = _parse_json(raw)
    for key in ("summary", "risks", "verdict"):
        if key not in data:
            raise AnalysisValidationError(f"Missing required field: {key}")

    summary = data["summary"]
    if not isinstance(summary, str):
        raise AnalysisValidationError("'summary' must be a string")
    return AnalysisResult(
        summary=summary,
        verdict=_build_verdict(data["verdict"]),
        risks=_build_findings(data["risks"]),
    )


def _parse_json(raw: str | None) -> dict[str, Any]:
    cleaned = (raw or "").strip()
    if cleaned.startswith("```"):
        lines = cleaned.splitlines()
        if lines and lines[0].startswith("```"):
            lines = lines[1:]
        if lines and lines[-1].strip() == "```":
            lines = lines[:-1]
        cleaned = "\n".join(lines).strip()
    if not cleaned:
        raise AnalysisResponseError("Empty response body")

    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise AnalysisResponseError(f"Invalid JSON response: {exc}") from exc

    if not isinstance(parsed, dict):
        raise AnalysisResponseError("JSON response must be an object")
    return parsed


def _build_verdict(raw: Any) -> Verdict:
    verdict = _VERDICTS.get(raw) if isinstance(raw, str) else None
    if verdict is None:
        raise AnalysisValidationError(
            f"'verdict' must be one of {sorted(_VERDICTS)}, got {raw!r}"
        )
    return verdict


def _build_findings(raw: Any) -> tuple[RiskFinding, ...]:
    if not isinstance(raw, list):
        raise AnalysisValidationError("'risks' must be a list")
    return tuple(_build_finding(item, i) for i, item in enumerate(raw))


def _build_finding(raw: Any, index: int) -> RiskFinding:
    if not isinstance(raw, dict):
        raise AnalysisValidationError(f"Risk at index {index} must be an object")
    for key in _FINDING_TEXT_FIELDS:
        if not isinstance(raw.get(key), str):
            raise AnalysisValidationError(
                f"Risk at index {index}: '{key}' must be a string"
            )
    level_token = raw.get("riskLevel")
    level = _RISK_LEVELS.get(level_token) if isinstance(level_token, str) else None
    if level is None:
        raise AnalysisValidationError(
            f"Risk at index {index}: 'riskLevel' must be one of "
            f"{sorted(_RISK_LEVELS)}, got {level_token!r}"
        )
    return RiskFinding(
        clause=raw["clause"],
        risk_level=level,
        violation=raw["violation"],
        recommendation=raw["recommendation"],
    )
