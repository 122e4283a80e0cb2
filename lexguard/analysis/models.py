from dataclasses import dataclass, field
from enum import Enum

from lexguard.extraction.models import ContentBlock


class Language(str, Enum):
    """Report languages the model is asked to answer in."""

    EN = "en"
    RU = "ru"
    KZ = "kz"


class RiskLevel(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


class Verdict(str, Enum):
    SAFE = "Safe"
    NEEDS_REVIEW = "Needs Review"
    DANGEROUS = "Dangerous"


@dataclass(frozen=True)
class RiskFinding:
    """A single risky clause reported by the model."""

    clause: str
    risk_level: RiskLevel
    violation: str
    recommendation: str


@dataclass(frozen=True)
class AnalysisResult:
    """Structured legal-risk report. The verdict is passed through from the model."""

    summary: str
    verdict: Verdict
    risks: tuple[RiskFinding, ...] = ()

    def to_payload(self) -> dict[str, object]:
        """Wire-shaped dict matching the response schema."""
        return {
            "summary": self.summary,
            "risks": [
                {
                    "clause": risk.clause,
                    "riskLevel": risk.risk_level.value,
                    "violation": risk.violation,
                    "recommendation": risk.recommendation,
                }
                for risk in self.risks
            ],
            "verdict": self.verdict.value,
        }


@dataclass(frozen=True)
class CapabilityTier:
    """One rung of the invocation ladder, numbered from 1 (most capable)."""

    number: int
    deep_reasoning: bool = False
    web_search: bool = False

    @property
    def capabilities(self) -> frozenset[str]:
        """Capability names; the output schema is always present."""
        names = {"schema"}
        if self.deep_reasoning:
            names.add("deep_reasoning")
        if self.web_search:
            names.add("web_search")
        return frozenset(names)


@dataclass(frozen=True)
class InvocationRequest:
    """Everything a client adapter needs for one remote call."""

    tier: CapabilityTier
    system_prompt: str
    user_prompt: str
    content: ContentBlock
    json_schema: dict[str, object] = field(default_factory=dict)
    document_name: str = "document"

    def prompt_text(self) -> str:
        """User instruction, followed by the document itself for text content."""
        if self.content.is_text:
            return f"{self.user_prompt}\n\nDocument Content:\n{self.content.text}"
        return self.user_prompt
