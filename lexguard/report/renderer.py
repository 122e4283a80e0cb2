from lexguard.analysis.models import AnalysisResult, Language
from lexguard.report.labels import REPORT_LABELS, RISK_LEVEL_LABELS, VERDICT_LABELS


def render_report(result: AnalysisResult, language: Language) -> str:
    """Render an analysis result as a plain-text report in ``language``."""
    labels = REPORT_LABELS[language]
    lines = [
        f"{labels['report_title']}: {VERDICT_LABELS[language][result.verdict]}",
        "",
        labels["summary_title"],
        result.summary,
        "",
        labels["risks_title"],
    ]
    if not result.risks:
        lines.extend([labels["no_risks_title"], labels["no_risks_text"]])
        return "\n".join(lines)

    for index, risk in enumerate(result.risks, start=1):
        lines.extend([
            "",
            f"{index}. [{RISK_LEVEL_LABELS[language][risk.risk_level]}]",
            f"   {labels['clause_ref']}: {risk.clause}",
            f"   {labels['violation']}: {risk.violation}",
            f"   {labels['recommendation']}: {risk.recommendation}",
        ])
    return "\n".join(lines)
