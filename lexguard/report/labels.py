from lexguard.analysis.models import Language, RiskLevel, Verdict

REPORT_LABELS: dict[Language, dict[str, str]] = {
    Language.EN: {
        "report_title": "Analysis Report",
        "summary_title": "Executive Summary",
        "risks_title": "Identified Risks & Violations",
        "no_risks_title": "No significant risks detected.",
        "no_risks_text": "The document appears to be compliant with KZ legislation.",
        "clause_ref": "Clause Reference",
        "violation": "Violation / Risk",
        "recommendation": "Recommendation",
    },
    Language.RU: {
        "report_title": "Отчет об анализе",
        "summary_title": "Краткое резюме",
        "risks_title": "Выявленные риски и нарушения",
        "no_risks_title": "Значительных рисков не обнаружено.",
        "no_risks_text": "Документ, по-видимому, соответствует законодательству РК.",
        "clause_ref": "Ссылка на пункт",
        "violation": "Нарушение / Риск",
        "recommendation": "Рекомендация",
    },
    Language.KZ: {
        "report_title": "Талдау есебі",
        "summary_title": "Қысқаша мазмұны",
        "risks_title": "Анықталған тәуекелдер мен бұзушылықтар",
        "no_risks_title": "Айтарлықтай тәуекелдер анықталған жоқ.",
        "no_risks_text": "Құжат ҚР заңнамасына сәйкес келеді.",
        "clause_ref": "Тармаққа сілтеме",
        "violation": "Бұзушылық / Тәуекел",
        "recommendation": "Ұсыныс",
    },
}

VERDICT_LABELS: dict[Language, dict[Verdict, str]] = {
    Language.EN: {
        Verdict.SAFE: "SAFE",
        Verdict.NEEDS_REVIEW: "NEEDS REVIEW",
        Verdict.DANGEROUS: "DANGEROUS",
    },
    Language.RU: {
        Verdict.SAFE: "БЕЗОПАСНО",
        Verdict.NEEDS_REVIEW: "ТРЕБУЕТ ПРОВЕРКИ",
        Verdict.DANGEROUS: "ОПАСНО",
    },
    Language.KZ: {
        Verdict.SAFE: "ҚАУІПСІЗ",
        Verdict.NEEDS_REVIEW: "ТЕКСЕРУДІ ҚАЖЕТ ЕТЕДІ",
        Verdict.DANGEROUS: "ҚАУІПТІ",
    },
}

RISK_LEVEL_LABELS: dict[Language, dict[RiskLevel, str]] = {
    Language.EN: {
        RiskLevel.LOW: "LOW",
        RiskLevel.MEDIUM: "MEDIUM",
        RiskLevel.HIGH: "HIGH",
        RiskLevel.CRITICAL: "CRITICAL",
    },
    Language.RU: {
        RiskLevel.LOW: "НИЗКИЙ",
        RiskLevel.MEDIUM: "СРЕДНИЙ",
        RiskLevel.HIGH: "ВЫСОКИЙ",
        RiskLevel.CRITICAL: "КРИТИЧЕСКИЙ",
    },
    Language.KZ: {
        RiskLevel.LOW: "ТӨМЕН",
        RiskLevel.MEDIUM: "ОРТАША",
        RiskLevel.HIGH: "ЖОҒАРЫ",
        RiskLevel.CRITICAL: "СЫНИ",
    },
}
