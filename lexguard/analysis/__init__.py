from lexguard.analysis.analyzer import Analyzer
from lexguard.analysis.client_base import BaseAnalysisClient
from lexguard.analysis.factory import AnalyzerFactory
from lexguard.analysis.models import AnalysisResult, Language, RiskFinding, RiskLevel, Verdict

__all__ = [
    "AnalysisResult",
    "Analyzer",
    "AnalyzerFactory",
    "BaseAnalysisClient",
    "Language",
    "RiskFinding",
    "RiskLevel",
    "Verdict",
]
