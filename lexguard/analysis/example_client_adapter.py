"""Example analysis client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseAnalysisClient and register the provider in AnalyzerFactory.
"""

import json
from typing import ClassVar

from lexguard.analysis.client_base import BaseAnalysisClient
from lexguard.analysis.models import InvocationRequest


class ExampleClientAdapter(BaseAnalysisClient):
    """Offline adapter that answers every request with a fixed valid report.

    Useful for local development, tests, and as a template for real adapters.
    """

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "summary": "Example analysis: no remote model was consulted.",
        "risks": [],
        "verdict": "Needs Review",
    }

    def ensure_configured(self) -> None:
        pass

    async def generate(self, request: InvocationRequest) -> str:
        _ = request
        return json.dumps(self.DEFAULT_RESPONSE)
