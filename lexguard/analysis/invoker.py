"""Tiered invocation of the remote model.

Each request is tried once, in order, until one yields a decodable result.
A tier fails on any client error, timeout, empty body or decode error; the
ladder then moves to the next, less capable tier. Attempts never overlap.
"""

import asyncio
from collections.abc import Sequence

from lexguard.analysis.client_base import BaseAnalysisClient
from lexguard.analysis.decoder import decode_result
from lexguard.analysis.exceptions import (
    AnalysisExhaustedError,
    AnalysisNetworkError,
    AttemptError,
)
from lexguard.analysis.models import AnalysisResult, InvocationRequest
from lexguard.logging.logger import Log


class TieredInvoker:
    """Runs invocation requests as a narrowing retry ladder."""

    def __init__(self, client: BaseAnalysisClient, timeout_seconds: float) -> None:
        self._client = client
        self._timeout_seconds = timeout_seconds

    async def run(self, requests: Sequence[InvocationRequest]) -> AnalysisResult:
        """Return the first successfully decoded result.

        Raises:
            AnalysisExhaustedError: if every request failed, chained to the
                last failure.
        """
        last_cause: Exception | None = None
        attempts = 0
        for request in requests:
            tier = request.tier
            attempts += 1
            Log.info(
                f"Attempt {attempts}/{len(requests)}",
                tier=tier.number,
                capabilities=",".join(sorted(tier.capabilities)),
            )
            try:
                result = await self._attempt(request)
            except Exception as exc:
                last_cause = exc
                Log.warning(f"Attempt {attempts} failed: {exc}", tier=tier.number)
                continue
            Log.info(f"Attempt {attempts} succeeded", tier=tier.number)
            return result

        Log.error(f"All {attempts} attempts failed: {last_cause}")
        raise AnalysisExhaustedError(attempts, last_cause) from last_cause

    async def _attempt(self, request: InvocationRequest) -> AnalysisResult:
        tier = request.tier.number
        try:
            raw = await asyncio.wait_for(
                self._client.generate(request), timeout=self._timeout_seconds
            )
        except asyncio.TimeoutError as exc:
            raise AnalysisNetworkError(
                f"AI provider timed out after {self._timeout_seconds}s", tier=tier
            ) from exc
        Log.debug(f"AI raw response (tier {tier}):\n{raw}")
        try:
            return decode_result(raw)
        except AttemptError as exc:
            exc.tier = tier
            raise
