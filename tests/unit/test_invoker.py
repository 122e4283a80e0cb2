"""Tests for the tiered invocation ladder."""

import asyncio

import pytest

from lexguard.analysis.capabilities import select_capabilities
from lexguard.analysis.client_base import BaseAnalysisClient
from lexguard.analysis.exceptions import (
    AnalysisExhaustedError,
    AnalysisNetworkError,
    AnalysisResponseError,
    AnalysisValidationError,
)
from lexguard.analysis.invoker import TieredInvoker
from lexguard.analysis.models import InvocationRequest, Verdict
from lexguard.extraction.models import ContentBlock


class ScriptedClient(BaseAnalysisClient):
    """Returns (or raises) one scripted outcome per call."""

    def __init__(self, outcomes: list[object]) -> None:
        self._outcomes = list(outcomes)
        self.requests: list[InvocationRequest] = []

    def ensure_configured(self) -> None:
        pass

    async def generate(self, request: InvocationRequest) -> str:
        self.requests.append(request)
        outcome = self._outcomes.pop(0)
        if isinstance(outcome, BaseException):
            raise outcome
        return str(outcome)


class HangingClient(ScriptedClient):
    def __init__(self) -> None:
        super().__init__([])
        self.started = asyncio.Event()

    async def generate(self, request: InvocationRequest) -> str:
        self.requests.append(request)
        self.started.set()
        await asyncio.Event().wait()
        return ""


def _requests(deep: bool = True) -> list[InvocationRequest]:
    return [
        InvocationRequest(
            tier=tier,
            system_prompt="system",
            user_prompt="user",
            content=ContentBlock(text="Clause 1"),
            json_schema={"type": "object"},
        )
        for tier in select_capabilities(deep)
    ]


def _run(client: BaseAnalysisClient, timeout: float = 5.0):
    return asyncio.run(TieredInvoker(client, timeout).run(_requests()))


class TestSuccess:
    def test_first_tier_success_makes_one_attempt(self, valid_response_body: str) -> None:
        client = ScriptedClient([valid_response_body])
        result = _run(client)
        assert result.verdict is Verdict.DANGEROUS
        assert len(client.requests) == 1

    def test_third_tier_success_after_two_failures(self, valid_response_body: str) -> None:
        client = ScriptedClient([
            AnalysisNetworkError("boom"),
            AnalysisResponseError("AI returned empty response"),
            valid_response_body,
        ])
        result = _run(client)
        assert len(result.risks) == 2
        assert [r.tier.number for r in client.requests] == [1, 2, 3]

    def test_decode_failure_advances_ladder(self, valid_response_body: str) -> None:
        missing_verdict = '{"summary": "s", "risks": []}'
        client = ScriptedClient([missing_verdict, valid_response_body])
        result = _run(client)
        assert result.verdict is Verdict.DANGEROUS
        assert len(client.requests) == 2

    def test_unexpected_client_exception_advances_ladder(self, valid_response_body: str) -> None:
        client = ScriptedClient([RuntimeError("sdk bug"), valid_response_body])
        assert _run(client).verdict is Verdict.DANGEROUS
        assert len(client.requests) == 2

    def test_capabilities_narrow_across_attempts(self, valid_response_body: str) -> None:
        client = ScriptedClient([
            AnalysisNetworkError("a"),
            AnalysisNetworkError("b"),
            valid_response_body,
        ])
        _run(client)
        capability_sets = [r.tier.capabilities for r in client.requests]
        assert capability_sets[0] > capability_sets[1] > capability_sets[2]


class TestExhaustion:
    def test_all_tiers_fail(self) -> None:
        client = ScriptedClient([
            AnalysisNetworkError("first"),
            AnalysisNetworkError("second"),
            AnalysisNetworkError("third"),
        ])
        with pytest.raises(AnalysisExhaustedError) as exc_info:
            _run(client)
        assert len(client.requests) == 3
        assert exc_info.value.attempts == 3

    def test_keeps_last_cause(self) -> None:
        last = AnalysisNetworkError("third")
        client = ScriptedClient([AnalysisNetworkError("first"), "not json", last])
        with pytest.raises(AnalysisExhaustedError) as exc_info:
            _run(client)
        assert exc_info.value.last_cause is last
        assert exc_info.value.__cause__ is last

    def test_message_is_generic(self) -> None:
        client = ScriptedClient([
            AnalysisNetworkError("internal host 10.0.0.1 refused"),
            AnalysisNetworkError("internal host 10.0.0.1 refused"),
            AnalysisNetworkError("internal host 10.0.0.1 refused"),
        ])
        with pytest.raises(AnalysisExhaustedError) as exc_info:
            _run(client)
        assert "10.0.0.1" not in str(exc_info.value)
        assert str(exc_info.value) == AnalysisExhaustedError.USER_MESSAGE

    def test_final_tier_decode_failure_is_exhaustion(self) -> None:
        missing_verdict = '{"summary": "s", "risks": []}'
        client = ScriptedClient([missing_verdict, missing_verdict, missing_verdict])
        with pytest.raises(AnalysisExhaustedError) as exc_info:
            _run(client)
        assert isinstance(exc_info.value.last_cause, AnalysisValidationError)
        assert exc_info.value.last_cause.tier == 3


class TestTimeout:
    def test_timed_out_attempt_advances_ladder(self, valid_response_body: str) -> None:
        class SlowFirstClient(ScriptedClient):
            async def generate(self, request: InvocationRequest) -> str:
                if request.tier.number == 1:
                    self.requests.append(request)
                    await asyncio.sleep(10)
                return await super().generate(request)

        client = SlowFirstClient([valid_response_body])
        result = _run(client, timeout=0.05)
        assert result.verdict is Verdict.DANGEROUS
        assert [r.tier.number for r in client.requests] == [1, 2]

    def test_timeout_cause_is_network_error(self) -> None:
        client = HangingClient()
        with pytest.raises(AnalysisExhaustedError) as exc_info:
            _run(client, timeout=0.01)
        assert isinstance(exc_info.value.last_cause, AnalysisNetworkError)
        assert "timed out" in str(exc_info.value.last_cause)
        assert len(client.requests) == 3


class TestCancellation:
    def test_cancel_aborts_in_flight_call_and_stops_ladder(self) -> None:
        client = HangingClient()

        async def scenario() -> None:
            task = asyncio.create_task(TieredInvoker(client, 60).run(_requests()))
            await client.started.wait()
            task.cancel()
            with pytest.raises(asyncio.CancelledError):
                await task

        asyncio.run(scenario())
        assert len(client.requests) == 1
