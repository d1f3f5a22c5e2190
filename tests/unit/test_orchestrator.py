"""
Tests for the analysis orchestrator state machine.
"""

import asyncio
import json

from agents.analysis_orchestrator import (
    ANALYSIS_FAILED_MESSAGE,
    AnalysisOrchestrator,
    PipelineStatus,
)
from agents.review_analysis_agent import GenerationFailure, StrengthLabel
from agents.review_analysis_agent import nodes


REVIEWS = "Shipping was slow and support never replied."


def test_initial_state_is_idle(make_client):
    client, _ = make_client()
    orchestrator = AnalysisOrchestrator(client)
    assert orchestrator.current_state().status == PipelineStatus.IDLE
    assert orchestrator.current_state().result is None


def test_successful_analysis(make_client, well_formed_body):
    client, capability = make_client(response=well_formed_body)
    orchestrator = AnalysisOrchestrator(client)

    state = asyncio.run(orchestrator.analyze(REVIEWS, "English"))

    assert state.status == PipelineStatus.SUCCEEDED
    assert state is orchestrator.current_state()
    assert state.result.sentiment == "Mixed"
    assert state.summary.annual_increment_estimate == 100
    assert state.message is None
    assert len(capability.calls) == 1
    assert REVIEWS in capability.calls[0][0]


def test_blank_submission_is_ignored(make_client):
    client, capability = make_client(response="{}")
    orchestrator = AnalysisOrchestrator(client)

    async def scenario():
        return [orchestrator.submit(text) for text in ["", "   ", "\n\t"]]

    tasks = asyncio.run(scenario())

    assert tasks == [None, None, None]
    assert orchestrator.current_state().status == PipelineStatus.IDLE
    assert capability.calls == []


def test_unknown_language_is_ignored(make_client):
    client, capability = make_client(response="{}")
    orchestrator = AnalysisOrchestrator(client)

    state = asyncio.run(orchestrator.analyze(REVIEWS, "Klingon"))

    assert state.status == PipelineStatus.IDLE
    assert capability.calls == []


def test_language_is_normalized(make_client, well_formed_body):
    client, capability = make_client(response=well_formed_body)
    orchestrator = AnalysisOrchestrator(client)

    asyncio.run(orchestrator.analyze(REVIEWS, "spanish"))

    assert "(Input Language: Spanish)" in capability.calls[0][0]


def test_submission_while_analyzing_is_ignored(make_client, well_formed_body):
    client, capability = make_client(response=well_formed_body, delay=0.05)
    orchestrator = AnalysisOrchestrator(client)

    async def scenario():
        first = orchestrator.submit(REVIEWS)
        in_flight = orchestrator.current_state()

        await asyncio.sleep(0.01)
        second = orchestrator.submit("A completely different batch of reviews.")
        after_second = orchestrator.current_state()

        final = await first
        return first, in_flight, second, after_second, final

    first, in_flight, second, after_second, final = asyncio.run(scenario())

    assert first is not None
    assert second is None
    assert in_flight.status == PipelineStatus.ANALYZING
    assert after_second == in_flight
    assert final.status == PipelineStatus.SUCCEEDED
    assert len(capability.calls) == 1


def test_back_to_back_submissions_in_one_tick(make_client, well_formed_body):
    client, capability = make_client(response=well_formed_body)
    orchestrator = AnalysisOrchestrator(client)

    async def scenario():
        first = orchestrator.submit(REVIEWS)
        second = orchestrator.submit(REVIEWS)
        await first
        return second

    assert asyncio.run(scenario()) is None
    assert len(capability.calls) == 1


def test_generation_failure_gives_generic_message(make_client):
    client, _ = make_client(error=ConnectionError("upstream reset"))
    orchestrator = AnalysisOrchestrator(client)

    state = asyncio.run(orchestrator.analyze(REVIEWS))

    assert state.status == PipelineStatus.FAILED
    assert state.message == ANALYSIS_FAILED_MESSAGE
    assert "upstream reset" not in state.message
    assert state.failure_kind == GenerationFailure.kind
    assert "upstream reset" in state.failure_reason
    assert state.result is None


def test_malformed_response_is_distinguishable(make_client, payload):
    payload["growthProjection"] = payload["growthProjection"][:3]
    client, _ = make_client(response=json.dumps(payload))
    orchestrator = AnalysisOrchestrator(client)

    state = asyncio.run(orchestrator.analyze(REVIEWS))

    assert state.status == PipelineStatus.FAILED
    assert state.message == ANALYSIS_FAILED_MESSAGE
    assert state.failure_kind == "insufficient_projection_points"


def test_new_submission_clears_previous_result(make_client, well_formed_body):
    client, capability = make_client(response=well_formed_body, delay=0.01)
    orchestrator = AnalysisOrchestrator(client)

    async def scenario():
        await orchestrator.analyze(REVIEWS)
        succeeded = orchestrator.current_state()

        capability.response = "not json at all"
        task = orchestrator.submit(REVIEWS)
        during = orchestrator.current_state()
        final = await task
        return succeeded, during, final

    succeeded, during, final = asyncio.run(scenario())

    assert succeeded.status == PipelineStatus.SUCCEEDED
    assert during.status == PipelineStatus.ANALYZING
    assert during.result is None and during.summary is None
    assert final.status == PipelineStatus.FAILED
    assert final.result is None
    assert final.failure_reason == "not parseable"
    assert final.job_id != succeeded.job_id


def test_listeners_see_every_transition(make_client, well_formed_body):
    client, _ = make_client(response=well_formed_body)
    orchestrator = AnalysisOrchestrator(client)
    seen = []
    unsubscribe = orchestrator.subscribe(lambda state: seen.append(state.status))

    asyncio.run(orchestrator.analyze(REVIEWS))
    unsubscribe()
    asyncio.run(orchestrator.analyze(REVIEWS))

    assert seen == [PipelineStatus.ANALYZING, PipelineStatus.SUCCEEDED]


def test_failing_listener_does_not_break_the_machine(make_client, well_formed_body):
    client, _ = make_client(response=well_formed_body)
    orchestrator = AnalysisOrchestrator(client)
    seen = []

    def broken(state):
        raise RuntimeError("render crashed")

    orchestrator.subscribe(broken)
    orchestrator.subscribe(lambda state: seen.append(state.status))

    state = asyncio.run(orchestrator.analyze(REVIEWS))

    assert state.status == PipelineStatus.SUCCEEDED
    assert seen == [PipelineStatus.ANALYZING, PipelineStatus.SUCCEEDED]


def test_current_strength(make_client):
    client, _ = make_client()
    orchestrator = AnalysisOrchestrator(client)
    assert orchestrator.current_strength("").label == StrengthLabel.EMPTY
    assert orchestrator.current_strength(REVIEWS).label == StrengthLabel.WEAK


def test_unexpected_error_fails_the_run_and_machine_recovers(make_client, well_formed_body, monkeypatch):
    client, _ = make_client(response=well_formed_body)
    orchestrator = AnalysisOrchestrator(client)

    def exploding_parser(raw_text):
        raise RuntimeError("parser bug")

    with monkeypatch.context() as patch:
        patch.setattr(nodes, "parse_analysis_response", exploding_parser)
        failed = asyncio.run(orchestrator.analyze(REVIEWS))

    assert failed.status == PipelineStatus.FAILED
    assert failed.failure_kind == "unexpected"
    assert "RuntimeError" in failed.failure_reason
    assert failed.message == ANALYSIS_FAILED_MESSAGE
    assert failed.result is None

    recovered = asyncio.run(orchestrator.analyze(REVIEWS))
    assert recovered.status == PipelineStatus.SUCCEEDED
    assert recovered.failure_kind is None


def test_oversized_projection_number_is_a_malformed_response(make_client, payload):
    body = json.dumps(payload).replace('"projected": 45', '"projected": ' + "9" * 400)
    client, _ = make_client(response=body)
    orchestrator = AnalysisOrchestrator(client)

    state = asyncio.run(orchestrator.analyze(REVIEWS))

    assert state.status == PipelineStatus.FAILED
    assert state.failure_kind == "insufficient_projection_points"
