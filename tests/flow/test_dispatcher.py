"""
Tests for RecommendationFlow (input collection + request dispatch).

Covers:
- Blank input validation (no provider call)
- Loading before the provider answers
- Success / failure branching and message formatting
- Loading always cleared, including on cancellation
- Overlapping submissions (latest wins)
"""

import asyncio

import pytest

from cinesuggest.flow import (
    EMPTY_INPUT_MESSAGE,
    FAILURE_PREFIX,
    RecommendationFlow,
    format_failure_message,
)
from cinesuggest.schemas.recommendations import (
    FailedState,
    IdleState,
    LoadingState,
    MovieRecommendation,
    SucceededState,
)


# =============================================================================
# INPUT COLLECTOR
# =============================================================================

class TestInputCollector:

    def test_starts_idle_and_empty(self):
        flow = RecommendationFlow()
        assert flow.user_input == ""
        assert flow.state == IdleState()
        assert flow.is_loading is False

    def test_update_replaces_verbatim(self):
        flow = RecommendationFlow()
        flow.update_input("Parasite")
        flow.update_input("  Parasite,\nInception  ")
        assert flow.user_input == "  Parasite,\nInception  "

    def test_update_does_not_change_state(self):
        flow = RecommendationFlow()
        flow.update_input("Parasite")
        assert flow.state == IdleState()


# =============================================================================
# VALIDATION
# =============================================================================

class TestBlankInput:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["", "   ", "\n\t  \n"])
    async def test_blank_input_fails_without_provider_call(self, fake_provider, text):
        flow = RecommendationFlow(provider=fake_provider)

        state = await flow.submit(text)

        assert state == FailedState(error=EMPTY_INPUT_MESSAGE)
        assert fake_provider.calls == []
        assert flow.is_loading is False

    @pytest.mark.asyncio
    async def test_submit_uses_collected_input(self, fake_provider):
        flow = RecommendationFlow(provider=fake_provider)
        flow.update_input("Parasite")

        await flow.submit()

        assert fake_provider.calls == ["Parasite"]

    @pytest.mark.asyncio
    async def test_blank_collected_input(self, fake_provider):
        flow = RecommendationFlow(provider=fake_provider)

        state = await flow.submit()

        assert state.error == "Please enter some movies you like."


# =============================================================================
# SUCCESS
# =============================================================================

class TestSuccess:

    @pytest.mark.asyncio
    async def test_scenario_parasite_inception(self, fake_provider):
        """Parasite, Inception -> Memento, Oldboy in that order."""
        flow = RecommendationFlow(provider=fake_provider)

        state = await flow.submit("Parasite, Inception")

        assert isinstance(state, SucceededState)
        assert [m.title for m in state.recommendations] == ["Memento", "Oldboy"]
        assert fake_provider.calls == ["Parasite, Inception"]

    @pytest.mark.asyncio
    async def test_raw_text_sent_unchanged(self, fake_provider):
        flow = RecommendationFlow(provider=fake_provider)

        await flow.submit("  Amelie \n")

        assert fake_provider.calls == ["  Amelie \n"]
        assert flow.user_input == "  Amelie \n"

    @pytest.mark.asyncio
    async def test_list_used_as_returned(self, fake_provider):
        movies = [
            MovieRecommendation(title="Oldboy", year=2003),
            MovieRecommendation(title="Memento"),
            MovieRecommendation(title="Oldboy", year=2013),
        ]
        fake_provider.result = movies
        flow = RecommendationFlow(provider=fake_provider)

        state = await flow.submit("Amelie")

        assert len(state.recommendations) == 3
        assert state.recommendations == movies

    @pytest.mark.asyncio
    async def test_empty_list_is_success(self, fake_provider):
        fake_provider.result = []
        flow = RecommendationFlow(provider=fake_provider)

        state = await flow.submit("Amelie")

        assert state == SucceededState(recommendations=[])

    @pytest.mark.asyncio
    async def test_loading_observed_before_response(self, fake_provider):
        seen = []

        async def provider(user_input):
            # The flow must already be loading when the provider runs
            assert flow.state == LoadingState(request_id=1)
            assert flow.is_loading
            return await fake_provider(user_input)

        flow = RecommendationFlow(provider=provider, on_change=seen.append)
        await flow.submit("Parasite")

        assert [s.status for s in seen] == ["LOADING", "SUCCEEDED"]

    @pytest.mark.asyncio
    async def test_new_submission_clears_previous_result(self, fake_provider):
        seen = []
        flow = RecommendationFlow(provider=fake_provider, on_change=seen.append)
        await flow.submit("Parasite")

        fake_provider.error = TimeoutError("timeout")
        await flow.submit("Amelie")

        assert [s.status for s in seen] == ["LOADING", "SUCCEEDED", "LOADING", "FAILED"]
        assert seen[2] == LoadingState(request_id=2)


# =============================================================================
# FAILURE
# =============================================================================

class TestFailure:

    @pytest.mark.asyncio
    async def test_scenario_amelie_timeout(self, fake_provider):
        fake_provider.error = TimeoutError("timeout")
        flow = RecommendationFlow(provider=fake_provider)

        state = await flow.submit("Amelie")

        assert state == FailedState(error="Failed to get recommendations. timeout")
        assert flow.is_loading is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize("error", [
        ConnectionError("network unreachable"),
        ValueError("malformed response"),
        PermissionError("API key invalid"),
    ])
    async def test_any_provider_error_is_failed(self, fake_provider, error):
        fake_provider.error = error
        flow = RecommendationFlow(provider=fake_provider)

        state = await flow.submit("Amelie")

        assert isinstance(state, FailedState)
        assert state.error.startswith(FAILURE_PREFIX)
        assert state.error.endswith(str(error))

    @pytest.mark.asyncio
    async def test_error_without_message_uses_fallback(self, fake_provider):
        fake_provider.error = RuntimeError()
        flow = RecommendationFlow(provider=fake_provider)

        state = await flow.submit("Amelie")

        assert state.error == "Failed to get recommendations. An unknown error occurred."

    @pytest.mark.asyncio
    async def test_malformed_provider_result_is_failed(self, fake_provider):
        """Building the result fails partway; loading is still cleared."""
        fake_provider.result = None
        flow = RecommendationFlow(provider=fake_provider)

        state = await flow.submit("Amelie")

        assert isinstance(state, FailedState)
        assert state.error.startswith(FAILURE_PREFIX)
        assert flow.is_loading is False

    @pytest.mark.asyncio
    async def test_resubmit_after_failure(self, fake_provider):
        fake_provider.error = TimeoutError("timeout")
        flow = RecommendationFlow(provider=fake_provider)
        await flow.submit("Amelie")

        fake_provider.error = None
        state = await flow.submit("Amelie")

        assert isinstance(state, SucceededState)
        assert len(fake_provider.calls) == 2


class TestFormatFailureMessage:

    def test_uses_error_text(self):
        assert format_failure_message(TimeoutError("timeout")) == "Failed to get recommendations. timeout"

    def test_blank_error_text_uses_fallback(self):
        assert format_failure_message(Exception("  ")) == (
            "Failed to get recommendations. An unknown error occurred."
        )

    def test_error_text_kept_verbatim(self):
        assert format_failure_message(ConnectionError(" reset by peer\n")) == (
            "Failed to get recommendations.  reset by peer\n"
        )


# =============================================================================
# STATE LISTENERS
# =============================================================================

class TestFailingListener:
    """A listener that raises never stalls the flow or escapes submit."""

    @pytest.mark.asyncio
    async def test_listener_raising_on_loading(self, fake_provider):
        def listener(state):
            if isinstance(state, LoadingState):
                raise RuntimeError("listener broke")

        flow = RecommendationFlow(provider=fake_provider, on_change=listener)

        state = await flow.submit("Amelie")

        assert isinstance(state, SucceededState)
        assert flow.is_loading is False
        assert fake_provider.calls == ["Amelie"]

    @pytest.mark.asyncio
    async def test_listener_raising_on_failure(self, fake_provider):
        def listener(state):
            if isinstance(state, FailedState):
                raise RuntimeError("listener broke")

        fake_provider.error = TimeoutError("timeout")
        flow = RecommendationFlow(provider=fake_provider, on_change=listener)

        state = await flow.submit("Amelie")

        assert state == FailedState(error="Failed to get recommendations. timeout")
        assert flow.is_loading is False

    @pytest.mark.asyncio
    async def test_listener_raising_on_every_change(self, fake_provider):
        def listener(state):
            raise RuntimeError("listener broke")

        flow = RecommendationFlow(provider=fake_provider, on_change=listener)

        blank = await flow.submit("   ")
        assert blank == FailedState(error=EMPTY_INPUT_MESSAGE)

        state = await flow.submit("Parasite, Inception")
        assert [m.title for m in state.recommendations] == ["Memento", "Oldboy"]


# =============================================================================
# CONCURRENCY
# =============================================================================

class TestOverlappingSubmissions:

    @pytest.mark.asyncio
    async def test_stale_response_discarded(self):
        release_first = asyncio.Event()

        async def provider(user_input):
            if user_input == "first":
                await release_first.wait()
                return [MovieRecommendation(title="Stale")]
            return [MovieRecommendation(title="Fresh")]

        flow = RecommendationFlow(provider=provider)
        first = asyncio.create_task(flow.submit("first"))
        await asyncio.sleep(0)
        assert flow.state == LoadingState(request_id=1)

        second_state = await flow.submit("second")
        release_first.set()
        await first

        assert [m.title for m in second_state.recommendations] == ["Fresh"]
        assert [m.title for m in flow.state.recommendations] == ["Fresh"]

    @pytest.mark.asyncio
    async def test_stale_failure_discarded(self):
        release_first = asyncio.Event()

        async def provider(user_input):
            if user_input == "first":
                await release_first.wait()
                raise TimeoutError("timeout")
            return [MovieRecommendation(title="Fresh")]

        flow = RecommendationFlow(provider=provider)
        first = asyncio.create_task(flow.submit("first"))
        await asyncio.sleep(0)
        await flow.submit("second")
        release_first.set()
        await first

        assert isinstance(flow.state, SucceededState)

    @pytest.mark.asyncio
    async def test_blank_submission_supersedes_pending_request(self):
        release_first = asyncio.Event()

        async def provider(user_input):
            await release_first.wait()
            return [MovieRecommendation(title="Stale")]

        flow = RecommendationFlow(provider=provider)
        first = asyncio.create_task(flow.submit("first"))
        await asyncio.sleep(0)
        await flow.submit("   ")
        release_first.set()
        await first

        assert flow.state == FailedState(error=EMPTY_INPUT_MESSAGE)


class TestCancellation:

    @pytest.mark.asyncio
    async def test_cancelled_request_leaves_flow_idle(self):
        started = asyncio.Event()

        async def provider(user_input):
            started.set()
            await asyncio.Event().wait()

        flow = RecommendationFlow(provider=provider)
        task = asyncio.create_task(flow.submit("Amelie"))
        await started.wait()
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task

        assert flow.state == IdleState()
        assert flow.is_loading is False
