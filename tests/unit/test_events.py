"""Tests for carouselgen.pipeline.events: event payloads and the event channel."""

from __future__ import annotations

import asyncio
import json

import pytest

from carouselgen.core.models import LayoutIssue
from carouselgen.pipeline.events import EventChannel, EventType, PipelineEvent


class TestPipelineEvent:
    """Test event serialization."""

    def test_to_dict_serializes_models(self):
        issue = LayoutIssue(type="overlap", slide_index=1, message="m")
        event = PipelineEvent(EventType.VALIDATION_ERROR, {"errors": [issue], "autoFix": False})
        assert event.to_dict() == {
            "type": "validation_error",
            "data": {
                "errors": [{"type": "overlap", "slideIndex": 1, "message": "m"}],
                "autoFix": False,
            },
        }

    def test_to_sse_frame(self):
        frame = PipelineEvent(EventType.DONE, {"slidesCreated": 3}).to_sse()
        assert frame.startswith("data: ")
        assert frame.endswith("\n\n")
        assert json.loads(frame[len("data: "):]) == {"type": "done", "data": {"slidesCreated": 3}}

    def test_sse_keeps_unicode(self):
        frame = PipelineEvent(EventType.PROGRESS, {"message": "Übersicht ⏰"}).to_sse()
        assert "Übersicht ⏰" in frame

    @pytest.mark.parametrize(
        ("event_type", "terminal"),
        [(EventType.DONE, True), (EventType.ERROR, True), (EventType.PROGRESS, False)],
    )
    def test_is_terminal(self, event_type, terminal):
        assert PipelineEvent(event_type).is_terminal is terminal

    def test_event_type_is_str(self):
        assert EventType.STEP_START == "step_start"


class TestEventChannel:
    """Test the async event queue."""

    def test_iterates_until_closed(self):
        async def scenario():
            channel = EventChannel()
            channel.publish(PipelineEvent(EventType.START))
            channel.publish(PipelineEvent(EventType.DONE))
            channel.close()
            return [event.type async for event in channel]

        assert asyncio.run(scenario()) == [EventType.START, EventType.DONE]

    def test_consumer_waits_for_producer(self):
        async def scenario():
            channel = EventChannel()

            async def produce():
                for _ in range(3):
                    await asyncio.sleep(0)
                    channel.publish(PipelineEvent(EventType.PROGRESS))
                channel.close()

            producer = asyncio.ensure_future(produce())
            received = [event async for event in channel]
            await producer
            return received

        assert len(asyncio.run(scenario())) == 3

    def test_publish_after_close_raises(self):
        async def scenario():
            channel = EventChannel()
            channel.close()
            assert channel.closed is True
            with pytest.raises(RuntimeError):
                channel.publish(PipelineEvent(EventType.PROGRESS))

        asyncio.run(scenario())

    def test_repeated_iteration_stops(self):
        async def scenario():
            channel = EventChannel()
            channel.close()
            channel.close()
            first = [event async for event in channel]
            second = [event async for event in channel]
            return first, second

        assert asyncio.run(scenario()) == ([], [])
