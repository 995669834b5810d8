"""Progress events emitted by a generation run.

Every event has a ``type`` and a free-form ``data`` payload with camelCase
keys.  Events are delivered either to a synchronous callback or through an
:class:`EventChannel`, an async iterator the caller drains while the run is
in progress.

Event Sequence
--------------
basic::

    start, step_start(generate), (slide_data, slide_complete) x N, done

standard / premium::

    start,
    step_start(content), step_complete(content),
    step_start(design), step_complete(design),
    [step_start(images), progress x M, step_complete(images)],
    step_start(layout), progress x N, step_complete(layout),
    step_start(validation),
    [validation_error | refinement_start ... ],
    (slide_data, slide_complete) x N,
    done

A failing run ends with ``error`` instead of ``done``.
"""

from __future__ import annotations

import asyncio
import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable


class EventType(str, Enum):
    START = "start"
    STEP_START = "step_start"
    STEP_COMPLETE = "step_complete"
    SLIDE_DATA = "slide_data"
    SLIDE_COMPLETE = "slide_complete"
    VALIDATION_ERROR = "validation_error"
    REFINEMENT_START = "refinement_start"
    PROGRESS = "progress"
    ERROR = "error"
    DONE = "done"


TERMINAL_EVENTS = frozenset({EventType.DONE, EventType.ERROR})


def _jsonable(value: Any) -> Any:
    """Convert models nested in an event payload to plain camelCase data."""
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if isinstance(value, dict):
        return {key: _jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(item) for item in value]
    return value


@dataclass(frozen=True)
class PipelineEvent:
    """One progress event.

    Attributes:
        type: Event kind.
        data: Payload; may contain pydantic models, serialized on output.
    """

    type: EventType
    data: dict[str, Any] = field(default_factory=dict)

    @property
    def is_terminal(self) -> bool:
        return self.type in TERMINAL_EVENTS

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type.value, "data": _jsonable(self.data)}

    def to_sse(self) -> str:
        """Format as one server-sent-events frame."""
        return f"data: {json.dumps(self.to_dict(), ensure_ascii=False)}\n\n"


EventCallback = Callable[[PipelineEvent], None]


class EventChannel:
    """Single-consumer async queue of events.

    The producer calls :meth:`publish` (synchronously, it never blocks) and
    :meth:`close` once the run is finished.  The consumer iterates with
    ``async for``; iteration stops after the channel is closed and drained.
    """

    _CLOSED = object()

    def __init__(self) -> None:
        self._queue: asyncio.Queue[Any] = asyncio.Queue()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def publish(self, event: PipelineEvent) -> None:
        if self._closed:
            raise RuntimeError("Cannot publish to a closed event channel")
        self._queue.put_nowait(event)

    def close(self) -> None:
        if not self._closed:
            self._closed = True
            self._queue.put_nowait(self._CLOSED)

    def __aiter__(self) -> EventChannel:
        return self

    async def __anext__(self) -> PipelineEvent:
        item = await self._queue.get()
        if item is self._CLOSED:
            # Leave the sentinel in place so repeated iteration also stops.
            self._queue.put_nowait(self._CLOSED)
            raise StopAsyncIteration
        return item
