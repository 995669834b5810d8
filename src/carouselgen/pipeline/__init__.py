"""Carousel generation pipeline.

- **generation**: GenerationPipeline orchestrator and PipelineRun handle
- **events**: event types, PipelineEvent, EventChannel
- **tiers**: credits per quality tier, model per stage, step counting
- **errors**: exceptions that abort a run
"""

from carouselgen.pipeline.errors import (
    EmptyModelResponseError,
    GenerationCancelledError,
    PipelineError,
    StageFailedError,
)
from carouselgen.pipeline.events import EventChannel, EventType, PipelineEvent
from carouselgen.pipeline.tiers import (
    CREDITS_PER_QUALITY,
    count_steps,
    get_credits_for_quality,
    get_model_for_step,
)
from carouselgen.pipeline.generation import GenerationPipeline, PipelineRun

__all__ = [
    "CREDITS_PER_QUALITY",
    "EmptyModelResponseError",
    "EventChannel",
    "EventType",
    "GenerationCancelledError",
    "GenerationPipeline",
    "PipelineError",
    "PipelineEvent",
    "PipelineRun",
    "StageFailedError",
    "count_steps",
    "get_credits_for_quality",
    "get_model_for_step",
]
