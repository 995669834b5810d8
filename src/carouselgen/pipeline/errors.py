"""Exceptions raised by a generation run.

Layout problems found by validation are never raised; they are reported as
events.  These exceptions abort a run, and the pipeline emits an ``error``
event before re-raising them.
"""

from __future__ import annotations


class PipelineError(Exception):
    """Base class for errors that abort a generation run."""


class StageFailedError(PipelineError):
    """A stage could not produce a usable result.

    Wraps parse failures (invalid JSON, responses that do not fit the data
    model) and missing responses, chained to the original exception.

    Attributes:
        stage: Name of the failing stage (``"content"``, ``"layout"``, ...).
    """

    def __init__(self, stage: str, message: str) -> None:
        super().__init__(message)
        self.stage = stage


class EmptyModelResponseError(PipelineError):
    """The model returned no content for a structured-output request."""


class GenerationCancelledError(PipelineError):
    """The run's cancellation signal was set."""

    def __init__(self, message: str = "Generation cancelled") -> None:
        super().__init__(message)
