"""Generation pipeline: from a topic to a validated carousel.

The pipeline strategy depends on the quality tier:

- **basic**: one structured-output call produces the whole carousel.
- **standard**: content outline, design system, optional images, per-slide
  layout, then validation; errors are reported but not fixed.
- **premium**: as standard, with strict validation and a bounded refinement
  loop that resubmits every invalid slide until the carousel validates or
  the attempt cap is reached.

Progress is reported as :class:`~carouselgen.pipeline.events.PipelineEvent`
objects, either to a callback passed to the constructor or through the async
iterator returned by :meth:`GenerationPipeline.start`.

Usage
-----
Callback style::

    pipeline = GenerationPipeline(api_key, config, on_event=print)
    carousel = await pipeline.run()

Stream style::

    run = GenerationPipeline(api_key, config).start()
    async for event in run:
        send(event.to_sse())
    carousel = await run.result()
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, TypeVar

import pydantic

import carouselgen.clients.images as image_search
import carouselgen.clients.llm as llm
from carouselgen import prompts
from carouselgen.core.config import CarouselGenConfig
from carouselgen.core.config import config as default_settings
from carouselgen.core.models import (
    CarouselData,
    CamelModel,
    ContentOutline,
    DesignSystem,
    ImagePlan,
    LayoutIssue,
    PipelineConfig,
    SlideData,
    SlideImageData,
    ValidationResult,
)
from carouselgen.core.schemas import (
    CAROUSEL_JSON_SCHEMA,
    CONTENT_OUTLINE_JSON_SCHEMA,
    DESIGN_SYSTEM_JSON_SCHEMA,
    IMAGE_PLAN_JSON_SCHEMA,
    slide_json_schema,
)
from carouselgen.pipeline.errors import (
    EmptyModelResponseError,
    GenerationCancelledError,
    PipelineError,
    StageFailedError,
)
from carouselgen.pipeline.events import EventCallback, EventChannel, EventType, PipelineEvent
from carouselgen.pipeline.tiers import count_steps, get_model_for_step
from carouselgen.prompts import PromptPair
from carouselgen.validation import (
    ValidationOptions,
    get_invalid_slide_indices,
    get_slide_errors,
    validate_carousel,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=CamelModel)


class GenerationPipeline:
    """Orchestrates one carousel generation run.

    Each instance is self-contained and runs once; concurrent runs use
    separate instances and may share the model and image clients.

    Attributes:
        config: Parameters of this run.
        settings: Application settings (models, refinement cap, image search).
    """

    def __init__(
        self,
        api_key: str | None,
        config: PipelineConfig,
        on_event: EventCallback | None = None,
        cancel_event: asyncio.Event | None = None,
        *,
        model_client: llm.StructuredModelClient | None = None,
        image_client: image_search.ImageSearchClient | None = None,
        settings: CarouselGenConfig | None = None,
    ) -> None:
        """Create a pipeline.

        Args:
            api_key: OpenAI API key; unused when ``model_client`` is given.
            config: Parameters of this run.
            on_event: Optional synchronous callback receiving every event.
            cancel_event: Optional cancellation signal (anything with
                ``is_set()``); a fresh :class:`asyncio.Event` by default.
            model_client: Structured-output client; an
                :class:`~carouselgen.clients.llm.OpenAIStructuredClient` by default.
            image_client: Stock image search client; an
                :class:`~carouselgen.clients.images.UnsplashClient` by default.
            settings: Settings overriding the global configuration.

        Raises:
            ValueError: If neither ``api_key`` nor ``model_client`` is given.
        """
        self.config = config
        self.settings = settings or default_settings
        self._on_event = on_event
        self._cancel_event = cancel_event if cancel_event is not None else asyncio.Event()
        self._channel: EventChannel | None = None

        if model_client is None:
            if not api_key:
                raise ValueError("An API key is required when no model client is given")
            model_client = llm.OpenAIStructuredClient(
                api_key, timeout=self.settings.request_timeout
            )
        self._model_client = model_client
        self._image_client = image_client or image_search.UnsplashClient(
            self.settings.unsplash_access_key, timeout=self.settings.request_timeout
        )

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    async def run(self) -> CarouselData:
        """Run the pipeline to completion.

        Returns:
            The final carousel.  For standard and premium runs it may still
            contain validation errors, which are reported through events.

        Raises:
            GenerationCancelledError: If the cancellation signal was set.
            PipelineError: If a stage failed.
        """
        quality = self.config.quality
        use_images = self.config.images_enabled
        self._emit(
            EventType.START,
            quality=quality,
            totalSlides=self.config.slide_count,
            steps=count_steps(quality, use_images),
            useImages=use_images,
        )
        logger.info(
            f"Generating {self.config.slide_count}-slide {quality} carousel "
            f"(images={'on' if use_images else 'off'})"
        )

        try:
            if quality == "basic":
                return await self._run_basic()
            return await self._run_multi_step()
        except GenerationCancelledError as e:
            logger.info("Generation cancelled")
            self._emit(EventType.ERROR, message=str(e), cancelled=True)
            raise
        except Exception as e:
            logger.error(f"Generation failed: {e}")
            self._emit(EventType.ERROR, message=str(e) or "Pipeline failed")
            raise

    def start(self) -> PipelineRun:
        """Schedule the run on the current event loop and stream its events.

        Must be called from a running event loop.
        """
        if self._channel is not None:
            raise RuntimeError("This pipeline has already been started")
        channel = EventChannel()
        self._channel = channel
        task = asyncio.ensure_future(self._run_into(channel))
        return PipelineRun(task, channel, self)

    def cancel(self) -> None:
        """Signal cancellation; the run stops at its next checkpoint."""
        self._cancel_event.set()

    async def _run_into(self, channel: EventChannel) -> CarouselData:
        try:
            return await self.run()
        finally:
            channel.close()

    # ------------------------------------------------------------------
    # Strategies
    # ------------------------------------------------------------------

    async def _run_basic(self) -> CarouselData:
        self._check_cancelled()
        self._emit(EventType.STEP_START, step="generate", message="Generating carousel...")

        prompt = prompts.build_basic_prompt(self.config)
        carousel = await self._request("generate", prompt, CAROUSEL_JSON_SCHEMA, CarouselData)

        self._emit_slides(carousel)
        self._emit(EventType.DONE, slidesCreated=len(carousel.slides), quality="basic")
        return carousel

    async def _run_multi_step(self) -> CarouselData:
        quality = self.config.quality

        # --- Content -------------------------------------------------------
        self._check_cancelled()
        self._emit(EventType.STEP_START, step="content", message="Creating content outline...")
        outline = await self._generate_content_outline()
        self._emit(EventType.STEP_COMPLETE, step="content", outline=outline)

        # --- Design --------------------------------------------------------
        self._check_cancelled()
        self._emit(EventType.STEP_START, step="design", message="Creating design system...")
        design_system = await self._generate_design_system()
        self._emit(EventType.STEP_COMPLETE, step="design", designSystem=design_system)

        # --- Images (optional) ---------------------------------------------
        slide_images: list[SlideImageData] = []
        if self.config.images_enabled:
            self._check_cancelled()
            self._emit(EventType.STEP_START, step="images", message="Finding images...")
            slide_images = await self._generate_and_fetch_images(outline)
            self._emit(
                EventType.STEP_COMPLETE,
                step="images",
                imagesFound=sum(1 for data in slide_images if data.image is not None),
            )

        # --- Layout --------------------------------------------------------
        self._check_cancelled()
        self._emit(EventType.STEP_START, step="layout", message="Generating slide layouts...")
        slides = await self._generate_layouts(outline, design_system, slide_images)
        self._emit(EventType.STEP_COMPLETE, step="layout", slideCount=len(slides))

        carousel = CarouselData(slides=slides)

        # --- Validation ----------------------------------------------------
        self._check_cancelled()
        self._emit(EventType.STEP_START, step="validation", message="Validating layouts...")
        options = ValidationOptions(
            canvas_width=self.config.canvas_width,
            canvas_height=self.config.canvas_height,
            strict_mode=quality == "premium",
            min_text_elements=self.settings.min_text_elements,
        )
        validation = validate_carousel(carousel, options)
        logger.info(
            f"Validation: {len(validation.errors)} error(s), {len(validation.warnings)} warning(s)"
        )

        # --- Refinement (premium) or report (standard) ---------------------
        if not validation.is_valid and quality == "premium":
            carousel = await self._refine_carousel(carousel, validation, options)
        elif not validation.is_valid:
            self._emit(
                EventType.VALIDATION_ERROR,
                errors=validation.errors,
                warnings=validation.warnings,
                autoFix=False,
            )

        self._emit_slides(carousel)
        self._emit(
            EventType.DONE,
            slidesCreated=len(carousel.slides),
            quality=quality,
            validationPassed=validation.is_valid,
        )
        return carousel

    # ------------------------------------------------------------------
    # Stages
    # ------------------------------------------------------------------

    async def _generate_content_outline(self) -> ContentOutline:
        prompt = prompts.build_content_outline_prompt(
            self.config.topic,
            self.config.style,
            self.config.slide_count,
            self.config.language,
        )
        return await self._request("content", prompt, CONTENT_OUTLINE_JSON_SCHEMA, ContentOutline)

    async def _generate_design_system(self) -> DesignSystem:
        prompt = prompts.build_design_system_prompt(
            self.config.style,
            self.config.brand_kit,
            self.config.canvas_width,
            self.config.canvas_height,
        )
        return await self._request("design", prompt, DESIGN_SYSTEM_JSON_SCHEMA, DesignSystem)

    async def _generate_and_fetch_images(self, outline: ContentOutline) -> list[SlideImageData]:
        prompt = prompts.build_image_keywords_prompt(outline, self.config.style)
        try:
            plan = await self._request("images", prompt, IMAGE_PLAN_JSON_SCHEMA, ImagePlan)
        except EmptyModelResponseError:
            logger.warning("No image plan returned, continuing without images")
            return []

        slide_images: list[SlideImageData] = []
        for entry in plan.slides:
            if not entry.use_image or entry.image_type == "none":
                slide_images.append(SlideImageData(slide_index=entry.slide_index))
                continue

            self._emit(
                EventType.PROGRESS,
                message=f"Finding image for slide {entry.slide_index + 1}...",
            )
            query = entry.keywords.strip() or self._fallback_keywords(outline, entry.slide_index)

            try:
                results = await self._image_client.search(
                    query,
                    per_page=self.settings.image_results_per_slide,
                    orientation=self.settings.image_orientation,
                )
            except Exception:
                logger.warning(
                    f"Image search failed for slide {entry.slide_index + 1}", exc_info=True
                )
                slide_images.append(SlideImageData(slide_index=entry.slide_index))
                continue

            slide_images.append(
                SlideImageData(
                    slide_index=entry.slide_index,
                    image_type=entry.image_type,
                    image=results[0] if results else None,
                )
            )

        return slide_images

    @staticmethod
    def _fallback_keywords(outline: ContentOutline, slide_index: int) -> str:
        if not 0 <= slide_index < len(outline.slides):
            return outline.title
        content = outline.slides[slide_index]
        return image_search.generate_search_keywords(content.headline, content.body, content.type)

    async def _generate_layouts(
        self,
        outline: ContentOutline,
        design_system: DesignSystem,
        slide_images: list[SlideImageData],
    ) -> list[SlideData]:
        images_by_index = {data.slide_index: data for data in slide_images}
        total = len(outline.slides)
        slides: list[SlideData] = []

        for index, content in enumerate(outline.slides):
            self._check_cancelled()
            self._emit(
                EventType.PROGRESS,
                message=f"Creating layout for slide {index + 1}...",
                slideIndex=index + 1,
                totalSlides=total,
            )
            prompt = prompts.build_layout_prompt(
                content,
                index,
                total,
                design_system,
                self.config.canvas_width,
                self.config.canvas_height,
                images_by_index.get(index),
            )
            slide = await self._request(
                "layout", prompt, slide_json_schema("slide_layout"), SlideData
            )
            slides.append(slide)

        return slides

    async def _refine_carousel(
        self,
        carousel: CarouselData,
        validation: ValidationResult,
        options: ValidationOptions,
    ) -> CarouselData:
        max_attempts = self.settings.max_refinement_attempts

        for attempt in range(1, max_attempts + 1):
            self._check_cancelled()
            self._emit(
                EventType.REFINEMENT_START,
                attempt=attempt,
                maxAttempts=max_attempts,
                errorCount=len(validation.errors),
            )

            for slide_index in get_invalid_slide_indices(validation):
                if slide_index >= len(carousel.slides):
                    continue
                carousel.slides[slide_index] = await self._refine_slide(
                    carousel.slides[slide_index],
                    slide_index,
                    get_slide_errors(validation, slide_index),
                    attempt,
                    max_attempts,
                )

            validation = validate_carousel(carousel, options)
            logger.info(
                f"Refinement attempt {attempt}/{max_attempts}: "
                f"{len(validation.errors)} error(s) remaining"
            )
            if validation.is_valid:
                self._emit(
                    EventType.STEP_COMPLETE,
                    step="refinement",
                    attempts=attempt,
                    success=True,
                )
                return carousel

        self._emit(
            EventType.VALIDATION_ERROR,
            errors=validation.errors,
            warnings=validation.warnings,
            autoFix=True,
            maxAttemptsReached=True,
        )
        return carousel

    async def _refine_slide(
        self,
        slide: SlideData,
        slide_index: int,
        errors: list[LayoutIssue],
        attempt: int,
        max_attempts: int,
    ) -> SlideData:
        prompt = prompts.build_refinement_prompt(
            slide,
            slide_index,
            errors,
            self.config.canvas_width,
            self.config.canvas_height,
            attempt,
            max_attempts,
        )
        try:
            return await self._request(
                "refinement", prompt, slide_json_schema("refined_slide"), SlideData
            )
        except EmptyModelResponseError:
            logger.warning(f"Empty refinement for slide {slide_index + 1}, keeping it as is")
            return slide

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    async def _request(
        self,
        stage: str,
        prompt: PromptPair,
        schema: dict[str, Any],
        model_cls: type[ModelT],
    ) -> ModelT:
        """Run one structured-output call and parse it into ``model_cls``.

        Raises:
            EmptyModelResponseError: If the model returned no content.
            StageFailedError: If the response is not valid JSON or does not
                fit ``model_cls``.
        """
        model = get_model_for_step(self.config.quality, stage, self.settings)
        logger.debug(f"Requesting {schema['name']} from {model} ({stage} stage)")
        try:
            payload = await self._model_client.complete(prompt.system, prompt.user, schema, model)
        except json.JSONDecodeError as e:
            raise StageFailedError(stage, f"Model returned invalid JSON in {stage} stage") from e

        try:
            return model_cls.model_validate(payload)
        except pydantic.ValidationError as e:
            raise StageFailedError(
                stage,
                f"Model response for {stage} stage does not match the expected format "
                f"({e.error_count()} error(s))",
            ) from e

    def _check_cancelled(self) -> None:
        if self._cancel_event.is_set():
            raise GenerationCancelledError()

    def _emit_slides(self, carousel: CarouselData) -> None:
        total = len(carousel.slides)
        for index, slide in enumerate(carousel.slides):
            self._emit(EventType.SLIDE_DATA, slideIndex=index, slide=slide)
            self._emit(EventType.SLIDE_COMPLETE, slideIndex=index + 1, totalSlides=total)

    def _emit(self, event_type: EventType, **data: Any) -> None:
        event = PipelineEvent(event_type, data)
        if self._on_event is not None:
            self._on_event(event)
        if self._channel is not None:
            self._channel.publish(event)


class PipelineRun:
    """Handle on a started run: an async iterator of events plus the result.

    Iterating yields events as they are produced and stops after the
    terminal ``done`` or ``error`` event.  :meth:`result` awaits the final
    carousel or re-raises the run's exception.
    """

    def __init__(
        self,
        task: asyncio.Future[CarouselData],
        channel: EventChannel,
        pipeline: GenerationPipeline,
    ) -> None:
        self._task = task
        self._channel = channel
        self._pipeline = pipeline
        self._task.add_done_callback(self._log_outcome)

    def __aiter__(self) -> EventChannel:
        return self._channel

    @property
    def done(self) -> bool:
        return self._task.done()

    def cancel(self) -> None:
        """Signal cancellation to the running pipeline."""
        self._pipeline.cancel()

    async def result(self) -> CarouselData:
        return await self._task

    @staticmethod
    def _log_outcome(task: asyncio.Future[CarouselData]) -> None:
        if task.cancelled():
            return
        error = task.exception()
        if error is not None and not isinstance(error, PipelineError):
            logger.debug(f"Pipeline run ended with {type(error).__name__}: {error}")
