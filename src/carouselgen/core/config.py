"""Configuration management for the carousel generator.

This module provides centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with the CAROUSELGEN_
prefix, allowing easy customization without code changes.

Environment Variable Loading
-----------------------------
Configuration values are loaded in the following priority order:
1. Environment variables (CAROUSELGEN_* prefix)
2. .env file in the project root
3. Default values defined in CarouselGenConfig

Example .env file:
    CAROUSELGEN_OPENAI_API_KEY=sk-...
    CAROUSELGEN_UNSPLASH_ACCESS_KEY=...
    CAROUSELGEN_MAX_REFINEMENT_ATTEMPTS=3
    CAROUSELGEN_LIGHT_MODEL=gpt-4o-mini

Global Configuration Instance
------------------------------
A global `config` instance is created automatically at module import time.
Pipelines read their defaults from it unless a config is passed explicitly.

Usage Example
-------------
    from carouselgen.core.config import config

    print(config.light_model)
    print(config.max_refinement_attempts)

Model Selection
---------------
Two model names are configured: ``strong_model`` is used only for the
content-outline stage of premium runs, ``light_model`` for everything else.
See :func:`carouselgen.pipeline.tiers.get_model_for_step`.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CarouselGenConfig(BaseSettings):
    """Main configuration for the carousel generator.

    Attributes
    ----------
    Credentials:
        openai_api_key : str | None
            Server-side OpenAI key used by the HTTP adapter
        unsplash_access_key : str | None
            Unsplash access key; image search is disabled when unset

    Models:
        light_model : str
            Model used for every stage except premium content outlines
        strong_model : str
            Model used for premium content outlines
        request_timeout : float
            Timeout in seconds for model and image search requests

    Pipeline:
        max_refinement_attempts : int
            Upper bound on premium refinement passes
        min_text_elements : int
            Minimum text elements per slide enforced by validation
        image_results_per_slide : int
            Number of stock photos requested per slide (the first is used)
        image_orientation : Literal["landscape", "portrait", "squarish"]
            Orientation filter sent to the image search
        default_canvas_width / default_canvas_height : int
            Canvas size used when a request omits it

    Server:
        server_host : str
        server_port : int
        log_level : str

    Examples
    --------
        >>> custom = CarouselGenConfig(max_refinement_attempts=1, _env_file=None)
        >>> custom.max_refinement_attempts
        1
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CAROUSELGEN_",
        case_sensitive=False,
        extra="ignore",
    )

    # Credentials
    openai_api_key: str | None = Field(
        default=None,
        description="OpenAI API key used when the caller does not bring its own",
    )
    unsplash_access_key: str | None = Field(
        default=None,
        description="Unsplash access key (image search disabled when unset)",
    )

    # Models
    light_model: str = Field(
        default="gpt-4o-mini",
        description="Model for all stages except premium content outlines",
    )
    strong_model: str = Field(
        default="gpt-4o",
        description="Model for premium content outlines",
    )
    request_timeout: float = Field(
        default=120.0,
        description="Timeout in seconds for outbound requests",
        gt=0,
    )

    # Pipeline behaviour
    max_refinement_attempts: int = Field(
        default=3,
        description="Maximum refinement passes for premium runs",
        ge=1,
        le=10,
    )
    min_text_elements: int = Field(
        default=2,
        description="Minimum number of text elements each slide must contain",
        ge=0,
    )
    image_results_per_slide: int = Field(
        default=3,
        description="Stock photo results requested per slide",
        ge=1,
        le=30,
    )
    image_orientation: Literal["landscape", "portrait", "squarish"] = Field(
        default="squarish",
        description="Orientation filter for stock photo search",
    )
    default_canvas_width: int = Field(default=1080, gt=0)
    default_canvas_height: int = Field(default=1350, gt=0)

    # Server settings
    server_host: str = Field(
        default="0.0.0.0",
        description="Server bind address",
    )
    server_port: int = Field(
        default=8000,
        description="Server port",
        ge=1024,
        le=65535,
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level for the server entry point",
    )


# Global configuration instance
# Loaded from environment variables (CAROUSELGEN_* prefix) and .env at import.
config = CarouselGenConfig()
