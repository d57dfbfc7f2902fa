"""Shared pytest fixtures for genschema tests."""

import shutil
import tempfile
from pathlib import Path
from typing import Any, Generator

import pytest

from genschema.core.example import build_example_prompt
from genschema.core.models import PromptDocument


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files.

    Yields:
        Path to temporary directory

    Cleanup:
        Directory is removed after test completes
    """
    temp_path = Path(tempfile.mkdtemp())
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def prompt_data() -> dict[str, Any]:
    """Raw keyword data for a complete prompt document.

    Returns:
        Dict accepted by ``PromptDocument.model_validate``
    """
    return {
        "scene": "A red smoothie on a premium kitchen countertop",
        "subjects": [
            {
                "type": "glass with smoothie",
                "description": "A red smoothie in a glass",
                "pose": "sitting",
                "position": "middle-left midground",
                "expression": "happy",
            }
        ],
        "style": "HDR photography (high dynamic range)",
        "lighting": "candlelight (warm, flickering, intimate)",
        "mood": "cozy and comforting",
        "background": {
            "elements": [],
            "depth_of_field": "anamorphic bokeh (oval-shaped)",
        },
        "composition": "depth (foreground, middle ground, background layers)",
        "camera": {
            "angle": "eye-level shot (neutral, relatable)",
            "distance": "close-up (CU) (head and shoulders)",
            "focus": "pin-sharp focus on primary subject",
        },
        "color_palette": ["white", "red", "black"],
        "resolution": {
            "width": "4096",
            "height": "4320",
            "aspect_ratio": "16:9",
            "dpi": "300 (Standard Print)",
        },
    }


@pytest.fixture
def prompt_document(prompt_data: dict[str, Any]) -> PromptDocument:
    """A minimal valid prompt document (no optional fields)."""
    return PromptDocument.model_validate(prompt_data)


@pytest.fixture
def example_prompt() -> PromptDocument:
    """The example document exported by the entry point."""
    return build_example_prompt()
