"""genschema - Structured image generation prompts with SuperJSON export."""

__version__ = "1.0.0"

from genschema.core.config import SCHEMA_URL, GenSchemaConfig, config
from genschema.core.json_schema import build_json_schema, write_json_schema
from genschema.core.models import (
    Background,
    Camera,
    PromptDocument,
    Resolution,
    Subject,
    TextOverlay,
)
from genschema.core.serializer import read_prompt, serialize_prompt, write_prompt

__all__ = [
    "SCHEMA_URL",
    "GenSchemaConfig",
    "config",
    "Background",
    "Camera",
    "PromptDocument",
    "Resolution",
    "Subject",
    "TextOverlay",
    "build_json_schema",
    "write_json_schema",
    "read_prompt",
    "serialize_prompt",
    "write_prompt",
]
