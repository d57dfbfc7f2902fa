"""JSON Schema generation for the prompt document.

The schema is produced by pydantic from :class:`PromptDocument` and stamped
with the draft identifier and the published schema URL as ``$id``.  Open
enumerations come out as ``anyOf`` of an ``enum`` and a plain ``string``,
which keeps the suggested vocabulary visible to editors without restricting
values.

This module only generates the schema.  Artifacts are not validated against
it, and the published copy at the URL is never fetched.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from genschema.core.config import SCHEMA_URL
from genschema.core.models import PromptDocument

logger = logging.getLogger(__name__)

JSON_SCHEMA_DRAFT = "https://json-schema.org/draft/2020-12/schema"


def build_json_schema(schema_id: str = SCHEMA_URL) -> dict[str, Any]:
    """Return the JSON Schema of :class:`PromptDocument`.

    Args:
        schema_id: Value for the schema's ``$id``.
    """
    schema = PromptDocument.model_json_schema()
    schema["title"] = "Image Generation Prompt"
    return {"$schema": JSON_SCHEMA_DRAFT, "$id": schema_id, **schema}


def write_json_schema(path: str | Path, schema_id: str = SCHEMA_URL) -> Path:
    """Write the JSON Schema to ``path`` as indented JSON.

    Raises:
        OSError: If the file cannot be written.
    """
    path = Path(path)
    with open(path, "w", encoding="utf-8") as handle:
        json.dump(build_json_schema(schema_id), handle, indent=2, ensure_ascii=False)

    logger.info(f"Wrote JSON Schema to: {path}")
    return path
