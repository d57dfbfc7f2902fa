"""Export of prompt documents to SuperJSON artifacts.

The export is a single step: take one fully built
:class:`~genschema.core.models.PromptDocument`, put a ``$schema`` field in
front of its fields, encode the result with
:mod:`genschema.core.superjson`, and write it to one file.

Write Semantics
---------------
- The target file is overwritten if it exists.  There is no backup, no
  temporary file and no atomic rename.
- The parent directory is not created.
- ``OSError`` from the write (permissions, missing directory, full disk) is
  propagated unchanged.  Nothing is retried or cleaned up.

The document passed in is never modified; the ``$schema`` field only exists
in the payload built for encoding.

Usage Example
-------------
    from genschema.core.serializer import write_prompt

    path = write_prompt(document)               # ./prompt.json
    path = write_prompt(document, "out.json")
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from genschema.core import superjson
from genschema.core.config import SCHEMA_URL
from genschema.core.models import PromptDocument

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = Path("prompt.json")


def to_payload(document: PromptDocument, schema_url: str = SCHEMA_URL) -> dict[str, Any]:
    """Build the plain mapping that gets encoded.

    ``$schema`` comes first, followed by the document's fields in
    declaration order.  Optional fields left as None are omitted.

    Args:
        document: The prompt document to export.
        schema_url: Value for the ``$schema`` field.

    Returns:
        A new dict; the document is not modified.
    """
    payload: dict[str, Any] = {"$schema": schema_url}
    payload.update(document.model_dump(mode="python", exclude_none=True))
    return payload


def serialize_prompt(document: PromptDocument, schema_url: str = SCHEMA_URL) -> str:
    """Encode a prompt document as SuperJSON text with a ``$schema`` field."""
    return superjson.stringify(to_payload(document, schema_url))


def write_prompt(
    document: PromptDocument,
    path: str | Path = DEFAULT_OUTPUT,
    schema_url: str = SCHEMA_URL,
) -> Path:
    """Serialize a prompt document and write it to ``path``.

    Args:
        document: The prompt document to export.
        path: Target file; overwritten if present.
        schema_url: Value for the ``$schema`` field.

    Returns:
        The path written to.

    Raises:
        OSError: If the file cannot be written.
    """
    path = Path(path)
    text = serialize_prompt(document, schema_url)

    with open(path, "w", encoding="utf-8") as f:
        f.write(text)

    logger.info(f"Wrote prompt document to: {path}")
    return path


def read_prompt(path: str | Path) -> tuple[str | None, PromptDocument]:
    """Load an exported artifact back into a prompt document.

    The export flow never calls this; it is provided for consumers and for
    checking that an artifact decodes to the document that produced it.

    Args:
        path: Artifact written by :func:`write_prompt`.

    Returns:
        Tuple of (embedded ``$schema`` URL or None, rebuilt document).

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the file is not a SuperJSON envelope.
        pydantic.ValidationError: If the decoded value is not a prompt
            document.
    """
    with open(path, encoding="utf-8") as f:
        data = superjson.parse(f.read())

    if not isinstance(data, dict):
        raise ValueError(f"Expected an object in {path}, got {type(data).__name__}")

    schema_url = data.pop("$schema", None)
    return schema_url, PromptDocument.model_validate(data)
