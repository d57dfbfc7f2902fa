"""Command line entry point: export the example prompt document.

Builds the document from :mod:`genschema.core.example`, runs the soft
aspect ratio check, and writes the SuperJSON artifact to
``config.output_path`` (``prompt.json`` in the working directory unless
``GENSCHEMA_OUTPUT_PATH`` says otherwise).

There are no command line flags.  A failed write raises and the process
exits with the underlying error.

Usage
-----
CLI (installed entry point)::

    genschema

Direct invocation::

    python -m genschema
"""

from __future__ import annotations

import logging
from pathlib import Path

from genschema.core.config import GenSchemaConfig, config
from genschema.core.dimensions import aspect_ratio_mismatch
from genschema.core.example import build_example_prompt
from genschema.core.models import PromptDocument
from genschema.core.options import VOCABULARIES, is_suggested
from genschema.core.serializer import write_prompt

logger = logging.getLogger(__name__)


def custom_option_values(document: PromptDocument) -> dict[str, object]:
    """Collect open-enumeration values that are not in the suggested vocabulary.

    List fields are reported per element, e.g. ``"subjects.0.position"``.
    Absent optional fields and raw numbers are skipped.
    """
    data = document.model_dump(exclude_none=True)
    custom: dict[str, object] = {}

    for field in VOCABULARIES:
        head, _, leaf = field.partition(".")
        if not leaf:
            candidates = [(field, data.get(head))]
        elif isinstance(data.get(head), list):
            candidates = [
                (f"{head}.{i}.{leaf}", item.get(leaf)) for i, item in enumerate(data[head])
            ]
        else:
            candidates = [(field, (data.get(head) or {}).get(leaf))]

        for path, value in candidates:
            if isinstance(value, str) and not is_suggested(field, value):
                custom[path] = value

    return custom


def export_prompt(document: PromptDocument, settings: GenSchemaConfig = config) -> Path:
    """Check and write one prompt document using ``settings``."""
    aspect_ratio_mismatch(document.resolution)

    for path, value in custom_option_values(document).items():
        logger.debug(f"Custom value for {path}: {value!r}")

    return write_prompt(document, settings.output_path, settings.schema_url)


def main() -> None:
    """Export the example prompt document.

    This function is registered as the ``genschema`` console script in
    ``pyproject.toml``.
    """
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    path = export_prompt(build_example_prompt(), config)
    logger.info(f"Export complete: {path.resolve()}")


if __name__ == "__main__":
    main()
