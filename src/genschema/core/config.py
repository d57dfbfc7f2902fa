"""Configuration management for genschema.

This module provides configuration using Pydantic Settings.  The export has
a fixed interface: it always writes ``prompt.json`` in the working directory,
tagged with the v1.0.0 schema URL, and takes no flags.  The defaults below
reproduce that exactly.

Environment variables with the GENSCHEMA_ prefix can override the defaults.
This goes beyond the fixed interface, so an exported variable such as
GENSCHEMA_OUTPUT_PATH moves the artifact away from ``./prompt.json``.  No
``.env`` file is read implicitly; pass ``_env_file`` to opt in.

Example:
    GENSCHEMA_OUTPUT_PATH=out/prompt.json GENSCHEMA_LOG_LEVEL=DEBUG genschema

Usage Example
-------------
    from genschema.core.config import config

    print(config.output_path)
    print(config.schema_url)
"""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Published JSON Schema for the prompt document, embedded as ``$schema`` in
# every exported artifact.  It is never fetched.
SCHEMA_URL = (
    "https://raw.githubusercontent.com/xcaeser/generation-schemas/main/"
    "schemas/v1.0.0/image-generation.schema.json"
)


class GenSchemaConfig(BaseSettings):
    """Main configuration for genschema.

    Attributes
    ----------
    output_path : Path
        Where the exported artifact is written.  Relative paths resolve
        against the working directory at invocation time.  The parent
        directory is not created.
    schema_url : str
        URL embedded as the artifact's ``$schema`` field.
    log_level : Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        Level passed to ``logging.basicConfig`` by the entry point.

    Examples
    --------
        >>> custom_config = GenSchemaConfig(output_path="exports/scene.json")
        >>> custom_config.output_path
        PosixPath('exports/scene.json')
    """

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        env_prefix="GENSCHEMA_",
        case_sensitive=False,
    )

    output_path: Path = Field(
        default=Path("prompt.json"),
        description="Path of the exported prompt artifact",
    )
    schema_url: str = Field(
        default=SCHEMA_URL,
        description="Schema URL embedded as $schema in the artifact",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level for the command line entry point",
    )


# Global configuration instance, loaded once at import time.
config = GenSchemaConfig()
