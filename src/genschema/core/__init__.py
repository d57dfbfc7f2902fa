"""Core functionality for genschema.

This package provides the prompt document schema and its export:

- **models**: Frozen Pydantic models for the prompt document
- **options**: Suggested vocabularies for the open-enumeration fields
- **dimensions**: Normalisation of numeric-or-label resolution values
- **superjson**: SuperJSON-compatible envelope encoder and decoder
- **serializer**: ``$schema`` tagging and the single-file export
- **json_schema**: JSON Schema generation from the models
- **config**: Configuration management using Pydantic Settings

Architecture Overview
---------------------
Data flows one way::

    literal construction -> $schema tagging -> SuperJSON encoding -> file write

Documents are built in full by the caller (see ``example.py``) and are
immutable afterwards.  The serializer never modifies the document it is
given, and the export never reads back what it wrote.

Usage Example
-------------
    from genschema.core import PromptDocument, write_prompt

    write_prompt(document)  # ./prompt.json
"""

from genschema.core.config import GenSchemaConfig, config
from genschema.core.dimensions import DimensionParseError, parse_dimension
from genschema.core.json_schema import build_json_schema, write_json_schema
from genschema.core.models import PromptDocument
from genschema.core.serializer import serialize_prompt, write_prompt

__all__ = [
    "DimensionParseError",
    "GenSchemaConfig",
    "PromptDocument",
    "build_json_schema",
    "config",
    "parse_dimension",
    "serialize_prompt",
    "write_json_schema",
    "write_prompt",
]
