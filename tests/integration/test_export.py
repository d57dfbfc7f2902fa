"""Integration tests for the end-to-end export.

These tests run the command line entry point against a temporary working
directory and decode the artifact it produces.
"""

from __future__ import annotations

import logging

import pytest

from genschema.core import superjson
from genschema.core.config import SCHEMA_URL, GenSchemaConfig
from genschema.core.models import PromptDocument
from genschema.core.serializer import read_prompt
from genschema.main import custom_option_values, export_prompt, main


@pytest.fixture
def settings(temp_dir) -> GenSchemaConfig:
    return GenSchemaConfig(_env_file=None, output_path=temp_dir / "prompt.json")


class TestSmoothieScenario:
    """The smoothie product shot from scene to decoded artifact."""

    def test_scenario(self, prompt_data, settings):
        doc = PromptDocument.model_validate(prompt_data)
        path = export_prompt(doc, settings)

        decoded = superjson.parse(path.read_text(encoding="utf-8"))
        assert decoded.pop("$schema") == SCHEMA_URL
        assert decoded["scene"] == "A red smoothie on a premium kitchen countertop"
        assert decoded["resolution"]["width"] == "4096"
        assert decoded["resolution"]["height"] == "4320"
        assert decoded["resolution"]["aspect_ratio"] == "16:9"
        assert decoded == doc.model_dump(exclude_none=True)

    def test_aspect_ratio_mismatch_is_only_a_warning(self, example_prompt, settings, caplog):
        """4096x4320 is not 16:9; the export still succeeds."""
        with caplog.at_level(logging.WARNING):
            path = export_prompt(example_prompt, settings)
        assert path.exists()
        assert any("does not match" in record.message for record in caplog.records)

    def test_zero_aspect_ratio_still_exports(self, prompt_data, settings):
        """An aspect ratio of "0:1" is accepted free text and must not stop the write."""
        prompt_data["resolution"] = {"width": 1024, "height": 1024, "aspect_ratio": "0:1", "dpi": 300}
        doc = PromptDocument.model_validate(prompt_data)

        path = export_prompt(doc, settings)

        _, restored = read_prompt(path)
        assert restored == doc

    def test_artifact_reads_back(self, example_prompt, settings):
        path = export_prompt(example_prompt, settings)
        schema_url, doc = read_prompt(path)
        assert schema_url == SCHEMA_URL
        assert doc == example_prompt


class TestCustomOptionValues:
    """Tests for custom_option_values."""

    def test_example_values(self, example_prompt):
        """Only the bare "16:9" ratio falls outside the suggested labels."""
        assert custom_option_values(example_prompt) == {"resolution.aspect_ratio": "16:9"}

    def test_reports_custom_values(self, prompt_data):
        prompt_data["mood"] = "quietly defiant"
        prompt_data["subjects"][0]["position"] = "just off the edge"
        prompt_data["resolution"]["width"] = 4000
        doc = PromptDocument.model_validate(prompt_data)
        assert custom_option_values(doc) == {
            "mood": "quietly defiant",
            "subjects.0.position": "just off the edge",
            "resolution.aspect_ratio": "16:9",
        }


class TestMain:
    """Tests for the command line entry point."""

    def test_main_writes_prompt_json_in_cwd(self, temp_dir, monkeypatch, example_prompt):
        monkeypatch.chdir(temp_dir)
        main()

        target = temp_dir / "prompt.json"
        assert target.exists()
        schema_url, doc = read_prompt(target)
        assert schema_url == SCHEMA_URL
        assert doc == example_prompt

    def test_main_propagates_write_errors(self, temp_dir, monkeypatch):
        """A missing output directory fails the run and leaves no artifact."""
        target = temp_dir / "missing" / "prompt.json"
        monkeypatch.setenv("GENSCHEMA_OUTPUT_PATH", str(target))
        monkeypatch.setattr("genschema.main.config", GenSchemaConfig(_env_file=None))

        with pytest.raises(FileNotFoundError):
            main()
        assert not target.exists()
        assert not target.parent.exists()
