"""Shared fixtures for funnel tests."""

from __future__ import annotations

import pytest

TRANSCRIPTS = [
    "",
    "Buy milk",
    "Um, so like, this is, you know, a test.",
    'This has "quotes" and \nnewlines and \\backslashes',
    "Braces {transcript} and {0} stay as typed",
    "Ünïcödé – 日本語 🎙️",
    "This is a very long transcript. " * 100,
]


@pytest.fixture(params=TRANSCRIPTS, ids=lambda t: repr(t[:20]))
def transcript(request) -> str:
    """Transcripts covering empty, short, long and awkward input."""
    return request.param


@pytest.fixture
def tmp_config_file(tmp_path):
    """Write a TOML config with a custom template to a temp directory and return its path."""
    config_toml = tmp_path / "config.toml"
    config_toml.write_text(
        '[prompts]\ntemplate = "edited-transcript"\n\n'
        '[templates.action-items]\nprompt = "Action items:\\n{transcript}"\n'
    )
    return config_toml
