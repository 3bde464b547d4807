"""Tests for the template registry."""

import logging

import pytest

from funnel.config import TemplateConfig
from funnel.prompts import create_bullet_summary_prompt, create_edited_transcript_prompt
from funnel.prompts.templates import (
    DEFAULT_TEMPLATE,
    TEMPLATES,
    TemplateError,
    list_templates,
    render_prompt,
    resolve_template,
)


class TestTemplates:
    def test_list_templates_returns_builtins(self):
        assert list_templates() == ["bullet-summary", "edited-transcript"]

    def test_list_templates_appends_user_only_names(self):
        user_templates = {
            "edited-transcript": TemplateConfig(prompt="Edit: {transcript}"),
            "action-items": TemplateConfig(prompt="Actions: {transcript}"),
        }
        assert list_templates(user_templates) == ["bullet-summary", "edited-transcript", "action-items"]

    def test_default_is_bullet_summary(self):
        assert TEMPLATES[DEFAULT_TEMPLATE] is create_bullet_summary_prompt


class TestResolveTemplate:
    def test_empty_name_returns_default(self):
        assert resolve_template("") is create_bullet_summary_prompt

    def test_by_name(self):
        assert resolve_template("bullet-summary") is create_bullet_summary_prompt
        assert resolve_template("edited-transcript") is create_edited_transcript_prompt

    def test_unknown_name_falls_back_to_default(self):
        assert resolve_template("nonexistent") is create_bullet_summary_prompt

    def test_user_defined_template(self):
        user_templates = {"pirate": TemplateConfig(prompt="Arr! Summarize: {transcript}")}
        build = resolve_template("pirate", user_templates)
        assert build("Buy milk") == "Arr! Summarize: Buy milk"

    def test_user_template_overrides_builtin_of_same_name(self):
        user_templates = {"edited-transcript": TemplateConfig(prompt="Custom edit: {transcript}")}
        assert render_prompt("edited-transcript", "hi", user_templates) == "Custom edit: hi"

    def test_empty_user_prompt_inherits_builtin(self):
        user_templates = {"edited-transcript": TemplateConfig(prompt="")}
        assert resolve_template("edited-transcript", user_templates) is create_edited_transcript_prompt


class TestRenderPrompt:
    def test_builtin_matches_builder(self):
        assert render_prompt("edited-transcript", "Buy milk") == create_edited_transcript_prompt("Buy milk")

    def test_builtin_keeps_braces_in_transcript(self):
        text = "a {placeholder} in speech"
        assert text in render_prompt("bullet-summary", text)

    def test_user_template_keeps_braces_in_transcript(self):
        user_templates = {"plain": TemplateConfig(prompt="T: {transcript}")}
        assert render_prompt("plain", "{x} {0}", user_templates) == "T: {x} {0}"

    def test_unknown_placeholder_raises(self):
        user_templates = {"broken": TemplateConfig(prompt="{speaker}: {transcript}")}
        with pytest.raises(TemplateError, match="broken"):
            render_prompt("broken", "hi", user_templates)

    def test_unbalanced_brace_raises(self):
        user_templates = {"broken": TemplateConfig(prompt="{transcript")}
        with pytest.raises(TemplateError):
            render_prompt("broken", "hi", user_templates)

    def test_template_error_is_value_error(self):
        assert issubclass(TemplateError, ValueError)

    def test_missing_placeholder_warns(self, caplog):
        user_templates = {"static": TemplateConfig(prompt="Say hello.")}
        with caplog.at_level(logging.WARNING, logger="funnel.prompts.templates"):
            result = render_prompt("static", "ignored", user_templates)
        assert result == "Say hello."
        assert "no {transcript} placeholder" in caplog.text
