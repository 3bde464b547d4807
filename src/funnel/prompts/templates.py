"""Named prompt templates: the built-in builders plus user overrides."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from funnel.prompts.bullet_summary import create_bullet_summary_prompt
from funnel.prompts.edited_transcript import create_edited_transcript_prompt

if TYPE_CHECKING:
    from funnel.config import TemplateConfig

logger = logging.getLogger(__name__)

PromptBuilder = Callable[[str], str]

DEFAULT_TEMPLATE = "bullet-summary"

TEMPLATES: dict[str, PromptBuilder] = {
    "bullet-summary": create_bullet_summary_prompt,
    "edited-transcript": create_edited_transcript_prompt,
}


class TemplateError(ValueError):
    """A user-defined template could not be rendered."""


def _user_builder(name: str, prompt: str) -> PromptBuilder:
    if "{transcript}" not in prompt:
        logger.warning("Template %r has no {transcript} placeholder; the transcript will be dropped", name)

    def build(transcript: str) -> str:
        try:
            return prompt.format(transcript=transcript)
        except (KeyError, IndexError, ValueError) as e:
            raise TemplateError(f"Template {name!r} is invalid: {e}") from e

    return build


def resolve_template(
    template_name: str, user_templates: dict[str, TemplateConfig] | None = None,
) -> PromptBuilder:
    """Resolve a template name to a prompt builder.

    Looks up user-defined templates first, then built-ins. Falls back to
    "bullet-summary". A user template with an empty prompt inherits the
    built-in of the same name.
    """
    name = template_name or DEFAULT_TEMPLATE
    user_templates = user_templates or {}
    builtin = TEMPLATES.get(name, TEMPLATES[DEFAULT_TEMPLATE])

    if name in user_templates and user_templates[name].prompt:
        logger.debug("Using user template %r", name)
        return _user_builder(name, user_templates[name].prompt)
    if name not in TEMPLATES and name not in user_templates:
        logger.debug("Unknown template %r, falling back to %r", name, DEFAULT_TEMPLATE)
    return builtin


def render_prompt(
    template_name: str, transcript: str, user_templates: dict[str, TemplateConfig] | None = None,
) -> str:
    """Render the named template for a transcript."""
    return resolve_template(template_name, user_templates)(transcript)


def list_templates(user_templates: dict[str, TemplateConfig] | None = None) -> list[str]:
    """Return the built-in template names, followed by any user-only ones."""
    names = list(TEMPLATES.keys())
    for name in user_templates or {}:
        if name not in names:
            names.append(name)
    return names
