"""JSON output formatter for rendered prompts."""

from __future__ import annotations

import json


def _prompt_record(template: str, transcript: str, prompt: str) -> dict[str, str]:
    return {"template": template, "transcript": transcript, "prompt": prompt}


def format_prompt_json(template: str, transcript: str, prompt: str) -> str:
    """Format a rendered prompt, with its template name and input, as JSON."""
    return json.dumps(_prompt_record(template, transcript, prompt), indent=2, ensure_ascii=False)


def format_prompts_json(rendered: list[tuple[str, str, str]]) -> str:
    """Format several (template, transcript, prompt) triples as a JSON array."""
    records = [_prompt_record(*item) for item in rendered]
    return json.dumps(records, indent=2, ensure_ascii=False)
