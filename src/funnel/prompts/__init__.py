from __future__ import annotations

from funnel.prompts.bullet_summary import BULLET_SUMMARY_PROMPT, create_bullet_summary_prompt
from funnel.prompts.edited_transcript import EDITED_TRANSCRIPT_PROMPT, create_edited_transcript_prompt

__all__ = [
    "BULLET_SUMMARY_PROMPT",
    "EDITED_TRANSCRIPT_PROMPT",
    "create_bullet_summary_prompt",
    "create_edited_transcript_prompt",
]
