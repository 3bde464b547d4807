"""Prompt for turning a voice transcript into a JSON list of bullet points."""

from __future__ import annotations

BULLET_SUMMARY_PROMPT = """You are an AI assistant that creates concise, actionable bullet point summaries from voice transcripts.

Given a transcript of someone's thoughts, create a bullet point summary that:
1. Captures the main ideas and key points
2. Identifies any action items or decisions made
3. Preserves important details while removing filler words
4. Organizes thoughts into logical groupings
5. Uses clear, concise language

Special cases:
- If the transcript is empty or contains no words, return a single bullet: "Ah, the recording is empty!"
- If the transcript is very short (just a few words), return those words as a single bullet point
- Even the shortest recording deserves at least one bullet point

Format:
- Return a JSON array of bullet points as strings
- Each bullet should be a complete, standalone thought
- Start with the most important points
- Include action items with clear next steps
- Keep each bullet concise but informative

Example output:
["Main idea or decision", "Key insight or observation", "Action: Specific next step", "Important detail to remember"]"""


def create_bullet_summary_prompt(transcript: str) -> str:
    """Build the bullet summary prompt for a transcript.

    The transcript is inserted verbatim; empty and very short recordings are
    handled by the model following the special-case instructions above.
    """
    return f"{BULLET_SUMMARY_PROMPT}\n\nTranscript:\n{transcript}\n\nCreate a bullet point summary:"
