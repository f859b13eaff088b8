"""
Module for picking highlight clips out of a transcript with a chat model.
"""

import re
import json
import traceback
from typing import List

from clipper.core.prompts import highlight_template
from clipper.models.schemas import Highlight, HighlightConfig, Transcript, TranscriptSegment
from clipper.utils.helpers import format_time
from clipper.utils.logger import logging

JSON_ARRAY_PATTERN = re.compile(r"\[.*\]", re.DOTALL)


def render_segments(segments: List[TranscriptSegment]) -> str:
    return "\n".join(
        f"[{format_time(s.start)} - {format_time(s.end)}]: {s.text}" for s in segments
    )


def build_prompt(segments: List[TranscriptSegment]) -> str:
    return highlight_template.format(transcript=render_segments(segments))


def parse_highlights(response: str) -> List[Highlight]:
    """
    Pull the JSON array out of a free-form model reply.

    Args:
        response: Raw completion text, possibly wrapped in commentary

    Returns:
        Highlights sorted by descending score. Items are kept as written;
        only entries that are not JSON objects are skipped.

    Raises:
        ValueError: if no array is found or the match is not valid JSON
    """
    match = JSON_ARRAY_PATTERN.search(response or "")
    if not match:
        raise ValueError("No JSON array in model response")

    items = json.loads(match.group(0))
    if not isinstance(items, list):
        raise ValueError("Model response is not a JSON array")

    highlights = []
    for item in items:
        if not isinstance(item, dict):
            logging.debug(f"Skipping non-object highlight entry: {item!r}")
            continue
        highlights.append(Highlight.model_validate(item))

    return sorted(highlights, key=lambda h: h.sort_score(), reverse=True)


class HighlightExtractor:
    """Class to find clip-worthy moments in a transcript."""

    def __init__(self, client, highlight_config: HighlightConfig = None):
        """
        Initialize the extractor.

        Args:
            client: An ``AsyncGroq`` client
            highlight_config: Model, sampling and size settings
        """
        self.client = client
        self.highlight_config = highlight_config or HighlightConfig()

    async def find_highlights(self, transcript: Transcript) -> List[Highlight]:
        """
        Ask the chat model for the best clip moments.

        Failures never propagate: a missing or unparseable answer yields an
        empty list so the enclosing analysis still succeeds.
        """
        if not transcript.segments:
            return []

        logging.info("🧠 Analyzing with AI...")
        prompt = build_prompt(transcript.segments)

        try:
            completion = await self.client.chat.completions.create(
                messages=[{"role": "user", "content": prompt}],
                model=self.highlight_config.model,
                temperature=self.highlight_config.temperature,
                max_tokens=self.highlight_config.max_tokens,
            )
            response = "[]"
            if completion.choices and completion.choices[0].message.content:
                response = completion.choices[0].message.content

            highlights = parse_highlights(response)
        except Exception as e:
            logging.error(f"❌ AI error: {str(e)}")
            logging.debug(traceback.format_exc())
            return []

        return highlights[: self.highlight_config.max_highlights]
