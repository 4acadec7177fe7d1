"""
Delimiter segmenter: cuts extracted text into recipe blocks.
"""

import logging
from typing import Optional

from recipe_ingest.engine.parsing.grammar import BREAK_MARKER_RE
from recipe_ingest.engine.parsing.models import SegmentationResult
from recipe_ingest.utils.sanitization import normalize_text

logger = logging.getLogger(__name__)


def segment_text(text: str, min_block_length: Optional[int] = None) -> SegmentationResult:
    """
    Split raw recipe text into ordered recipe blocks.

    Line endings are normalized and long runs of blank lines collapsed before
    splitting on the break marker. Each segment is trimmed; empty segments are
    discarded silently and segments shorter than ``min_block_length`` are
    discarded and counted as skipped.

    Args:
        text: Raw text from the document extractor.
        min_block_length: Minimum trimmed length of a block. Defaults to config.

    Returns:
        SegmentationResult with blocks in input order and the skipped count.
    """
    if min_block_length is None:
        from recipe_ingest.config import settings

        min_block_length = settings.min_block_length

    blocks = []
    skipped = 0

    for index, segment in enumerate(BREAK_MARKER_RE.split(normalize_text(text))):
        segment = segment.strip()
        if not segment:
            continue
        if len(segment) < min_block_length:
            skipped += 1
            logger.debug(f"Skipping segment {index + 1}: {len(segment)} chars is below minimum")
            continue
        blocks.append(segment)

    logger.debug(f"Segmented text into {len(blocks)} block(s), skipped {skipped}")
    return SegmentationResult(blocks=blocks, skipped=skipped)
