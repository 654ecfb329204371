"""
Transcript validation.

Rejects transcripts that are too short or too repetitive to be worth sending
to the completion API. Runs before any prompt is built.
"""

import re
from dataclasses import dataclass

MIN_WORD_COUNT: int = 20
MIN_UNIQUE_WORD_COUNT: int = 5

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]")


@dataclass(frozen=True)
class TranscriptStats:
    word_count: int
    unique_word_count: int


class ValidationError(Exception):
    """Transcript is too short or not diverse enough."""

    def __init__(self, word_count: int, unique_word_count: int):
        self.word_count = word_count
        self.unique_word_count = unique_word_count
        super().__init__(
            f"Transcription too short or repetitive ({word_count} words, "
            f"{unique_word_count} unique). Please provide a more detailed response."
        )


def transcript_stats(transcript: str) -> TranscriptStats:
    """
    Count words and distinct normalized tokens.

    A token is the lower-cased word with everything outside [a-z0-9]
    removed, so "Team," and "team" are the same token. A word made only of
    punctuation normalizes to the empty token, which still counts once.
    """
    words = transcript.split()
    unique = {_NON_ALNUM_RE.sub("", word.lower()) for word in words}
    return TranscriptStats(word_count=len(words), unique_word_count=len(unique))


def validate_transcript(transcript: str) -> TranscriptStats:
    """
    Check the transcript meets the minimum length and diversity.

    Args:
        transcript: Candidate answer text

    Returns:
        TranscriptStats for the accepted transcript

    Raises:
        ValidationError: fewer than MIN_WORD_COUNT words or fewer than
            MIN_UNIQUE_WORD_COUNT distinct tokens
    """
    stats = transcript_stats(transcript)
    if stats.word_count < MIN_WORD_COUNT or stats.unique_word_count < MIN_UNIQUE_WORD_COUNT:
        raise ValidationError(stats.word_count, stats.unique_word_count)
    return stats
