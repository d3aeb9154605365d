"""Domain models for the speech analytics service."""

from pathlib import Path

import assemblyai as aai
from pydantic import BaseModel


class UploadedFile(BaseModel, frozen=True):
    """An audio upload persisted to local storage for one request."""

    path: Path
    original_name: str | None = None
    size: int


class Word(BaseModel, frozen=True):
    """A single recognised word with timings in milliseconds."""

    text: str
    start: float
    end: float
    confidence: float | None = None
    speaker: str | None = None


class Utterance(BaseModel, frozen=True):
    """A speaker turn returned by diarization, timings in milliseconds."""

    speaker: str
    text: str
    start: float
    end: float
    confidence: float | None = None


class RawTranscript(BaseModel, frozen=True):
    """Transcript payload as returned by the transcription provider."""

    id: str
    status: aai.TranscriptStatus
    text: str | None = None
    words: list[Word] | None = None
    utterances: list[Utterance] | None = None
    audio_duration: float | None = None
    error: str | None = None


class SpeakerInfo(BaseModel, frozen=True):
    """Display label assigned to a raw speaker identifier."""

    speaker_id: str
    speaker_label: str


class SpeakerSegment(BaseModel, frozen=True):
    """An utterance attributed to a labelled speaker, timings in minutes."""

    speaker: str
    speaker_id: str
    text: str
    start: float
    end: float
    confidence: float | None = None


class Pause(BaseModel, frozen=True):
    """A pause interval in minutes."""

    start: float
    end: float


class Hesitation(BaseModel, frozen=True):
    """A hesitation token with its interval in minutes."""

    text: str
    start: float
    end: float


class AnalyticsResult(BaseModel, frozen=True):
    """Speaking analytics derived from a completed transcript."""

    wpm: float
    total_words: int
    speaker_count: int
    speakers: list[SpeakerInfo]
    speaker_segments: list[SpeakerSegment]
    pauses: list[Pause]
    hesitations: list[Hesitation]
    full_text: str | None = None
