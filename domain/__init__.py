"""Domain layer exports."""

from .analytics_formatter import AnalyticsFormatter
from .models import (
    AnalyticsResult,
    Hesitation,
    Pause,
    RawTranscript,
    SpeakerInfo,
    SpeakerSegment,
    UploadedFile,
    Utterance,
    Word,
)

__all__ = [
    "AnalyticsFormatter",
    "AnalyticsResult",
    "Hesitation",
    "Pause",
    "RawTranscript",
    "SpeakerInfo",
    "SpeakerSegment",
    "UploadedFile",
    "Utterance",
    "Word",
]
