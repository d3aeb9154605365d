"""Core business logic for turning transcripts into speaking analytics."""

from .models import (
    AnalyticsResult,
    Hesitation,
    Pause,
    RawTranscript,
    SpeakerInfo,
    SpeakerSegment,
    Utterance,
    Word,
)

HESITATION_TOKENS = frozenset({"uh", "um", "ah"})


def ms_to_minutes(milliseconds: float) -> float:
    """Converts a provider timestamp in milliseconds to minutes, two decimals."""
    return round(milliseconds / 60000, 2)


def words_per_minute(word_count: int, audio_duration: float | None) -> float:
    """
    Computes speaking rate over the whole recording.

    Args:
        word_count: Number of recognised words.
        audio_duration: Recording length in seconds.

    Returns:
        Words per minute rounded to two decimals, or 0.0 when the duration
        is unknown or zero.
    """
    if not audio_duration:
        return 0.0
    return round(word_count / (audio_duration / 60), 2)


def detect_pauses(words: list[Word]) -> list[Pause]:
    """Words without a confidence score are reported as pauses."""
    return [
        Pause(start=ms_to_minutes(w.start), end=ms_to_minutes(w.end))
        for w in words
        if w.confidence is None
    ]


def detect_hesitations(words: list[Word]) -> list[Hesitation]:
    """Returns the filler words (uh, um, ah) with their intervals."""
    return [
        Hesitation(
            text=w.text, start=ms_to_minutes(w.start), end=ms_to_minutes(w.end)
        )
        for w in words
        if w.text.lower() in HESITATION_TOKENS
    ]


def build_speaker_labels(utterances: list[Utterance]) -> dict[str, str]:
    """
    Maps raw speaker ids to display labels in order of first appearance.

    The first speaker heard becomes "Speaker A", the second "Speaker B",
    and so on, regardless of how the provider names them.
    """
    labels: dict[str, str] = {}
    for utterance in utterances:
        if utterance.speaker not in labels:
            labels[utterance.speaker] = f"Speaker {chr(ord('A') + len(labels))}"
    return labels


def build_speaker_segments(
    utterances: list[Utterance], labels: dict[str, str]
) -> list[SpeakerSegment]:
    """Attributes every utterance to its labelled speaker."""
    return [
        SpeakerSegment(
            speaker=labels[u.speaker],
            speaker_id=u.speaker,
            text=u.text,
            start=ms_to_minutes(u.start),
            end=ms_to_minutes(u.end),
            confidence=u.confidence,
        )
        for u in utterances
    ]


class AnalyticsFormatter:
    """Builds the analytics response from a completed transcript."""

    def build(self, transcript: RawTranscript) -> AnalyticsResult:
        """
        Derives speaking analytics from a completed transcript.

        Args:
            transcript: Provider payload with status ``completed``.

        Returns:
            AnalyticsResult with rate, speakers, pauses and hesitations.
        """
        words = transcript.words or []

        speakers: list[SpeakerInfo] = []
        segments: list[SpeakerSegment] = []
        if transcript.utterances:
            labels = build_speaker_labels(transcript.utterances)
            speakers = [
                SpeakerInfo(speaker_id=speaker_id, speaker_label=label)
                for speaker_id, label in labels.items()
            ]
            segments = build_speaker_segments(transcript.utterances, labels)

        return AnalyticsResult(
            wpm=words_per_minute(len(words), transcript.audio_duration),
            total_words=len(words),
            speaker_count=len(speakers),
            speakers=speakers,
            speaker_segments=segments,
            pauses=detect_pauses(words),
            hesitations=detect_hesitations(words),
            full_text=transcript.text,
        )
