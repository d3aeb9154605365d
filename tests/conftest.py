from pathlib import Path

import pytest

from domain import RawTranscript
from infrastructure.interfaces import TranscriptionService


class FakeTranscriptionService(TranscriptionService):
    """In-memory provider replaying a fixed sequence of transcript states."""

    def __init__(self, states: list[dict] | None = None):
        self._states = list(states or [])
        self.uploaded: list[Path] = []
        self.uploaded_bytes: list[bytes] = []
        self.submitted: list[str] = []
        self.polled: list[str] = []

    def upload(self, file_path: Path) -> str:
        self.uploaded.append(Path(file_path))
        self.uploaded_bytes.append(Path(file_path).read_bytes())
        return "https://cdn.example/upload/abc"

    def request_transcription(self, audio_url: str) -> str:
        self.submitted.append(audio_url)
        return "transcript-1"

    def get_transcript(self, transcript_id: str) -> RawTranscript:
        self.polled.append(transcript_id)
        state = self._states.pop(0)
        return RawTranscript.model_validate({"id": transcript_id, **state})


@pytest.fixture
def fake_service_factory():
    return FakeTranscriptionService


@pytest.fixture
def sleeps() -> list[float]:
    return []


@pytest.fixture
def record_sleep(sleeps):
    return sleeps.append
