import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from dependencies import get_handler
from domain import AnalyticsFormatter
from handlers import AudioAnalysisHandler, CompletionPoller
from routes import upload_router

COMPLETED_HELLO = {
    "status": "completed",
    "text": "hello",
    "words": [{"text": "hello", "confidence": 0.9, "start": 0, "end": 500}],
    "audio_duration": 60,
    "utterances": None,
}


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
def make_client(upload_dir, record_sleep):
    app = FastAPI()
    app.include_router(upload_router)

    def _make(service) -> TestClient:
        handler = AudioAnalysisHandler(
            service,
            CompletionPoller(service, sleep=record_sleep),
            AnalyticsFormatter(),
            upload_dir,
        )
        app.dependency_overrides[get_handler] = lambda: handler
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()


def test_upload_returns_analytics(make_client, fake_service_factory, upload_dir) -> None:
    service = fake_service_factory([COMPLETED_HELLO])
    client = make_client(service)

    response = client.post(
        "/upload-audio", files={"audio": ("clip.wav", b"fake-wav-bytes", "audio/wav")}
    )

    assert response.status_code == 200
    assert response.json() == {
        "wpm": 1.0,
        "total_words": 1,
        "speaker_count": 0,
        "speakers": [],
        "speaker_segments": [],
        "pauses": [],
        "hesitations": [],
        "full_text": "hello",
    }
    assert service.uploaded_bytes == [b"fake-wav-bytes"]
    assert service.submitted == ["https://cdn.example/upload/abc"]
    assert list(upload_dir.iterdir()) == []


def test_upload_with_speakers_after_pending_polls(
    make_client, fake_service_factory, sleeps
) -> None:
    service = fake_service_factory(
        [
            {"status": "queued"},
            {"status": "processing"},
            {
                "status": "completed",
                "text": "Hi. Um yes.",
                "audio_duration": 30,
                "words": [
                    {"text": "Hi.", "confidence": 0.95, "start": 0, "end": 400},
                    {"text": "Um", "confidence": 0.5, "start": 1200, "end": 1560},
                    {"text": "yes.", "confidence": None, "start": 1560, "end": 1900},
                ],
                "utterances": [
                    {"speaker": "B", "text": "Hi.", "start": 0, "end": 400, "confidence": 0.95},
                    {"speaker": "A", "text": "Um yes.", "start": 1200, "end": 1900, "confidence": 0.7},
                ],
            },
        ]
    )
    client = make_client(service)

    response = client.post(
        "/upload-audio", files={"audio": ("call.mp3", b"mp3", "audio/mpeg")}
    )

    assert response.status_code == 200
    body = response.json()
    assert body["wpm"] == 6.0
    assert body["speaker_count"] == 2
    assert body["speakers"] == [
        {"speaker_id": "B", "speaker_label": "Speaker A"},
        {"speaker_id": "A", "speaker_label": "Speaker B"},
    ]
    assert body["speaker_segments"][1] == {
        "speaker": "Speaker B",
        "speaker_id": "A",
        "text": "Um yes.",
        "start": 0.02,
        "end": 0.03,
        "confidence": 0.7,
    }
    assert body["pauses"] == [{"start": 0.03, "end": 0.03}]
    assert body["hesitations"] == [{"text": "Um", "start": 0.02, "end": 0.03}]
    assert sleeps == [3.0, 3.0]


def test_missing_audio_field_fails_without_calling_provider(
    make_client, fake_service_factory
) -> None:
    service = fake_service_factory([COMPLETED_HELLO])
    client = make_client(service)

    response = client.post(
        "/upload-audio", files={"recording": ("clip.wav", b"bytes", "audio/wav")}
    )

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to process audio"}
    assert service.uploaded == []
    assert service.submitted == []
    assert service.polled == []


def test_provider_error_returns_generic_failure_and_cleans_up(
    make_client, fake_service_factory, upload_dir
) -> None:
    service = fake_service_factory(
        [{"status": "error", "error": "Unsupported audio codec"}]
    )
    client = make_client(service)

    response = client.post(
        "/upload-audio", files={"audio": ("clip.wav", b"bytes", "audio/wav")}
    )

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to process audio"}
    assert "Unsupported audio codec" not in response.text
    assert list(upload_dir.iterdir()) == []


def test_text_audio_field_returns_generic_failure(make_client, fake_service_factory) -> None:
    service = fake_service_factory([COMPLETED_HELLO])
    client = make_client(service)

    response = client.post("/upload-audio", data={"audio": "not-a-file"})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to process audio"}
    assert service.uploaded == []
    assert service.polled == []


def test_fractional_timings_and_missing_utterance_confidence(
    make_client, fake_service_factory
) -> None:
    service = fake_service_factory(
        [
            {
                "status": "completed",
                "text": "um ok",
                "audio_duration": 60,
                "words": [
                    {"text": "um", "confidence": 0.4, "start": 120.5, "end": 600.25},
                    {"text": "ok", "confidence": None, "start": 600.25, "end": 61200.75},
                ],
                "utterances": [
                    {"speaker": "A", "text": "um ok", "start": 120.5, "end": 61200.75, "confidence": None},
                ],
            }
        ]
    )
    client = make_client(service)

    response = client.post("/upload-audio", files={"audio": ("clip.wav", b"bytes", "audio/wav")})

    assert response.status_code == 200
    body = response.json()
    assert body["total_words"] == 2
    assert body["hesitations"] == [{"text": "um", "start": 0.0, "end": 0.01}]
    assert body["pauses"] == [{"start": 0.01, "end": 1.02}]
    assert body["speaker_segments"][0]["confidence"] is None
    assert body["speaker_segments"][0]["end"] == 1.02
