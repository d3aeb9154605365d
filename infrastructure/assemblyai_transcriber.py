"""AssemblyAI implementation of the TranscriptionService interface."""

from pathlib import Path

import httpx
from speech_common import setup_logging

from config import AssemblyAIConfig
from domain.models import RawTranscript
from exceptions import SubmissionFailed, TranscriptRetrievalError, UploadFailed

from .interfaces import TranscriptionService

logger = setup_logging()

UPLOAD_PATH = "/v2/upload"
TRANSCRIPT_PATH = "/v2/transcript"


class AssemblyAITranscriber(TranscriptionService):
    """Talks to the AssemblyAI REST API over a shared httpx client."""

    def __init__(self, client: httpx.Client, config: AssemblyAIConfig):
        self._client = client
        self._config = config

    def upload(self, file_path: Path) -> str:
        """
        Sends the whole file as an octet stream to the upload endpoint.

        The file is read fully into memory before sending.
        """
        try:
            audio_data = Path(file_path).read_bytes()
            response = self._client.post(
                UPLOAD_PATH,
                content=audio_data,
                headers={
                    "authorization": self._config.api_key,
                    "content-type": "application/octet-stream",
                },
            )
            response.raise_for_status()
            upload_url = response.json()["upload_url"]
            logger.info(
                "Audio uploaded to AssemblyAI",
                extra={"file_path": str(file_path), "size": len(audio_data)},
            )
            return upload_url
        except Exception as e:
            logger.exception(
                "AssemblyAI upload failed", extra={"file_path": str(file_path)}
            )
            raise UploadFailed(str(file_path), e) from e

    def request_transcription(self, audio_url: str) -> str:
        payload = {
            "audio_url": audio_url,
            "disfluencies": self._config.disfluencies,
            "punctuate": self._config.punctuate,
            "speaker_labels": self._config.speaker_labels,
        }
        try:
            response = self._client.post(
                TRANSCRIPT_PATH,
                json=payload,
                headers={
                    "authorization": self._config.api_key,
                    "content-type": "application/json",
                },
            )
            response.raise_for_status()
            transcript_id = response.json()["id"]
            logger.info(
                "Transcription submitted", extra={"transcript_id": transcript_id}
            )
            return transcript_id
        except Exception as e:
            logger.exception(
                "AssemblyAI transcription request failed",
                extra={"audio_url": audio_url},
            )
            raise SubmissionFailed(audio_url, e) from e

    def get_transcript(self, transcript_id: str) -> RawTranscript:
        try:
            response = self._client.get(
                f"{TRANSCRIPT_PATH}/{transcript_id}",
                headers={"authorization": self._config.api_key},
            )
            response.raise_for_status()
            return RawTranscript.model_validate(response.json())
        except Exception as e:
            logger.exception(
                "AssemblyAI transcript fetch failed",
                extra={"transcript_id": transcript_id},
            )
            raise TranscriptRetrievalError(transcript_id, e) from e
