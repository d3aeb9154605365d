"""Polls the transcription provider until a job reaches a terminal status."""

import time
from typing import Callable

import assemblyai as aai
from speech_common import setup_logging

from domain import RawTranscript
from exceptions import TranscriptionFailed, TranscriptionTimeout
from infrastructure.interfaces import TranscriptionService

logger = setup_logging()

PENDING_STATUSES = (aai.TranscriptStatus.queued, aai.TranscriptStatus.processing)


class CompletionPoller:
    """Waits for a transcription job at a fixed interval, without backoff."""

    def __init__(
        self,
        transcription_service: TranscriptionService,
        interval_seconds: float = 3.0,
        max_attempts: int | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self._transcription_service = transcription_service
        self._interval_seconds = interval_seconds
        self._max_attempts = max_attempts
        self._sleep = sleep

    def wait_for_completion(self, transcript_id: str) -> RawTranscript:
        """
        Polls the job until it is completed or has failed.

        Polling is unbounded unless ``max_attempts`` was given.

        Args:
            transcript_id: Identifier returned when the job was submitted.

        Returns:
            The full transcript payload of the completed job.

        Raises:
            TranscriptionFailed: If the provider reports an error status.
            TranscriptionTimeout: If ``max_attempts`` polls pass without
                a terminal status.
            TranscriptRetrievalError: If a status query fails.
        """
        attempts = 0
        while True:
            transcript = self._transcription_service.get_transcript(transcript_id)
            attempts += 1

            if transcript.status == aai.TranscriptStatus.completed:
                logger.info(
                    "Transcription completed",
                    extra={"transcript_id": transcript_id, "attempts": attempts},
                )
                return transcript

            if transcript.status == aai.TranscriptStatus.error:
                logger.error(
                    "Transcription job failed",
                    extra={"transcript_id": transcript_id, "error": transcript.error},
                )
                raise TranscriptionFailed(transcript_id, transcript.error)

            if self._max_attempts is not None and attempts >= self._max_attempts:
                raise TranscriptionTimeout(transcript_id, attempts)

            logger.info(
                "Transcription pending",
                extra={
                    "transcript_id": transcript_id,
                    "status": transcript.status.value,
                    "attempt": attempts,
                },
            )
            self._sleep(self._interval_seconds)
