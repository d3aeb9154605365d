"""Handler for turning an uploaded recording into speaking analytics."""

from pathlib import Path

from fastapi import UploadFile
from speech_common import setup_logging

from domain import AnalyticsFormatter, AnalyticsResult
from infrastructure.interfaces import TranscriptionService

from .completion_poller import CompletionPoller
from .upload_receiver import receive_upload

logger = setup_logging()


class AudioAnalysisHandler:
    """Orchestrates upload, transcription, polling and formatting."""

    def __init__(
        self,
        transcription_service: TranscriptionService,
        poller: CompletionPoller,
        formatter: AnalyticsFormatter,
        upload_dir: str | Path,
    ):
        self._transcription_service = transcription_service
        self._poller = poller
        self._formatter = formatter
        self._upload_dir = upload_dir

    def process(self, upload: UploadFile | None) -> AnalyticsResult:
        """
        Transcribes the uploaded audio and derives analytics from it.

        Args:
            upload: The multipart ``audio`` file, or None if absent.

        Returns:
            AnalyticsResult for the recording.

        Raises:
            NoFileProvided: If no audio file was sent.
            UploadFailed: If sending the audio to the provider fails.
            SubmissionFailed: If the transcription job cannot be created.
            TranscriptionFailed: If the provider reports the job as failed.
            TranscriptionTimeout: If a polling cap is configured and reached.
            TranscriptRetrievalError: If polling the job fails.
        """
        with receive_upload(upload, self._upload_dir) as uploaded:
            audio_url = self._transcription_service.upload(uploaded.path)
            transcript_id = self._transcription_service.request_transcription(
                audio_url
            )
            transcript = self._poller.wait_for_completion(transcript_id)

        result = self._formatter.build(transcript)

        logger.info(
            "Audio analyzed",
            extra={
                "file_name": uploaded.original_name,
                "transcript_id": transcript_id,
                "total_words": result.total_words,
                "speaker_count": result.speaker_count,
            },
        )

        return result
