"""Abstract interface for transcription provider operations."""

from abc import ABC, abstractmethod
from pathlib import Path

from domain.models import RawTranscript


class TranscriptionService(ABC):
    """Abstract base class for asynchronous transcription backends."""

    @abstractmethod
    def upload(self, file_path: Path) -> str:
        """
        Uploads a local audio file to the provider.

        Args:
            file_path: Path of the audio file to send.

        Returns:
            The provider-assigned URL of the uploaded audio.

        Raises:
            UploadFailed: If the upload fails.
        """
        pass

    @abstractmethod
    def request_transcription(self, audio_url: str) -> str:
        """
        Submits a transcription job for previously uploaded audio.

        Returns:
            The transcript job identifier.

        Raises:
            SubmissionFailed: If the job cannot be created.
        """
        pass

    @abstractmethod
    def get_transcript(self, transcript_id: str) -> RawTranscript:
        """
        Fetches the current state of a transcription job.

        Raises:
            TranscriptRetrievalError: If the job state cannot be fetched.
        """
        pass
