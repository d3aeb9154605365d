"""Custom exceptions for the speech analytics service."""


class NoFileProvided(Exception):
    """Raised when the upload request carries no audio file."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"No file provided in form field '{field_name}'")


class UploadFailed(Exception):
    """Raised when uploading audio to the transcription provider fails."""

    def __init__(self, file_path: str, cause: Exception | None = None):
        self.file_path = file_path
        self.cause = cause
        super().__init__(f"Failed to upload '{file_path}' to the transcription provider")


class SubmissionFailed(Exception):
    """Raised when the transcription request is rejected or cannot be sent."""

    def __init__(self, audio_url: str, cause: Exception | None = None):
        self.audio_url = audio_url
        self.cause = cause
        super().__init__(f"Failed to submit transcription for '{audio_url}'")


class TranscriptRetrievalError(Exception):
    """Raised when fetching a transcript's current state fails."""

    def __init__(self, transcript_id: str, cause: Exception | None = None):
        self.transcript_id = transcript_id
        self.cause = cause
        super().__init__(f"Failed to fetch transcript '{transcript_id}'")


class TranscriptionFailed(Exception):
    """Raised when the provider reports the transcription job as failed."""

    def __init__(self, transcript_id: str, provider_message: str | None):
        self.transcript_id = transcript_id
        self.provider_message = provider_message
        super().__init__(f"Transcription failed: {provider_message}")


class TranscriptionTimeout(Exception):
    """Raised when a polling cap is configured and the job is still running."""

    def __init__(self, transcript_id: str, attempts: int):
        self.transcript_id = transcript_id
        self.attempts = attempts
        super().__init__(
            f"Transcript '{transcript_id}' not completed after {attempts} polls"
        )
