"""Request handling exports."""

from .audio_analysis_handler import AudioAnalysisHandler
from .completion_poller import CompletionPoller
from .upload_receiver import receive_upload

__all__ = ["AudioAnalysisHandler", "CompletionPoller", "receive_upload"]
