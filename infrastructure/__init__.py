"""Infrastructure layer exports."""

from .assemblyai_transcriber import AssemblyAITranscriber

__all__ = ["AssemblyAITranscriber"]
