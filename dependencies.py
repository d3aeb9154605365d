"""Dependency injection configuration for the speech analytics service."""

import httpx
from speech_common import setup_logging

from config import AppConfig, load_config
from domain import AnalyticsFormatter
from handlers import AudioAnalysisHandler, CompletionPoller
from infrastructure import AssemblyAITranscriber

_config = load_config()

logger = setup_logging(_config.logging.level)

if not _config.assemblyai.api_key:
    logger.warning("ASSEMBLYAI_API_KEY is not set, provider calls will be rejected")

# AssemblyAI setup
_http_client = httpx.Client(
    base_url=_config.assemblyai.base_url,
    timeout=_config.assemblyai.http_timeout_seconds,
)
_transcription_service = AssemblyAITranscriber(_http_client, _config.assemblyai)

_poller = CompletionPoller(
    _transcription_service,
    interval_seconds=_config.polling.interval_seconds,
    max_attempts=_config.polling.max_attempts,
)


def get_config() -> AppConfig:
    """Returns the loaded application configuration."""
    return _config


def get_handler() -> AudioAnalysisHandler:
    """Returns the configured audio analysis handler."""
    return AudioAnalysisHandler(
        _transcription_service,
        _poller,
        AnalyticsFormatter(),
        _config.server.upload_dir,
    )
