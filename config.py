"""Application configuration loaded from environment variables."""

import os

from pydantic import BaseModel


class AssemblyAIConfig(BaseModel, frozen=True):
    """AssemblyAI API configuration."""

    api_key: str
    base_url: str = "https://api.assemblyai.com"
    http_timeout_seconds: float = 120.0
    disfluencies: bool = True
    punctuate: bool = True
    speaker_labels: bool = True


class PollingConfig(BaseModel, frozen=True):
    """Transcript completion polling configuration."""

    interval_seconds: float = 3.0
    # None keeps polling until the provider reports a terminal status.
    max_attempts: int | None = None


class ServerConfig(BaseModel, frozen=True):
    """HTTP server and upload storage configuration."""

    host: str = "0.0.0.0"
    port: int = 3000
    upload_dir: str = "uploads"
    # Each pending upload holds one worker thread while it polls.
    worker_threads: int = 100


class LoggingConfig(BaseModel, frozen=True):
    """Log output configuration."""

    level: str = "INFO"


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    assemblyai: AssemblyAIConfig
    polling: PollingConfig
    server: ServerConfig
    logging: LoggingConfig


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    max_attempts = os.getenv("POLL_MAX_ATTEMPTS")
    return AppConfig(
        assemblyai=AssemblyAIConfig(
            api_key=os.getenv("ASSEMBLYAI_API_KEY", ""),
            base_url=os.getenv("ASSEMBLYAI_BASE_URL", "https://api.assemblyai.com"),
            http_timeout_seconds=float(os.getenv("ASSEMBLYAI_HTTP_TIMEOUT", "120")),
        ),
        polling=PollingConfig(
            interval_seconds=float(os.getenv("POLL_INTERVAL_SECONDS", "3.0")),
            max_attempts=int(max_attempts) if max_attempts else None,
        ),
        server=ServerConfig(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "3000")),
            upload_dir=os.getenv("UPLOAD_DIR", "uploads"),
            worker_threads=int(os.getenv("WORKER_THREADS", "100")),
        ),
        logging=LoggingConfig(level=os.getenv("LOG_LEVEL", "INFO").upper()),
    )
