"""
Speech Analytics Service.

FastAPI application entry point.
"""

from contextlib import asynccontextmanager

import anyio.to_thread
import uvicorn
from ddtrace import patch_all
from fastapi import FastAPI

from dependencies import get_config
from routes import upload_router

patch_all()


def apply_worker_thread_limit(worker_threads: int) -> None:
    """Sizes the threadpool that runs the blocking upload route."""
    limiter = anyio.to_thread.current_default_thread_limiter()
    limiter.total_tokens = worker_threads


@asynccontextmanager
async def lifespan(app: FastAPI):
    apply_worker_thread_limit(get_config().server.worker_threads)
    yield


app = FastAPI(title="Speech Analytics Service", lifespan=lifespan)
app.include_router(upload_router)


def main():
    """Starts the HTTP server on the configured port."""
    config = get_config()
    uvicorn.run(app, host=config.server.host, port=config.server.port)


if __name__ == "__main__":
    main()
