"""Audio upload and analysis endpoint."""

from typing import Annotated, Callable

from fastapi import APIRouter, Depends, File, Request, Response, UploadFile
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute
from speech_common import setup_logging

from dependencies import get_handler
from domain import AnalyticsResult
from handlers import AudioAnalysisHandler
from response_models import ErrorResponse

logger = setup_logging()

PROCESSING_FAILED = "Failed to process audio"


def _processing_failed() -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(error=PROCESSING_FAILED).model_dump(),
    )


class GenericErrorRoute(APIRoute):
    """Reports malformed upload requests with the generic failure body."""

    def get_route_handler(self) -> Callable:
        original_route_handler = super().get_route_handler()

        async def route_handler(request: Request) -> Response:
            try:
                return await original_route_handler(request)
            except RequestValidationError as e:
                logger.error(
                    "Upload request rejected",
                    extra={"path": request.url.path, "errors": str(e.errors())},
                )
                return _processing_failed()

        return route_handler


router = APIRouter(tags=["audio"], route_class=GenericErrorRoute)

HandlerDep = Annotated[AudioAnalysisHandler, Depends(get_handler)]


@router.post(
    "/upload-audio",
    response_model=AnalyticsResult,
    responses={500: {"model": ErrorResponse}},
)
def upload_audio(handler: HandlerDep, audio: UploadFile | None = File(None)):
    """
    Transcribes an uploaded recording and returns speaking analytics.

    Every failure is reported with the same generic message; details only
    go to the server log.
    """
    logger.info(
        "Received audio upload",
        extra={"file_name": audio.filename if audio else None},
    )
    try:
        return handler.process(audio)
    except Exception:
        logger.exception(
            "Audio processing failed",
            extra={"file_name": audio.filename if audio else None},
        )
        return _processing_failed()
