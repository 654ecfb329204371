"""
Interview practice proxy routes.

POST /transcribe  multipart audio  -> transcription API -> {text}
POST /feedback    JSON answer      -> completion API    -> raw completion JSON

No retries. Every upstream call is attempted exactly once per request.
Diagnostic detail is logged server-side whatever the client receives.
"""

import logging
from typing import Optional
from uuid import uuid4

from fastapi import APIRouter, Body, Depends, File, Request, UploadFile, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from feedback import FeedbackMode, FeedbackRequest, ValidationError
from inference import GatewayError
from infra import InfraBootstrap
from services.audio import scoped_upload
from services.stt import STTRequest

from .schemas import FeedbackPayload

logger = logging.getLogger(__name__)

router = APIRouter(tags=["interview-practice"])


def get_infra(request: Request) -> InfraBootstrap:
    """Backends created at startup, attached to the app."""
    return request.app.state.infra


def _error(status_code: int, error: str, **extra) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": error, **extra})


def _describe_errors(exc: RequestValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', 'invalid')}"
        for err in exc.errors()
    )


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Report malformed input as 400 {error, details} instead of FastAPI's 422.

    The only parameter /transcribe validates is the audio upload, so any
    failure there means no usable file was sent.
    """
    details = _describe_errors(exc)
    logger.info(f"Rejected malformed request to {request.url.path}: {details}")
    if request.url.path == "/transcribe":
        return _error(status.HTTP_400_BAD_REQUEST, "No audio file provided")
    return _error(status.HTTP_400_BAD_REQUEST, "Invalid request body", details=details)


@router.post("/transcribe")
async def transcribe(
    audio: Optional[UploadFile] = File(None),
    infra: InfraBootstrap = Depends(get_infra),
):
    """
    Transcribe one uploaded audio file.

    Transcription failures degrade to a placeholder text with 200; only an
    internal failure (e.g. the temp file cannot be written) returns 500.
    The temp file is deleted before the response is sent.
    """
    logger.info("Transcribe request received")
    if audio is None:
        logger.info("No file received")
        return _error(status.HTTP_400_BAD_REQUEST, "No audio file provided")

    trace_id = str(uuid4())
    try:
        async with scoped_upload(audio) as audio_path:
            result = await infra.get_stt_backend().transcribe(
                STTRequest(
                    audio_path=audio_path,
                    filename=audio.filename,
                    content_type=audio.content_type,
                    trace_id=trace_id,
                )
            )
    except Exception as e:
        logger.error(f"Transcription error: {e}", exc_info=True, extra={"trace_id": trace_id})
        return _error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Failed to transcribe audio",
            details=str(e),
        )

    if result.status != "success":
        logger.warning(
            f"Transcription degraded to fallback text ({result.error_type})",
            extra={"trace_id": trace_id},
        )
    return {"text": result.text}


@router.post("/feedback")
async def feedback(
    payload: Optional[FeedbackPayload] = Body(None),
    infra: InfraBootstrap = Depends(get_infra),
):
    """
    Generate structured interview feedback for a transcribed answer.

    Returns the completion API response unchanged. Without an API key the
    stub backend answers with a simulated payload after validation.
    """
    logger.info("Feedback request received")
    if payload is None or not payload.transcription:
        logger.info("No transcription provided")
        return _error(status.HTTP_400_BAD_REQUEST, "No transcription provided")

    trace_id = str(uuid4())
    request = FeedbackRequest(
        question=payload.question or "",
        transcript=payload.transcription,
        mode=FeedbackMode.from_request(payload.feedbackType),
    )

    try:
        return await infra.get_feedback_service().generate(request, trace_id=trace_id)

    except ValidationError as e:
        logger.info(f"Transcription too short or not diverse enough: {e}", extra={"trace_id": trace_id})
        return _error(
            status.HTTP_400_BAD_REQUEST,
            str(e),
            word_count=e.word_count,
            unique_word_count=e.unique_word_count,
        )

    except GatewayError as e:
        logger.error(
            f"Feedback error: {e.message}",
            extra={"trace_id": trace_id, "kind": e.kind.value, "http_status": e.http_status},
        )
        return JSONResponse(status_code=e.http_status, content=e.to_body())

    except Exception as e:
        logger.error(f"Feedback error: {e}", exc_info=True, extra={"trace_id": trace_id})
        return _error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Failed to generate feedback",
            details=str(e),
        )
