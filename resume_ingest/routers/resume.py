import logging

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from fastapi.concurrency import run_in_threadpool

from resume_ingest.config import Settings
from resume_ingest.dependencies import get_app_settings
from resume_ingest.models import RawDocument, ResumeRecord, ResumeTextRequest
from resume_ingest.parsers import parse_resume_document, parse_resume_text

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/parse-resume/", response_model=ResumeRecord)
async def parse_resume_endpoint(
    file: UploadFile = File(...),
    settings: Settings = Depends(get_app_settings),
):
    """
    Upload a resume (PDF, DOCX or TXT) and get the parsed structured data.
    """
    content = await file.read()
    logger.info("Received %s (%s, %d bytes)", file.filename, file.content_type, len(content))
    if len(content) > settings.max_upload_bytes:
        raise HTTPException(
            status_code=413,
            detail=f"File exceeds the {settings.max_upload_bytes} byte upload limit.",
        )

    raw = RawDocument(
        content=content,
        declared_media_type=file.content_type,
        filename=file.filename,
    )
    # Extraction is CPU-bound; keep it off the event loop.
    return await run_in_threadpool(parse_resume_document, raw, settings)


@router.post("/parse-resume/text", response_model=ResumeRecord)
async def reparse_resume_text_endpoint(
    request: ResumeTextRequest,
    settings: Settings = Depends(get_app_settings),
):
    """
    Re-run segmentation on resume text the user has reviewed or edited.
    """
    return await run_in_threadpool(parse_resume_text, request.text, settings)
