import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from resume_ingest.config import get_settings
from resume_ingest.errors import (
    ExtractionError,
    MalformedInputError,
    NoReadableTextError,
    UnsupportedFormatError,
)
from resume_ingest.routers import resume

logging.basicConfig(
    level=get_settings().log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

ERROR_STATUS_CODES = {
    UnsupportedFormatError: 415,
    NoReadableTextError: 422,
    MalformedInputError: 422,
}

app = FastAPI(
    title="Resume Ingest API",
    description="Extracts text from uploaded resumes and structures it into resume fields.",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(resume.router, prefix="/api/v1", tags=["Resume Parsing"])


@app.exception_handler(ExtractionError)
async def extraction_error_handler(request: Request, exc: ExtractionError):
    status_code = ERROR_STATUS_CODES.get(type(exc), 422)
    logger.warning("Extraction failed for %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.user_message, "error": exc.code},
    )


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception("Unexpected error while handling %s", request.url.path)
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An error occurred while parsing the resume.",
            "error": "internal_error",
        },
    )


@app.get("/")
async def root():
    return {"message": "Resume Ingest API is running. Use endpoints under /api/v1/"}


# Local development runner
if __name__ == "__main__":
    import uvicorn

    uvicorn.run("resume_ingest.main:app", host="127.0.0.1", port=8000, reload=True)
