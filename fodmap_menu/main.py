"""Main FastAPI application."""

import asyncio
import logging
import sys
import time
from typing import List, Optional

from fastapi import Depends, FastAPI, File, HTTPException, Request, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from fodmap_menu.config import (
    ALLOW_ALL_ORIGINS,
    ALLOWED_CONTENT_TYPES,
    CORS_ORIGINS,
    MAX_UPLOAD_BYTES,
)
from fodmap_menu.errors import FailureKind, MenuAnalysisError
from fodmap_menu.schema import DishAssessment
from fodmap_menu.services import MenuAnalysisPipeline
from fodmap_menu.utils import to_data_url

# -----------------------------------
# App init
# -----------------------------------

app = FastAPI(title="FODMAP Menu Analyzer")

logging.basicConfig(
    level=logging.INFO,
    stream=sys.stdout,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)

logger = logging.getLogger(__name__)

# -----------------------------------
# CORS
# -----------------------------------

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=not ALLOW_ALL_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

_ERROR_STATUS = {
    FailureKind.TRANSPORT_FAILURE: 502,
    FailureKind.EMPTY_COMPLETION: 502,
    FailureKind.NO_JSON_FOUND: 422,
    FailureKind.MALFORMED_JSON: 422,
}


class AnalyzeMenuRequest(BaseModel):
    image_url: Optional[str] = Field(default=None, alias="imageUrl")


def get_pipeline() -> MenuAnalysisPipeline:
    return MenuAnalysisPipeline.from_env()


@app.exception_handler(MenuAnalysisError)
async def menu_analysis_error_handler(request: Request, exc: MenuAnalysisError):
    logger.warning("[PIPELINE] %s failed: %s (%s)", request.url.path, exc.message, exc.kind.value)
    return JSONResponse(
        status_code=_ERROR_STATUS[exc.kind],
        content={"error": exc.message, "kind": exc.kind.value, "details": exc.raw_text},
    )


async def _run_pipeline(pipeline: MenuAnalysisPipeline, image_url: str) -> List[DishAssessment]:
    total_start = time.time()
    dishes = await asyncio.to_thread(pipeline.analyze, image_url)
    logger.info(
        "[PIPELINE] completed successfully, %s dishes, total time: %sms",
        len(dishes),
        round((time.time() - total_start) * 1000, 2),
    )
    return dishes


# -----------------------------------
# Service endpoints
# -----------------------------------

@app.get("/health")
def health():
    return {"status": "ok"}


# -----------------------------------
# /analyze-menu
# -----------------------------------

@app.post("/analyze-menu", response_model=List[DishAssessment])
async def analyze_menu(
    body: AnalyzeMenuRequest,
    pipeline: MenuAnalysisPipeline = Depends(get_pipeline),
):
    if not body.image_url:
        return JSONResponse(status_code=400, content={"error": "imageUrl is required"})

    logger.info("[PIPELINE] Starting /analyze-menu")
    return await _run_pipeline(pipeline, body.image_url)


@app.post("/analyze-menu/upload", response_model=List[DishAssessment])
async def analyze_menu_upload(
    image: UploadFile = File(None),
    pipeline: MenuAnalysisPipeline = Depends(get_pipeline),
):
    if not image:
        raise HTTPException(422, "Image field is required")

    if image.content_type not in ALLOWED_CONTENT_TYPES:
        raise HTTPException(422, "Unsupported format (use jpeg/png/webp)")

    content = await image.read(MAX_UPLOAD_BYTES + 1)
    if not content:
        raise HTTPException(422, "Image file is empty")
    if len(content) > MAX_UPLOAD_BYTES:
        raise HTTPException(422, f"Image is larger than {MAX_UPLOAD_BYTES} bytes")

    logger.info(
        "[PIPELINE] Starting /analyze-menu/upload for file: %s (%.1fkb)",
        image.filename,
        len(content) / 1024,
    )
    return await _run_pipeline(pipeline, to_data_url(content, image.content_type))
