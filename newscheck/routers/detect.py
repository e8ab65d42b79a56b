# newscheck/routers/detect.py
"""
Detection router.
POST /api/detect accepts {text?, headline?, url?} and answers with
{verdict, confidence, reasons, color, bgColor, borderColor, source, source_domain}.
Failures are raised as DetectionError kinds and rendered by the handler
registered in main.py.
"""

import logging

from fastapi import APIRouter

from newscheck.errors import DetectionError, InternalError
from newscheck.models.schema import DetectRequest, DetectResponse
from newscheck.services.pipeline import detect as run_detection

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/detect", response_model=DetectResponse)
def detect(req: DetectRequest):
    try:
        return run_detection(req)
    except DetectionError:
        raise
    except Exception as e:
        logger.exception("detect failed: %s", str(e)[:200])
        raise InternalError() from e
