"""
Form submission parsing shared by the console routers

Screens submit either a JSON body or an HTML form, multipart when it
carries files.
"""
import logging
from typing import Any, Dict, List, Tuple

from fastapi import HTTPException, Request
from starlette.datastructures import UploadFile

from app.domain.uploads import Upload

logger = logging.getLogger(__name__)


FORM_CONTENT_TYPES = ("multipart/form-data", "application/x-www-form-urlencoded")


def is_form(request: Request) -> bool:
    return request.headers.get("content-type", "").startswith(FORM_CONTENT_TYPES)


async def read_submission(request: Request) -> Tuple[Dict[str, Any], List[Upload]]:
    """
    Split a submitted form into field values and uploaded files

    Returns:
        (payload, uploads); uploads is empty for JSON bodies
    """
    if not is_form(request):
        try:
            body = await request.json()
        except ValueError:
            raise HTTPException(status_code=400, detail="Request body must be JSON")
        if not isinstance(body, dict):
            raise HTTPException(status_code=400, detail="Request body must be a JSON object")
        return body, []

    form = await request.form()
    payload: Dict[str, Any] = {}
    uploads: List[Upload] = []

    for key, value in form.multi_items():
        if isinstance(value, UploadFile):
            # browsers send an empty part for untouched file inputs
            if not value.filename:
                continue
            uploads.append(Upload(
                field=key,
                filename=value.filename,
                content=await value.read(),
                content_type=value.content_type or "application/octet-stream",
            ))
        else:
            payload[key] = value

    logger.debug(f"Form submission: {len(payload)} fields, {len(uploads)} files")
    return payload, uploads
