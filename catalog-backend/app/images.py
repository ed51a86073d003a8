from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, File, HTTPException, Request, UploadFile

from app.auth import verify_admin_key
from app.schemas import UploadResponse
from catalog.images import ImageHost

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/images", tags=["images"])


def get_image_host(request: Request) -> ImageHost:
    return request.app.state.image_host


def _delete_or_fail(host: ImageHost, public_id: str) -> dict:
    try:
        ok = host.delete(public_id)
    except Exception as e:
        logger.error("image delete failed for %s: %s", public_id, e)
        raise HTTPException(status_code=500, detail="Failed to delete image")
    if not ok:
        raise HTTPException(status_code=500, detail="Failed to delete image")
    return {"success": True}


@router.post("", response_model=UploadResponse, status_code=201)
async def upload_image(
    file: UploadFile = File(...),
    host: ImageHost = Depends(get_image_host),
    _: bool = Depends(verify_admin_key),
):
    content = await file.read()
    if not content:
        raise HTTPException(status_code=400, detail="Uploaded file is empty")
    try:
        asset = host.upload(file.filename or "", content)
    except Exception as e:
        logger.error("image upload failed for %s: %s", file.filename, e)
        raise HTTPException(status_code=500, detail="Failed to upload image")
    logger.info("image uploaded: %s", asset["public_id"])
    return UploadResponse(**asset)


@router.delete("/{public_id:path}")
async def delete_image(
    public_id: str,
    host: ImageHost = Depends(get_image_host),
    _: bool = Depends(verify_admin_key),
):
    return _delete_or_fail(host, public_id)


@router.post("/{public_id:path}")
async def delete_image_beacon(
    public_id: str,
    request: Request,
    host: ImageHost = Depends(get_image_host),
    _: bool = Depends(verify_admin_key),
):
    """Delete via POST for clients that can only send beacons on page unload.

    Body: {"_method": "DELETE"}
    """
    try:
        payload = await request.json()
    except ValueError:
        payload = {}
    if isinstance(payload, dict) and payload.get("_method") == "DELETE":
        return _delete_or_fail(host, public_id)
    raise HTTPException(status_code=400, detail="Invalid request")
