"""
SAP Materials API Endpoints

Author: Customer Connect Team
Date: 2025-11-06
"""
from typing import Optional

from fastapi import APIRouter, Body, Depends, Query

from app.connectors.api_service import ApiService
from app.core.auth import SessionUser, require_admin
from app.dependencies import get_api_service
from app.services.screens import sap_material_screen

router = APIRouter(prefix="/sap-materials", tags=["SAP Materials"])


@router.get("/")
async def get_sap_materials(
    page: int = Query(1, ge=1),
    search: Optional[str] = Query(None, description="Search by material number or description"),
    limit: Optional[int] = Query(None, ge=1, le=100),
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    result = await sap_material_screen(api).list_page(page, search, None, limit)
    return {"status": "success", **result}


@router.get("/{material_id}")
async def get_sap_material(
    material_id: str,
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    return {"status": "success", "data": await sap_material_screen(api).view(material_id)}


@router.post("/")
async def create_sap_material(
    body: dict = Body(...),
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    data = await sap_material_screen(api).create(body)
    return {"status": "success", "message": "SAP material created successfully", "data": data}


@router.put("/{material_id}")
async def update_sap_material(
    material_id: str,
    body: dict = Body(...),
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    data = await sap_material_screen(api).update(material_id, body)
    return {"status": "success", "message": "SAP material updated successfully", "data": data}


@router.delete("/{material_id}")
async def delete_sap_material(
    material_id: str,
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    await sap_material_screen(api).delete(material_id)
    return {"status": "success", "message": "SAP material deleted successfully"}
