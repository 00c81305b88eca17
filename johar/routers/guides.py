"""
Guide Registry API Router
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException

from johar.models.schemas import (
    BulkResult, Certificate, Guide, GuideCreate, GuideRegistered
)
from johar.services import Services, get_services

router = APIRouter(prefix="/guides", tags=["guides"])


@router.get("", response_model=List[Guide])
async def list_guides(services: Services = Depends(get_services)):
    return services.guides.list_guides()


@router.post("", response_model=GuideRegistered, status_code=201)
async def register_guide(request: GuideCreate, services: Services = Depends(get_services)):
    reg_id = services.guides.register(request.name, request.location)
    return GuideRegistered(reg_id=reg_id)


@router.post("/verify-all", response_model=BulkResult)
async def verify_all(services: Services = Depends(get_services)):
    """Verify every unverified guide (admin)"""
    changed = services.guides.verify_all()
    return BulkResult(changed=changed, guides=services.guides.list_guides())


@router.post("/certificates", response_model=BulkResult)
async def issue_certificates(services: Services = Depends(get_services)):
    """Issue certificates to every guide that has none (admin)"""
    changed = services.guides.issue_certificates_for_all()
    return BulkResult(changed=changed, guides=services.guides.list_guides())


@router.get("/{reg_id}", response_model=Guide)
async def get_guide(reg_id: str, services: Services = Depends(get_services)):
    guide = services.guides.get_guide(reg_id)
    if not guide:
        raise HTTPException(status_code=404, detail="Guide not found")
    return guide


@router.post("/{reg_id}/toggle", response_model=Guide)
async def toggle_verify(reg_id: str, services: Services = Depends(get_services)):
    """Verify or revoke a single guide (admin)"""
    guide = services.guides.toggle_verify(reg_id)
    if not guide:
        raise HTTPException(status_code=404, detail="Guide not found")
    return guide


@router.get("/{reg_id}/certificate", response_model=Certificate)
async def view_certificate(reg_id: str, services: Services = Depends(get_services)):
    if services.guides.get_guide(reg_id) is None:
        raise HTTPException(status_code=404, detail="Guide not found")
    certificate = services.guides.get_certificate(reg_id)
    if not certificate:
        raise HTTPException(status_code=404, detail="No certificate issued")
    return certificate
