"""
Sites, Feedback and Analytics API Router
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from johar.models.schemas import FeedbackCreate, SentimentResult, Site
from johar.services import Services, get_services

router = APIRouter(tags=["insights"])


@router.get("/sites", response_model=List[Site])
async def list_sites(services: Services = Depends(get_services)):
    """Reference sites for map markers"""
    return services.seeds.load_sites()


@router.post("/feedback", response_model=SentimentResult)
async def send_feedback(request: FeedbackCreate, services: Services = Depends(get_services)):
    return services.feedback.submit(request.text)


@router.get("/feedback")
async def list_feedback(services: Services = Depends(get_services)) -> List[Dict[str, Any]]:
    """Stored feedback with sentiment, oldest first"""
    return services.feedback.list_feedback()


@router.get("/analytics")
async def get_analytics(services: Services = Depends(get_services)) -> Dict[str, Any]:
    return services.analytics.snapshot()
