"""
Itinerary API Router

Rule-based day-by-day plans and their PDF export
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from johar.models.schemas import ItineraryRequest, ItineraryResponse
from johar.planner import normalize_interests
from johar.services import Services, get_services
from johar.utils.pdf_generator import generate_itinerary_pdf

router = APIRouter(prefix="/itinerary", tags=["itinerary"])
logger = logging.getLogger(__name__)


@router.post("", response_model=ItineraryResponse)
async def plan_itinerary(request: ItineraryRequest, services: Services = Depends(get_services)):
    """Generate a day-by-day itinerary for the selected interests"""
    interests = normalize_interests(request.interests)
    itinerary = services.planner.plan(request.days, interests)

    services.analytics.record({"visits": request.days})

    return ItineraryResponse(days=request.days, interests=interests, itinerary=itinerary)


@router.post("/pdf")
async def itinerary_pdf(request: ItineraryRequest, services: Services = Depends(get_services)):
    """
    Generate the itinerary and return it as a PDF

    Returns:
        PDF file (application/pdf)
    """
    interests = normalize_interests(request.interests)
    itinerary = services.planner.plan(request.days, interests)

    logger.info(f"Rendering PDF for {request.days}-day itinerary")
    content = generate_itinerary_pdf(itinerary, interests)

    return Response(
        content=content,
        media_type="application/pdf",
        headers={"Content-Disposition": 'attachment; filename="Johar_Itinerary.pdf"'},
    )
