"""
Chat API Router

Rule-based assistant; replies carry the language tag for speech output
"""

from fastapi import APIRouter, Depends

from johar.config import settings
from johar.models.schemas import ChatRequest, ChatResponse
from johar.services import Services, get_services

router = APIRouter(prefix="/chat", tags=["chat"])


@router.post("", response_model=ChatResponse)
async def chat(request: ChatRequest, services: Services = Depends(get_services)):
    """User sends message, bot responds with a canned reply"""
    match = services.classifier.match(request.message)

    services.analytics.record({"visits": 1})

    return ChatResponse(
        message=match.response,
        intent=match.intent,
        lang=request.lang or settings.DEFAULT_SPEECH_LANG,
        site_id=match.site_id,
    )
