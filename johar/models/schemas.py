"""
Pydantic schemas for the Johar backend
Reference data, itinerary output, marketplace, guide registry and analytics
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional
from datetime import datetime
from enum import Enum


# ============================================================================
# REFERENCE DATA
# ============================================================================

class SiteCategory(str, Enum):
    """Kinds of tourist sites"""
    VIEWPOINT = "viewpoint"
    WATERFALL = "waterfall"
    WILDLIFE = "wildlife"
    PILGRIMAGE = "pilgrimage"
    HERITAGE = "heritage"


class Site(BaseModel):
    """Static tourist site, loaded once at startup"""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    latitude: float
    longitude: float
    category: SiteCategory
    description: str


# ============================================================================
# ITINERARY MODELS
# ============================================================================

class Activity(BaseModel):
    """Single time slot in a day plan"""
    time: str = Field(..., description="HH:MM slot, e.g. '08:00'")
    activity: str
    tip: str


class DayPlan(BaseModel):
    """Activities for one day of the trip"""
    day: int = Field(..., ge=1)
    activities: List[Activity] = Field(..., min_length=1)


class ItineraryRequest(BaseModel):
    """Itinerary form submission"""
    days: int = Field(default=3, ge=1, le=30)
    interests: List[str] = Field(default_factory=list, description="e.g., ['waterfalls', 'culture']")


class ItineraryResponse(BaseModel):
    """Generated itinerary"""
    days: int
    interests: List[str]
    itinerary: List[DayPlan]


# ============================================================================
# CHAT MODELS
# ============================================================================

class ChatRequest(BaseModel):
    """Chat message from user"""
    message: str = ""
    lang: Optional[str] = None


class ChatResponse(BaseModel):
    """Bot reply plus the language tag for speech output"""
    message: str
    intent: str
    lang: str
    site_id: Optional[str] = None


# ============================================================================
# MARKETPLACE MODELS
# ============================================================================

class MarketItem(BaseModel):
    """Listing created by a seller, never mutated"""
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    price: float = Field(..., ge=0)
    seller: str


class MarketItemCreate(BaseModel):
    """New listing form"""
    title: str = Field(..., min_length=1, max_length=200)
    price: float = Field(..., ge=0, description="Price in INR")
    seller: str = Field(..., min_length=1, max_length=200)

    @field_validator("title", "seller")
    @classmethod
    def not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v


class Transaction(BaseModel):
    """Append-only purchase log entry"""
    model_config = ConfigDict(frozen=True)

    tx_id: str
    item_id: str
    timestamp: datetime


# ============================================================================
# GUIDE REGISTRY MODELS
# ============================================================================

class Certificate(BaseModel):
    """Proof of verification, issued at most once per guide"""
    model_config = ConfigDict(frozen=True)

    cert_id: str
    issued_at: datetime
    proof_token: str


class Guide(BaseModel):
    """Registered local guide"""
    model_config = ConfigDict(frozen=True)

    reg_id: str
    name: str
    location: str = ""
    verified: bool = False
    certificate: Optional[Certificate] = None


class GuideCreate(BaseModel):
    """Guide registration form"""
    name: str = Field(..., min_length=1, max_length=200)
    location: str = Field(default="", max_length=200)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v


class GuideRegistered(BaseModel):
    reg_id: str


class BulkResult(BaseModel):
    """Outcome of a registry-wide operation"""
    changed: int
    guides: List[Guide]


# ============================================================================
# FEEDBACK MODELS
# ============================================================================

class Sentiment(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


class FeedbackCreate(BaseModel):
    text: str = Field(..., max_length=2000)

    @field_validator("text")
    @classmethod
    def text_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("feedback must not be blank")
        return v


class SentimentResult(BaseModel):
    sentiment: Sentiment
    score: int


# ============================================================================
# ANALYTICS MODELS
# ============================================================================

class AnalyticsState(BaseModel):
    """Process-wide aggregate; unknown fields recorded by events are kept"""
    model_config = ConfigDict(extra="allow")

    visits: int = 0
    transactions: int = 0
    verifiedGuides: int = 0
    monthLabels: List[str] = Field(default_factory=lambda: ["Jan", "Feb", "Mar", "Apr", "May", "Jun"])
    monthVisits: List[int] = Field(default_factory=lambda: [10, 20, 30, 45, 60, 80])
    market: List[int] = Field(default_factory=lambda: [50, 30, 20, 10])
