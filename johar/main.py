"""
Johar Jharkhand - Main FastAPI Application
Itinerary planner, chat assistant, guide registry, marketplace and analytics
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from johar.config import settings

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Johar Jharkhand API",
    description="Rule-based tourism assistant: itineraries, chat, guide registry and marketplace",
    version="1.0.0",
    debug=settings.DEBUG
)

# CORS middleware for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
async def startup_event():
    """Initialize database and first-start defaults"""
    from johar.database import init_db
    from johar.services import get_services
    init_db()
    get_services().bootstrap()
    logger.info("✅ Johar Jharkhand API started successfully!")


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "Johar Jharkhand API",
        "version": "1.0.0",
        "status": "running",
        "features": {
            "itinerary": "enabled",
            "chat": "enabled",
            "guide_registry": "enabled",
            "marketplace": "enabled",
        }
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "database": "sqlite" if settings.is_sqlite else "external",
    }


# Import routers
from johar.routers import chat, guides, insights, itinerary, market
app.include_router(itinerary.router, prefix="/api")
app.include_router(chat.router, prefix="/api")
app.include_router(guides.router, prefix="/api")
app.include_router(market.router, prefix="/api")
app.include_router(insights.router, prefix="/api")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "johar.main:app",
        host="0.0.0.0",
        port=settings.BACKEND_PORT,
        reload=settings.DEBUG
    )
