"""
Business Plan Scoring Engine - Main Application

FastAPI wrapper around the scoring engine, used by the plan builder forms:
- Validate and score a full plan submission
- Validate single fields inline
- Readiness tier and next steps

Run: uvicorn planscore.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from planscore import __version__
from planscore.api.routes import api_router
from planscore.core.config import get_settings
from planscore.core.error_handlers import register_exception_handlers
from planscore.core.logging import configure_logging
from planscore.schemas.schemas import HealthResponse
from planscore.services.scoring_weights import load_scoring_weights

settings = get_settings()
configure_logging(settings.effective_log_level)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load scoring weights once so a broken weights file fails at startup."""
    weights = load_scoring_weights(settings.scoring_weights_file)
    logger.info(
        "Scoring engine ready (locale=%s, max field score=%d, weights file=%s)",
        settings.locale, weights.max_field_score, settings.scoring_weights_file or "defaults"
    )
    yield


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="""
    Validation and scoring of business plans against their templates.

    ## Features
    - **Field validation**: required checks, length/range limits, table fill ratio
    - **Scoring**: per-field heuristic quality score, per-section percentage and completeness
    - **Readiness**: excellent / good / fair / poor tier with next steps
    """,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include API routes
app.include_router(api_router, prefix="/api")


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """Liveness check."""
    return HealthResponse(status="healthy", app=settings.app_name, version=__version__)
