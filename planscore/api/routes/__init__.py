"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from planscore.api.routes.validation_routes import router as validation_router

# Main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(validation_router)
