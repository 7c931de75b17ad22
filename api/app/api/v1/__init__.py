"""
API v1 router aggregation.
"""
from fastapi import APIRouter
from app.api.v1.endpoints import auth, cards, topics, imports, onboarding

api_router = APIRouter()

# Include all endpoint routers
# Note: Each router already defines its own prefix, so we don't add another one here
api_router.include_router(auth.router)
api_router.include_router(cards.router)
api_router.include_router(topics.router)
api_router.include_router(imports.router)
api_router.include_router(onboarding.router)
