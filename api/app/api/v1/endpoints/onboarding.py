"""
Onboarding and preference endpoints.
"""
from fastapi import APIRouter, Depends
from sqlmodel import Session
from app.api.deps import get_current_user, get_preferences_store
from app.core.database import get_session
from app.models.models import User
from app.schemas.onboarding import (
    OnboardingStatusResponse,
    CompleteOnboardingRequest,
    PreferencesResponse,
    UpdatePreferencesRequest
)
from app.services.onboarding_service import get_profile, complete_onboarding
from app.services.preferences_service import Preferences, PreferencesStore

router = APIRouter(tags=["onboarding"])


@router.get("/onboarding", response_model=OnboardingStatusResponse)
async def get_onboarding_status(
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session)
):
    """Whether the signed-in user has completed onboarding."""
    profile = get_profile(session, user.id)
    return OnboardingStatusResponse(
        onboarding_complete=profile.onboarding_complete,
        template=profile.template
    )


@router.post("/onboarding", response_model=OnboardingStatusResponse)
async def finish_onboarding(
    request: CompleteOnboardingRequest,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session)
):
    """Apply a starter template and mark onboarding complete."""
    profile = complete_onboarding(session, user.id, request.template)
    return OnboardingStatusResponse(
        onboarding_complete=profile.onboarding_complete,
        template=profile.template
    )


@router.get("/preferences", response_model=PreferencesResponse)
async def get_preferences(
    user: User = Depends(get_current_user),
    store: PreferencesStore = Depends(get_preferences_store)
):
    """Get the signed-in user's display preferences."""
    preferences = store.load(user.id)
    return PreferencesResponse(view_mode=preferences.view_mode)


@router.put("/preferences", response_model=PreferencesResponse)
async def update_preferences(
    request: UpdatePreferencesRequest,
    user: User = Depends(get_current_user),
    store: PreferencesStore = Depends(get_preferences_store)
):
    """Save the signed-in user's display preferences."""
    preferences = store.save(user.id, Preferences(view_mode=request.view_mode))
    return PreferencesResponse(view_mode=preferences.view_mode)
