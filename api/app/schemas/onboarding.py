"""
Onboarding and preference schemas.
"""
from pydantic import BaseModel
from typing import Optional
from app.models.enums import OnboardingTemplate, ViewMode


class OnboardingStatusResponse(BaseModel):
    """Whether the user has finished onboarding, and with which template."""
    onboarding_complete: bool
    template: Optional[OnboardingTemplate] = None


class CompleteOnboardingRequest(BaseModel):
    """Request schema for finishing onboarding."""
    template: OnboardingTemplate


class PreferencesResponse(BaseModel):
    """Display preferences."""
    view_mode: ViewMode


class UpdatePreferencesRequest(BaseModel):
    """Request schema for saving display preferences."""
    view_mode: ViewMode
