"""
Onboarding service - starter templates for new accounts.
"""
import logging
from typing import Dict, List

from sqlmodel import Session, select

from app.models.models import OnboardingTemplate, Topic, UserProfile

logger = logging.getLogger(__name__)

# (emoji, title) of the root topics each template seeds, numbered 1..n
TEMPLATE_TOPICS: Dict[OnboardingTemplate, List[tuple]] = {
    OnboardingTemplate.SFN_LEADER: [
        ("🎯", "Leadership"),
        ("🏠", "Family"),
        ("✝️", "Faith"),
        ("💼", "Business"),
    ],
    OnboardingTemplate.PASTOR: [
        ("✝️", "Biblical Theology"),
        ("📖", "Expository Texts"),
        ("🤝", "Pastoral Care"),
        ("⛪", "Church Leadership"),
    ],
}


def get_profile(session: Session, user_id: int) -> UserProfile:
    """Get the user's profile row, creating an unsaved default when missing."""
    profile = session.get(UserProfile, user_id)
    if profile is None:
        profile = UserProfile(user_id=user_id)
    return profile


def complete_onboarding(
    session: Session,
    user_id: int,
    template: OnboardingTemplate
) -> UserProfile:
    """
    Seed the template's root topics and mark onboarding complete.

    Topics are only seeded for users who have no topics yet, so repeating
    onboarding never duplicates them.

    Returns:
        The saved profile
    """
    template = OnboardingTemplate(template)
    has_topics = session.exec(select(Topic.id).where(Topic.user_id == user_id)).first() is not None

    seeded = 0
    if not has_topics:
        for index, (emoji, title) in enumerate(TEMPLATE_TOPICS[template], start=1):
            session.add(Topic(
                user_id=user_id,
                number=str(index),
                title=title,
                emoji=emoji,
                level=0,
                parent_id=None,
                related_topic_ids=[],
            ))
            seeded += 1

    profile = get_profile(session, user_id)
    profile.onboarding_complete = True
    profile.template = template.value
    session.add(profile)
    session.commit()
    session.refresh(profile)

    logger.info(f"Completed onboarding for user {user_id} with template {template.value}: {seeded} topics seeded")
    return profile
