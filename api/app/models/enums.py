"""
Model enums.
"""
from enum import Enum


class Category(str, Enum):
    """Coarse bucket a card lives in (kanban column)."""
    UNPROCESSED = "Unprocessed"
    STUDIES = "Studies"
    RULES = "Rules"
    ARTICLES = "Articles"
    COURSES = "Courses"
    LITERATURE_I_LOVE = "Literature I Love"


class CardStatus(str, Enum):
    """Processing status of a card, derived from its category."""
    UNPROCESSED = "Unprocessed"
    PROCESSED = "Processed"


class SourceType(str, Enum):
    """Where the idea on a card came from."""
    NOTE = "Note"
    BOOK = "Book"
    ARTICLE = "Article"
    PODCAST = "Podcast"
    YOUTUBE = "YouTube"
    URL = "URL"
    COURSE = "Course"
    OTHER = "Other"


class ImportState(str, Enum):
    """States of an import triage session."""
    UPLOAD = "upload"
    TRIAGE = "triage"
    COMPLETE = "complete"


class ViewMode(str, Enum):
    """How the card collection is displayed."""
    LIST = "list"
    KANBAN = "kanban"


class OnboardingTemplate(str, Enum):
    """Starter templates offered during onboarding."""
    SFN_LEADER = "sfn-leader"
    PASTOR = "pastor"
