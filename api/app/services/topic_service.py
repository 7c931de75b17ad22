"""
Topic service for business logic related to the topic tree.
"""
import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Union

from sqlalchemy import delete
from sqlalchemy.orm.attributes import flag_modified
from sqlmodel import Session, select

from app.models.models import Card, Topic
from app.services.card_service import validate_topic_ids, list_cards, CardFilters
from app.services.topic_numbering import next_topic_number
from app.services.topic_tree import TopicTree

logger = logging.getLogger(__name__)


@dataclass
class NewRootTopic:
    """Draft for a topic at the top of the tree."""
    title: str
    emoji: str = ""
    related_topic_ids: List[int] = field(default_factory=list)


@dataclass
class NewChildTopic:
    """Draft for a topic placed under an existing parent."""
    parent_id: int
    title: str
    emoji: str = ""
    related_topic_ids: List[int] = field(default_factory=list)


TopicDraft = Union[NewRootTopic, NewChildTopic]


@dataclass
class TopicDetail:
    """A topic with everything its detail page shows."""
    topic: Topic
    breadcrumb: List[Topic]
    children: List[Topic]
    related: List[Topic]
    cards: List[Card]


def list_topics(session: Session, user_id: int) -> List[Topic]:
    """Get the user's topics sorted by number ascending."""
    return list(session.exec(
        select(Topic).where(Topic.user_id == user_id).order_by(Topic.number, Topic.id)  # type: ignore
    ).all())


def load_tree(session: Session, user_id: int) -> TopicTree:
    return TopicTree(list_topics(session, user_id))


def get_topic(session: Session, user_id: int, topic_id: int) -> Topic:
    """
    Get one of the user's topics.

    Raises:
        LookupError: If the topic does not exist or belongs to someone else
    """
    topic = session.get(Topic, topic_id)
    if not topic or topic.user_id != user_id:
        raise LookupError(f"Topic with id {topic_id} not found")
    return topic


def _placement(tree: TopicTree, parent_id: Optional[int]):
    """Parent, level and sibling numbers for a new topic under parent_id."""
    if parent_id is None:
        return None, 0, [t.number for t in tree.roots()]
    parent = tree.get(parent_id)
    if parent is None:
        raise LookupError(f"Topic with id {parent_id} not found")
    siblings = [t.number for t in tree.children(parent_id)]
    return parent, parent.level + 1, siblings


def preview_topic_number(session: Session, user_id: int, parent_id: Optional[int] = None) -> str:
    """
    The number a new topic under parent_id would receive right now.

    Raises:
        LookupError: If the parent is not found
        ValueError: If the parent has no number
    """
    tree = load_tree(session, user_id)
    parent, level, siblings = _placement(tree, parent_id)
    return next_topic_number(parent.number if parent else None, level, siblings)


def create_topic(session: Session, user_id: int, draft: TopicDraft) -> Topic:
    """
    Create a topic, assigning its level and number from its placement.

    Raises:
        LookupError: If the parent is not found
        ValueError: If the title is empty, a related id is unknown, or the
            parent has no number
    """
    title = draft.title.strip()
    if not title:
        raise ValueError("Title cannot be empty")

    parent_id = draft.parent_id if isinstance(draft, NewChildTopic) else None
    tree = load_tree(session, user_id)
    parent, level, siblings = _placement(tree, parent_id)
    number = next_topic_number(parent.number if parent else None, level, siblings)

    topic = Topic(
        user_id=user_id,
        number=number,
        title=title,
        emoji=draft.emoji.strip(),
        level=level,
        parent_id=parent_id,
        related_topic_ids=validate_topic_ids(session, user_id, draft.related_topic_ids),
    )
    session.add(topic)
    session.commit()
    session.refresh(topic)
    logger.info(f"Created topic {topic.id} ({topic.number}) for user {user_id}")
    return topic


def update_topic(
    session: Session,
    user_id: int,
    topic_id: int,
    title: Optional[str] = None,
    emoji: Optional[str] = None,
    related_topic_ids: Optional[Iterable[int]] = None
) -> Topic:
    """
    Update the mutable fields of a topic. Number, level and parent never change.

    Raises:
        LookupError: If the topic is not found
        ValueError: If the title is emptied or a related id is unknown
    """
    topic = get_topic(session, user_id, topic_id)

    if title is not None:
        if not title.strip():
            raise ValueError("Title cannot be empty")
        topic.title = title.strip()
    if emoji is not None:
        topic.emoji = emoji.strip()
    if related_topic_ids is not None:
        ids = validate_topic_ids(session, user_id, related_topic_ids)
        topic.related_topic_ids = [i for i in ids if i != topic.id]

    session.add(topic)
    session.commit()
    session.refresh(topic)
    logger.info(f"Updated topic {topic.id} for user {user_id}")
    return topic


def delete_topic(session: Session, user_id: int, topic_id: int) -> List[int]:
    """
    Delete a topic and every topic below it.

    Ids of deleted topics are also removed from the remaining cards'
    connected topics and topics' related topics.

    Args:
        session: Database session
        user_id: Owner of the topic
        topic_id: Root of the subtree to delete

    Returns:
        Sorted ids of the deleted topics

    Raises:
        LookupError: If the topic is not found
    """
    get_topic(session, user_id, topic_id)
    tree = load_tree(session, user_id)
    doomed = tree.descendant_ids(topic_id)

    session.execute(
        delete(Topic).where(Topic.user_id == user_id, Topic.id.in_(list(doomed)))  # type: ignore
    )

    for card in session.exec(select(Card).where(Card.user_id == user_id)).all():
        kept = [i for i in card.connected_topic_ids or [] if i not in doomed]
        if len(kept) != len(card.connected_topic_ids or []):
            card.connected_topic_ids = kept
            flag_modified(card, "connected_topic_ids")
            session.add(card)

    for topic in session.exec(select(Topic).where(Topic.user_id == user_id)).all():
        kept = [i for i in topic.related_topic_ids or [] if i not in doomed]
        if len(kept) != len(topic.related_topic_ids or []):
            topic.related_topic_ids = kept
            flag_modified(topic, "related_topic_ids")
            session.add(topic)

    session.commit()
    deleted = sorted(doomed)
    logger.info(f"Deleted topics {deleted} for user {user_id}")
    return deleted


def get_topic_detail(session: Session, user_id: int, topic_id: int) -> TopicDetail:
    """
    Get a topic with its breadcrumb, children, related topics and linked cards.

    Raises:
        LookupError: If the topic is not found
    """
    topic = get_topic(session, user_id, topic_id)
    tree = load_tree(session, user_id)
    related = [tree.get(i) for i in topic.related_topic_ids or []]
    return TopicDetail(
        topic=topic,
        breadcrumb=tree.ancestors(topic_id),
        children=tree.children(topic_id),
        related=[t for t in related if t is not None],
        cards=list_cards(session, user_id, CardFilters(topic_id=topic_id)),
    )
