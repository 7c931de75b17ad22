"""
Card service for business logic related to card operations.
"""
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from sqlmodel import Session, select

from app.models.models import Card, Topic, Category, CardStatus, SourceType

logger = logging.getLogger(__name__)


@dataclass
class CardFilters:
    """Library filters; None/empty means no restriction."""
    category: Optional[Category] = None
    search: Optional[str] = None
    topic_id: Optional[int] = None


def resolve_status(category: Category) -> CardStatus:
    """Unprocessed cards are the only unprocessed ones; every other category is processed."""
    if Category(category) == Category.UNPROCESSED:
        return CardStatus.UNPROCESSED
    return CardStatus.PROCESSED


def _unique_ids(ids: Iterable[int]) -> List[int]:
    seen = set()
    result = []
    for topic_id in ids:
        if topic_id not in seen:
            seen.add(topic_id)
            result.append(topic_id)
    return result


def validate_topic_ids(session: Session, user_id: int, topic_ids: Iterable[int]) -> List[int]:
    """
    Deduplicate topic ids and check they all belong to the user.

    Raises:
        ValueError: If any id is not one of the user's topics
    """
    ids = _unique_ids(topic_ids)
    if not ids:
        return []
    found = set(session.exec(
        select(Topic.id).where(Topic.user_id == user_id, Topic.id.in_(ids))  # type: ignore
    ).all())
    missing = [topic_id for topic_id in ids if topic_id not in found]
    if missing:
        raise ValueError(f"Unknown topic ids: {', '.join(str(m) for m in missing)}")
    return ids


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def matches_filters(card: Card, filters: CardFilters) -> bool:
    """Whether a card passes the library filters."""
    if filters.category is not None and card.category != filters.category:
        return False
    if filters.topic_id is not None and filters.topic_id not in (card.connected_topic_ids or []):
        return False
    query = (filters.search or "").strip().lower()
    if query and query not in card.title.lower() and query not in (card.body or "").lower():
        return False
    return True


def list_cards(
    session: Session,
    user_id: int,
    filters: Optional[CardFilters] = None
) -> List[Card]:
    """Get the user's cards, newest first, optionally filtered."""
    query = select(Card).where(Card.user_id == user_id)
    if filters is not None and filters.category is not None:
        query = query.where(Card.category == filters.category.value)
    query = query.order_by(Card.created_at.desc(), Card.id.desc())  # type: ignore
    cards = session.exec(query).all()
    if filters is None:
        return list(cards)
    return [card for card in cards if matches_filters(card, filters)]


def kanban_columns(cards: Iterable[Card]) -> Dict[Category, List[Card]]:
    """Group cards by category, every category present in canonical order."""
    columns: Dict[Category, List[Card]] = {category: [] for category in Category}
    for card in cards:
        columns[Category(card.category)].append(card)
    return columns


def count_cards_by_topic(cards: Iterable[Card]) -> Dict[int, int]:
    """Number of cards linked to each topic id."""
    counts: Dict[int, int] = {}
    for card in cards:
        for topic_id in card.connected_topic_ids or []:
            counts[topic_id] = counts.get(topic_id, 0) + 1
    return counts


def get_card(session: Session, user_id: int, card_id: int) -> Card:
    """
    Get one of the user's cards.

    Raises:
        LookupError: If the card does not exist or belongs to someone else
    """
    card = session.get(Card, card_id)
    if not card or card.user_id != user_id:
        raise LookupError(f"Card with id {card_id} not found")
    return card


def create_card(
    session: Session,
    user_id: int,
    title: str,
    body: str = "",
    category: Category = Category.UNPROCESSED,
    source_type: SourceType = SourceType.NOTE,
    source_title: Optional[str] = None,
    source_url: Optional[str] = None,
    scripture: Optional[str] = None,
    connected_topic_ids: Iterable[int] = (),
    commit: bool = True,
) -> Card:
    """
    Create a card; its status always follows its category.

    Raises:
        ValueError: If the title is empty or a topic id is unknown
    """
    title = title.strip()
    if not title:
        raise ValueError("Title cannot be empty")

    card = Card(
        user_id=user_id,
        title=title,
        body=body,
        category=Category(category),
        status=resolve_status(category),
        source_type=SourceType(source_type),
        source_title=_clean(source_title),
        source_url=_clean(source_url),
        scripture=_clean(scripture),
        connected_topic_ids=validate_topic_ids(session, user_id, connected_topic_ids),
    )
    session.add(card)
    if commit:
        session.commit()
        session.refresh(card)
        logger.info(f"Created card {card.id} for user {user_id} in {card.category}")
    return card


def update_card(
    session: Session,
    user_id: int,
    card_id: int,
    **changes
) -> Card:
    """
    Update the given fields of a card. A category change re-derives the status.

    Omitted keys are left unchanged. source_title, source_url and scripture
    are cleared when passed as None or blank.

    Raises:
        LookupError: If the card is not found
        ValueError: If the title is emptied or a topic id is unknown
    """
    card = get_card(session, user_id, card_id)

    if changes.get("title") is not None:
        title = changes["title"].strip()
        if not title:
            raise ValueError("Title cannot be empty")
        card.title = title
    if changes.get("body") is not None:
        card.body = changes["body"]
    if changes.get("category") is not None:
        card.category = Category(changes["category"])
    if changes.get("source_type") is not None:
        card.source_type = SourceType(changes["source_type"])
    if "source_title" in changes:
        card.source_title = _clean(changes["source_title"])
    if "source_url" in changes:
        card.source_url = _clean(changes["source_url"])
    if "scripture" in changes:
        card.scripture = _clean(changes["scripture"])
    if changes.get("connected_topic_ids") is not None:
        card.connected_topic_ids = validate_topic_ids(session, user_id, changes["connected_topic_ids"])

    card.status = resolve_status(card.category)

    session.add(card)
    session.commit()
    session.refresh(card)
    logger.info(f"Updated card {card.id} for user {user_id}")
    return card


def delete_card(session: Session, user_id: int, card_id: int) -> None:
    """
    Delete one of the user's cards.

    Raises:
        LookupError: If the card is not found
    """
    card = get_card(session, user_id, card_id)
    session.delete(card)
    session.commit()
    logger.info(f"Deleted card {card_id} for user {user_id}")
