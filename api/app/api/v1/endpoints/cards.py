"""
Card CRUD endpoints.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session
from typing import Optional
import logging
from app.api.deps import get_current_user, get_optional_user
from app.core.database import get_session
from app.models.models import Category, User
from app.schemas.card import (
    CardResponse,
    CardsResponse,
    CreateCardRequest,
    UpdateCardRequest,
    KanbanColumn,
    KanbanResponse
)
from app.services import card_service
from app.services.card_service import CardFilters

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cards", tags=["cards"])


@router.get("", response_model=CardsResponse)
async def get_cards(
    category: Optional[Category] = None,
    search: Optional[str] = None,
    topic_id: Optional[int] = None,
    user: Optional[User] = Depends(get_optional_user),
    session: Session = Depends(get_session)
):
    """
    Get the signed-in user's cards, newest first.

    Args:
        category: Optional filter by category
        search: Optional case-insensitive match on title or body
        topic_id: Optional filter by linked topic

    Returns:
        Matching cards; an empty list when logged out
    """
    if user is None:
        return CardsResponse(cards=[], total=0)

    cards = card_service.list_cards(
        session, user.id, CardFilters(category=category, search=search, topic_id=topic_id)
    )
    return CardsResponse(
        cards=[CardResponse.model_validate(card) for card in cards],
        total=len(cards)
    )


@router.get("/kanban", response_model=KanbanResponse)
async def get_kanban(
    user: Optional[User] = Depends(get_optional_user),
    session: Session = Depends(get_session)
):
    """Get the signed-in user's cards grouped into one column per category."""
    cards = card_service.list_cards(session, user.id) if user else []
    columns = card_service.kanban_columns(cards)
    return KanbanResponse(
        columns=[
            KanbanColumn(
                category=category,
                cards=[CardResponse.model_validate(card) for card in column_cards]
            )
            for category, column_cards in columns.items()
        ]
    )


@router.get("/{card_id}", response_model=CardResponse)
async def get_card(
    card_id: int,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session)
):
    """Get a card by ID."""
    try:
        card = card_service.get_card(session, user.id, card_id)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Card not found") from e
    return CardResponse.model_validate(card)


@router.post("", response_model=CardResponse, status_code=status.HTTP_201_CREATED)
async def create_card(
    request: CreateCardRequest,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session)
):
    """Create a card. Its status follows its category."""
    try:
        card = card_service.create_card(
            session,
            user.id,
            title=request.title,
            body=request.body,
            category=request.category,
            source_type=request.source_type,
            source_title=request.source_title,
            source_url=request.source_url,
            scripture=request.scripture,
            connected_topic_ids=request.connected_topic_ids
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return CardResponse.model_validate(card)


@router.put("/{card_id}", response_model=CardResponse)
async def update_card(
    card_id: int,
    request: UpdateCardRequest,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session)
):
    """Update a card by ID. Moving it to another category re-derives its status."""
    try:
        card = card_service.update_card(
            session,
            user.id,
            card_id,
            **request.model_dump(exclude_unset=True)
        )
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Card not found") from e
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return CardResponse.model_validate(card)


@router.delete("/{card_id}")
async def delete_card(
    card_id: int,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session)
):
    """Delete a card by ID."""
    try:
        card_service.delete_card(session, user.id, card_id)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Card not found") from e
    return {"success": True, "message": "Card deleted successfully"}
