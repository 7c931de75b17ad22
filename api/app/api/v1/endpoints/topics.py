"""
Topics endpoint.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session
from typing import Any, Dict, Optional
from app.api.deps import get_current_user, get_optional_user
from app.core.database import get_session
from app.models.models import User
from app.schemas.card import CardResponse
from app.schemas.topic import (
    TopicResponse,
    CreateTopicRequest,
    NewChildTopicRequest,
    UpdateTopicRequest,
    TopicsResponse,
    TopicNode,
    TopicTreeResponse,
    TopicDetailResponse,
    NextNumberResponse,
    DeleteTopicResponse
)
from app.services import card_service, topic_service
from app.services.topic_service import NewRootTopic, NewChildTopic

router = APIRouter(prefix="/topics", tags=["topics"])


def _node(entry: Dict[str, Any]) -> TopicNode:
    return TopicNode(
        topic=TopicResponse.model_validate(entry["topic"]),
        card_count=entry["card_count"],
        children=[_node(child) for child in entry["children"]]
    )


@router.get("", response_model=TopicsResponse)
async def get_topics(
    user: Optional[User] = Depends(get_optional_user),
    session: Session = Depends(get_session)
):
    """Get the signed-in user's topics sorted by number ascending.
    When logged out, returns empty list since all topics belong to users."""
    if user is None:
        return TopicsResponse(topics=[])

    topics = topic_service.list_topics(session, user.id)
    return TopicsResponse(
        topics=[TopicResponse.model_validate(topic) for topic in topics]
    )


@router.get("/tree", response_model=TopicTreeResponse)
async def get_topic_tree(
    user: Optional[User] = Depends(get_optional_user),
    session: Session = Depends(get_session)
):
    """Get the topic forest with linked-card counts per node."""
    if user is None:
        return TopicTreeResponse(roots=[])

    tree = topic_service.load_tree(session, user.id)
    counts = card_service.count_cards_by_topic(card_service.list_cards(session, user.id))
    return TopicTreeResponse(roots=[_node(entry) for entry in tree.nested(counts)])


@router.get("/next-number", response_model=NextNumberResponse)
async def get_next_number(
    parent_id: Optional[int] = None,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session)
):
    """Preview the number a new topic under parent_id (root when omitted) would get."""
    try:
        number = topic_service.preview_topic_number(session, user.id, parent_id)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Parent topic not found") from e
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e

    level = 0
    if parent_id is not None:
        level = topic_service.get_topic(session, user.id, parent_id).level + 1
    return NextNumberResponse(parent_id=parent_id, level=level, number=number)


@router.get("/{topic_id}", response_model=TopicDetailResponse)
async def get_topic(
    topic_id: int,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session)
):
    """Get a topic with its breadcrumb, children, related topics and linked cards."""
    try:
        detail = topic_service.get_topic_detail(session, user.id, topic_id)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Topic not found") from e

    return TopicDetailResponse(
        topic=TopicResponse.model_validate(detail.topic),
        breadcrumb=[TopicResponse.model_validate(t) for t in detail.breadcrumb],
        children=[TopicResponse.model_validate(t) for t in detail.children],
        related=[TopicResponse.model_validate(t) for t in detail.related],
        cards=[CardResponse.model_validate(c) for c in detail.cards]
    )


@router.post("", response_model=TopicResponse, status_code=status.HTTP_201_CREATED)
async def create_topic(
    request: CreateTopicRequest,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session)
):
    """Create a root topic or a child topic; its number and level are assigned here."""
    if isinstance(request, NewChildTopicRequest):
        draft = NewChildTopic(
            parent_id=request.parent_id,
            title=request.title,
            emoji=request.emoji,
            related_topic_ids=request.related_topic_ids
        )
    else:
        draft = NewRootTopic(
            title=request.title,
            emoji=request.emoji,
            related_topic_ids=request.related_topic_ids
        )

    try:
        topic = topic_service.create_topic(session, user.id, draft)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Parent topic not found") from e
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e

    return TopicResponse.model_validate(topic)


@router.put("/{topic_id}", response_model=TopicResponse)
async def update_topic(
    topic_id: int,
    request: UpdateTopicRequest,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session)
):
    """Update a topic's title, emoji or related topics."""
    try:
        topic = topic_service.update_topic(
            session,
            user.id,
            topic_id,
            title=request.title,
            emoji=request.emoji,
            related_topic_ids=request.related_topic_ids
        )
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Topic not found") from e
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e

    return TopicResponse.model_validate(topic)


@router.delete("/{topic_id}", response_model=DeleteTopicResponse)
async def delete_topic(
    topic_id: int,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session)
):
    """Delete a topic together with all of its descendants."""
    try:
        deleted_ids = topic_service.delete_topic(session, user.id, topic_id)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Topic not found") from e

    return DeleteTopicResponse(
        deleted_ids=deleted_ids,
        message=f"Deleted {len(deleted_ids)} topic(s)"
    )
