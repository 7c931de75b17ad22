"""
Topic schemas.
"""
from pydantic import BaseModel, Field
from typing import Annotated, List, Literal, Optional, Union
from datetime import datetime
from app.schemas.card import CardResponse


class TopicResponse(BaseModel):
    """Topic response schema."""
    id: int
    number: str
    title: str
    emoji: str = ""
    level: int
    parent_id: Optional[int] = None
    related_topic_ids: List[int] = []
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class NewRootTopicRequest(BaseModel):
    """Create a topic at the top of the tree."""
    kind: Literal["new-root"] = "new-root"
    title: str = Field(..., min_length=1)
    emoji: str = ""
    related_topic_ids: List[int] = []


class NewChildTopicRequest(BaseModel):
    """Create a topic under an existing parent."""
    kind: Literal["new-child"] = "new-child"
    parent_id: int
    title: str = Field(..., min_length=1)
    emoji: str = ""
    related_topic_ids: List[int] = []


CreateTopicRequest = Annotated[
    Union[NewRootTopicRequest, NewChildTopicRequest],
    Field(discriminator="kind")
]


class UpdateTopicRequest(BaseModel):
    """Request schema for updating a topic. Number and parent are immutable."""
    title: Optional[str] = None
    emoji: Optional[str] = None
    related_topic_ids: Optional[List[int]] = None


class TopicsResponse(BaseModel):
    """Response schema for topics list."""
    topics: List[TopicResponse]


class TopicNode(BaseModel):
    """A topic with its subtree, for the tree view."""
    topic: TopicResponse
    card_count: int = 0
    children: List["TopicNode"] = []


class TopicTreeResponse(BaseModel):
    """The whole forest of a user's topics."""
    roots: List[TopicNode]


class TopicDetailResponse(BaseModel):
    """A topic with breadcrumb, children, related topics and linked cards."""
    topic: TopicResponse
    breadcrumb: List[TopicResponse]
    children: List[TopicResponse]
    related: List[TopicResponse]
    cards: List[CardResponse]


class NextNumberResponse(BaseModel):
    """Preview of the number a new topic would receive."""
    parent_id: Optional[int] = None
    level: int
    number: str


class DeleteTopicResponse(BaseModel):
    """Ids removed by a cascading topic delete."""
    deleted_ids: List[int]
    message: str


TopicNode.model_rebuild()
