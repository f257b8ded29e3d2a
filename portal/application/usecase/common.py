"""Response items shared by several use cases.

Credential fields (password hash, tokens) never appear on these models.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from portal.domain.model import (
    Account,
    BlogPost,
    Comment,
    Event,
    EventRegistration,
    LearningResource,
    Poll,
)
from portal.domain.value import (
    ApprovalStatus,
    CampusLocation,
    Difficulty,
    EventType,
    Gender,
    PollOptionId,
    PollStatus,
    RegistrationStatus,
    ResourceType,
    Role,
)


class AccountItem(BaseModel):
    """Account as returned to clients."""

    id: str
    email: str
    first_name: str
    last_name: str
    profile_image_url: Optional[str]
    matric_number: Optional[str]
    gender: Optional[Gender]
    location: Optional[CampusLocation]
    address: Optional[str]
    phone_number: Optional[str]
    level: Optional[str]
    occupation: Optional[str]
    role: Role
    approval_status: ApprovalStatus
    profile_completion: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_account(cls, account: Account) -> "AccountItem":
        return cls(
            **account.model_dump(exclude={"id", "password_hash"}),
            id=str(account.id),
        )


class BlogPostItem(BaseModel):
    """Blog post with the caller's like state."""

    id: str
    author_id: str
    title: str
    excerpt: Optional[str]
    content: str
    category: str
    tags: list[str]
    published: bool
    featured: bool
    likes_count: int
    views: int
    read_time: Optional[int]
    image_url: Optional[str]
    image_urls: list[str]
    created_at: datetime
    updated_at: datetime
    is_liked_by_user: bool = False

    @classmethod
    def from_post(cls, post: BlogPost, is_liked: bool = False) -> "BlogPostItem":
        return cls(
            **post.model_dump(exclude={"id", "author_id", "likes"}),
            id=str(post.id),
            author_id=str(post.author_id),
            likes_count=post.likes,
            is_liked_by_user=is_liked,
        )


class CommentItem(BaseModel):
    """Comment with the caller's like state."""

    id: str
    blog_post_id: str
    author_id: str
    parent_comment_id: Optional[str]
    content: str
    likes_count: int
    created_at: datetime
    updated_at: datetime
    is_liked_by_user: bool = False

    @classmethod
    def from_comment(cls, comment: Comment, is_liked: bool = False) -> "CommentItem":
        return cls(
            id=str(comment.id),
            blog_post_id=str(comment.blog_post_id),
            author_id=str(comment.author_id),
            parent_comment_id=(
                str(comment.parent_comment_id) if comment.parent_comment_id else None
            ),
            content=comment.content,
            likes_count=comment.likes,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
            is_liked_by_user=is_liked,
        )


class PollOptionItem(BaseModel):
    id: str
    text: str
    votes: int
    percentage: float


class PollItem(BaseModel):
    """Poll with tallies and the caller's voting state."""

    id: str
    question: str
    options: list[PollOptionItem]
    target_levels: list[str]
    allow_multiple_votes: bool
    status: PollStatus
    created_by: str
    created_at: datetime
    closed_at: Optional[datetime]
    total_votes: int
    user_voted_options: list[str]
    has_voted: bool
    can_vote: bool

    @classmethod
    def from_poll(
        cls, poll: Poll, voted: set[PollOptionId], can_vote: bool
    ) -> "PollItem":
        total = poll.total_votes
        return cls(
            id=str(poll.id),
            question=poll.question,
            options=[
                PollOptionItem(
                    id=str(option.id),
                    text=option.text,
                    votes=option.votes,
                    percentage=round(option.votes / total * 100, 1) if total else 0.0,
                )
                for option in poll.options
            ],
            target_levels=poll.target_levels,
            allow_multiple_votes=poll.allow_multiple_votes,
            status=poll.status,
            created_by=str(poll.created_by),
            created_at=poll.created_at,
            closed_at=poll.closed_at,
            total_votes=total,
            user_voted_options=sorted(str(option_id) for option_id in voted),
            has_voted=bool(voted),
            can_vote=can_vote,
        )


class ResourceItem(BaseModel):
    """Learning resource metadata."""

    id: str
    uploaded_by_id: str
    title: str
    description: Optional[str]
    type: ResourceType
    category: str
    file_url: str
    file_name: Optional[str]
    file_size: Optional[int]
    difficulty: Optional[Difficulty]
    tags: list[str]
    downloads: int
    average_rating: float
    rating_count: int
    preview_available: bool
    thumbnail_url: Optional[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_resource(cls, resource: LearningResource) -> "ResourceItem":
        return cls(
            **resource.model_dump(exclude={"id", "uploaded_by_id", "rating"}),
            id=str(resource.id),
            uploaded_by_id=str(resource.uploaded_by_id),
            average_rating=resource.average_rating,
        )


class EventItem(BaseModel):
    """Event with the number of places taken."""

    id: str
    organizer_id: str
    title: str
    description: str
    date: datetime
    time: str
    location: str
    type: EventType
    capacity: int
    price: int
    tags: list[str]
    image_url: Optional[str]
    image_urls: list[str]
    registered_count: Optional[int] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_event(
        cls, event: Event, registered_count: Optional[int] = None
    ) -> "EventItem":
        return cls(
            **event.model_dump(exclude={"id", "organizer_id"}),
            id=str(event.id),
            organizer_id=str(event.organizer_id),
            registered_count=registered_count,
        )


class RegistrantItem(BaseModel):
    """Public summary of a registered account."""

    id: str
    email: str
    first_name: str
    last_name: str
    profile_image_url: Optional[str]

    @classmethod
    def from_account(cls, account: Account) -> "RegistrantItem":
        return cls(
            id=str(account.id),
            email=account.email,
            first_name=account.first_name,
            last_name=account.last_name,
            profile_image_url=account.profile_image_url,
        )


class EventRegistrationItem(BaseModel):
    id: str
    user_id: str
    event_id: str
    status: RegistrationStatus
    created_at: datetime
    user: Optional[RegistrantItem] = None

    @classmethod
    def from_registration(
        cls, registration: EventRegistration, account: Optional[Account] = None
    ) -> "EventRegistrationItem":
        return cls(
            id=str(registration.id),
            user_id=str(registration.user_id),
            event_id=str(registration.event_id),
            status=registration.status,
            created_at=registration.created_at,
            user=RegistrantItem.from_account(account) if account else None,
        )
