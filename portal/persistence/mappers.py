"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from portal.domain.model import (
    Account,
    BlogPost,
    Comment,
    Event,
    EventRegistration,
    LearningResource,
    Like,
    Poll,
    PollOption,
    PollVote,
    ResourceDownload,
    ResourceRating,
    View,
)
from portal.domain.value import (
    ApprovalStatus,
    BlogPostId,
    CampusLocation,
    CommentId,
    Difficulty,
    EventId,
    EventRegistrationId,
    EventType,
    Gender,
    LikeId,
    LikeTargetType,
    PollId,
    PollOptionId,
    PollStatus,
    PollVoteId,
    RegistrationStatus,
    ResourceDownloadId,
    ResourceId,
    ResourceRatingId,
    ResourceType,
    Role,
    UserId,
    ViewId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> Optional[UUID]:
    return _uuid(value) if value is not None else None


def row_to_account(row: Dict[str, Any]) -> Account:
    """Convert database row to Account domain model.

    Args:
        row: Database row as dict

    Returns:
        Account domain model
    """
    return Account(
        id=UserId(_uuid(row["id"])),
        email=row["email"],
        password_hash=row["password_hash"],
        first_name=row["first_name"],
        last_name=row["last_name"],
        profile_image_url=row.get("profile_image_url"),
        matric_number=row.get("matric_number"),
        gender=Gender(row["gender"]) if row.get("gender") else None,
        location=CampusLocation(row["location"]) if row.get("location") else None,
        address=row.get("address"),
        phone_number=row.get("phone_number"),
        level=row.get("level"),
        occupation=row.get("occupation"),
        role=Role(row["role"]),
        approval_status=ApprovalStatus(row["approval_status"]),
        profile_completion=row["profile_completion"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def account_to_dict(account: Account) -> Dict[str, Any]:
    """Convert Account domain model to database dict.

    Args:
        account: Account domain model

    Returns:
        Dict suitable for database insertion/update
    """
    account_dict = account.model_dump()
    account_dict["role"] = account.role.value
    account_dict["approval_status"] = account.approval_status.value
    account_dict["gender"] = account.gender.value if account.gender else None
    account_dict["location"] = account.location.value if account.location else None
    return account_dict


def row_to_blog_post(row: Dict[str, Any]) -> BlogPost:
    """Convert database row to BlogPost domain model."""
    return BlogPost(
        id=BlogPostId(_uuid(row["id"])),
        author_id=UserId(_uuid(row["author_id"])),
        title=row["title"],
        excerpt=row.get("excerpt"),
        content=row["content"],
        category=row["category"],
        tags=list(row.get("tags") or []),
        published=row["published"],
        featured=row["featured"],
        likes=row["likes"],
        views=row["views"],
        read_time=row.get("read_time"),
        image_url=row.get("image_url"),
        image_urls=list(row.get("image_urls") or []),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def blog_post_to_dict(post: BlogPost) -> Dict[str, Any]:
    """Convert BlogPost to database dict, without the counter columns."""
    return post.model_dump(exclude={"likes", "views"})


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    parent_id = _optional_uuid(row.get("parent_comment_id"))
    return Comment(
        id=CommentId(_uuid(row["id"])),
        blog_post_id=BlogPostId(_uuid(row["blog_post_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        parent_comment_id=CommentId(parent_id) if parent_id else None,
        content=row["content"],
        likes=row["likes"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment to database dict, without the like counter."""
    return comment.model_dump(exclude={"likes"})


def row_to_like(row: Dict[str, Any]) -> Like:
    return Like(
        id=LikeId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        target_type=LikeTargetType(row["target_type"]),
        target_id=_uuid(row["target_id"]),
        created_at=row["created_at"],
    )


def like_to_dict(like: Like) -> Dict[str, Any]:
    like_dict = like.model_dump()
    like_dict["target_type"] = like.target_type.value
    return like_dict


def row_to_view(row: Dict[str, Any]) -> View:
    return View(
        id=ViewId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        blog_post_id=BlogPostId(_uuid(row["blog_post_id"])),
        created_at=row["created_at"],
    )


def view_to_dict(view: View) -> Dict[str, Any]:
    return view.model_dump()


def row_to_poll_option(row: Dict[str, Any]) -> PollOption:
    return PollOption(
        id=PollOptionId(_uuid(row["id"])),
        text=row["text"],
        votes=row["votes"],
    )


def row_to_poll(row: Dict[str, Any], options: list[PollOption]) -> Poll:
    """Convert a poll row plus its option rows to the Poll aggregate.

    Args:
        row: Poll row as dict
        options: Options in display order

    Returns:
        Poll domain model
    """
    return Poll(
        id=PollId(_uuid(row["id"])),
        question=row["question"],
        options=options,
        target_levels=list(row.get("target_levels") or []),
        allow_multiple_votes=row["allow_multiple_votes"],
        status=PollStatus(row["status"]),
        created_by=UserId(_uuid(row["created_by"])),
        created_at=row["created_at"],
        closed_at=row.get("closed_at"),
    )


def poll_to_dict(poll: Poll) -> Dict[str, Any]:
    poll_dict = poll.model_dump(exclude={"options"})
    poll_dict["status"] = poll.status.value
    return poll_dict


def poll_options_to_dicts(poll: Poll) -> list[Dict[str, Any]]:
    """Option rows for insertion; counters start from the model values."""
    return [
        {
            "id": option.id,
            "poll_id": poll.id,
            "text": option.text,
            "position": position,
            "votes": option.votes,
        }
        for position, option in enumerate(poll.options)
    ]


def row_to_poll_vote(row: Dict[str, Any]) -> PollVote:
    return PollVote(
        id=PollVoteId(_uuid(row["id"])),
        poll_id=PollId(_uuid(row["poll_id"])),
        option_id=PollOptionId(_uuid(row["option_id"])),
        user_id=UserId(_uuid(row["user_id"])),
        exclusive=row["exclusive"],
        created_at=row["created_at"],
    )


def poll_vote_to_dict(vote: PollVote) -> Dict[str, Any]:
    return vote.model_dump()


def row_to_learning_resource(row: Dict[str, Any]) -> LearningResource:
    """Convert database row to LearningResource domain model."""
    return LearningResource(
        id=ResourceId(_uuid(row["id"])),
        uploaded_by_id=UserId(_uuid(row["uploaded_by_id"])),
        title=row["title"],
        description=row.get("description"),
        type=ResourceType(row["type"]),
        category=row["category"],
        file_url=row["file_url"],
        file_name=row.get("file_name"),
        file_size=row.get("file_size"),
        difficulty=Difficulty(row["difficulty"]) if row.get("difficulty") else None,
        tags=list(row.get("tags") or []),
        downloads=row["downloads"],
        rating=row["rating"],
        rating_count=row["rating_count"],
        preview_available=row["preview_available"],
        thumbnail_url=row.get("thumbnail_url"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def learning_resource_to_dict(resource: LearningResource) -> Dict[str, Any]:
    """Convert LearningResource to database dict, without the counter columns."""
    resource_dict = resource.model_dump(exclude={"downloads", "rating", "rating_count"})
    resource_dict["type"] = resource.type.value
    resource_dict["difficulty"] = (
        resource.difficulty.value if resource.difficulty else None
    )
    return resource_dict


def row_to_resource_download(row: Dict[str, Any]) -> ResourceDownload:
    return ResourceDownload(
        id=ResourceDownloadId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        resource_id=ResourceId(_uuid(row["resource_id"])),
        created_at=row["created_at"],
    )


def resource_download_to_dict(download: ResourceDownload) -> Dict[str, Any]:
    return download.model_dump()


def row_to_resource_rating(row: Dict[str, Any]) -> ResourceRating:
    return ResourceRating(
        id=ResourceRatingId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        resource_id=ResourceId(_uuid(row["resource_id"])),
        rating=row["rating"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def resource_rating_to_dict(rating: ResourceRating) -> Dict[str, Any]:
    return rating.model_dump()


def row_to_event(row: Dict[str, Any]) -> Event:
    """Convert database row to Event domain model."""
    return Event(
        id=EventId(_uuid(row["id"])),
        organizer_id=UserId(_uuid(row["organizer_id"])),
        title=row["title"],
        description=row["description"],
        date=row["date"],
        time=row["time"],
        location=row["location"],
        type=EventType(row["type"]),
        capacity=row["capacity"],
        price=row["price"],
        tags=list(row.get("tags") or []),
        image_url=row.get("image_url"),
        image_urls=list(row.get("image_urls") or []),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def event_to_dict(event: Event) -> Dict[str, Any]:
    event_dict = event.model_dump()
    event_dict["type"] = event.type.value
    return event_dict


def row_to_event_registration(row: Dict[str, Any]) -> EventRegistration:
    return EventRegistration(
        id=EventRegistrationId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        event_id=EventId(_uuid(row["event_id"])),
        status=RegistrationStatus(row["status"]),
        created_at=row["created_at"],
    )


def event_registration_to_dict(registration: EventRegistration) -> Dict[str, Any]:
    registration_dict = registration.model_dump()
    registration_dict["status"] = registration.status.value
    return registration_dict
