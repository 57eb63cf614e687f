# Standard library imports
from uuid import UUID

# Third-party imports
from sqlalchemy import case, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from app.core.monitoring.logging import get_logger
from app.models.issues.community_note import CommunityNote, NoteRating
from app.schemas.issues.community_note_schemas import CommunityNoteCreate, CommunityNoteRate
from app.services.exceptions import AuthorizationError, NotFoundError, ReferentialIntegrityError

logger = get_logger(__name__)

# Higher ranks sort first; unrated notes come last
RATING_RANK = case(
    (CommunityNote.rating == NoteRating.HELPFUL, 3),
    (CommunityNote.rating == NoteRating.PARTIALLY_HELPFUL, 2),
    (CommunityNote.rating == NoteRating.NOT_HELPFUL, 1),
    else_=0,
)


async def create_community_note(db: AsyncSession, note_data: CommunityNoteCreate) -> CommunityNote:
    """
    Attach a note to an issue.

    The issue reference is checked by the foreign key only; a missing issue
    surfaces as a ReferentialIntegrityError.
    """
    new_note = CommunityNote(**note_data.model_dump(), helpful=0, not_helpful=0)
    db.add(new_note)

    try:
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        logger.warning(f"Community note rejected for issue {note_data.issue_id}: {e.orig}")
        raise ReferentialIntegrityError("Issue not found for community note") from e

    await db.refresh(new_note)
    logger.info(f"Community note {new_note.id} added to issue {new_note.issue_id}")
    return new_note


async def list_community_notes(db: AsyncSession, issue_id: UUID) -> list[CommunityNote]:
    """Notes for an issue, best rated first, then by helpful count."""
    result = await db.execute(
        select(CommunityNote)
        .where(CommunityNote.issue_id == issue_id)
        .order_by(RATING_RANK.desc(), CommunityNote.helpful.desc())
        .execution_options(populate_existing=True)
    )
    return list(result.scalars().all())


async def rate_community_note(db: AsyncSession, note_id: UUID, rate_data: CommunityNoteRate) -> CommunityNote:
    """
    Apply one rating action to a note.

    The stored rating is replaced by the given one (last write wins) and exactly
    one of the helpful / not_helpful counters goes up by one, chosen by
    ``is_helpful`` alone.
    """
    counter = CommunityNote.helpful if rate_data.is_helpful else CommunityNote.not_helpful

    try:
        result = await db.execute(
            update(CommunityNote)
            .where(CommunityNote.id == note_id)
            .values({CommunityNote.rating: rate_data.rating, counter: counter + 1})
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            raise NotFoundError("Community note not found")
        await db.commit()
    except Exception as e:
        await db.rollback()
        raise e

    refreshed = await db.execute(
        select(CommunityNote).where(CommunityNote.id == note_id).execution_options(populate_existing=True)
    )
    return refreshed.scalar_one()


async def delete_community_note(db: AsyncSession, note_id: UUID, created_by: str) -> None:
    """
    Delete a note, but only for the caller that created it.

    A note that does not exist fails the same ownership check.
    """
    result = await db.execute(select(CommunityNote).where(CommunityNote.id == note_id))
    note = result.scalar_one_or_none()

    if note is None or note.created_by != created_by:
        logger.warning(f"Rejected delete of community note {note_id}: caller is not its creator")
        raise AuthorizationError("Only the creator of a community note can delete it")

    await db.delete(note)
    try:
        await db.commit()
    except Exception as e:
        await db.rollback()
        raise e

    logger.info(f"Community note {note_id} deleted")
