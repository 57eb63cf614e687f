# Standard library imports
from uuid import UUID

# Third-party imports
from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from app.core.monitoring.logging import get_contextual_logger
from app.models.issues.issue import Issue
from app.models.issues.upvote import IssueUpvote
from app.services.exceptions import NotFoundError, ReferentialIntegrityError


async def toggle_upvote(db: AsyncSession, issue_id: UUID, user_id: str) -> Issue:
    """
    Add the user's upvote to an issue, or take it back if it is already there.

    The existence check, the upvote row change and the counter change run as one
    transaction. The issue row is locked first (SELECT ... FOR UPDATE, a no-op on
    SQLite, which serializes writers anyway) and the counter is changed with an
    in-database increment, so concurrent toggles on the same issue keep
    ``issue.upvotes`` equal to the number of upvote rows.

    Raises:
        NotFoundError: the issue does not exist; nothing is written.
        ReferentialIntegrityError: the store rejected the upvote row.
    """
    log = get_contextual_logger(__name__, issue_id=issue_id, user_id=user_id)

    try:
        locked = await db.execute(select(Issue.id).where(Issue.id == issue_id).with_for_update())
        if locked.scalar_one_or_none() is None:
            raise NotFoundError("Issue not found")

        existing_result = await db.execute(
            select(IssueUpvote).where(IssueUpvote.issue_id == issue_id, IssueUpvote.user_id == user_id)
        )
        existing = existing_result.scalar_one_or_none()

        if existing is not None:
            await db.delete(existing)
            delta = -1
        else:
            db.add(IssueUpvote(issue_id=issue_id, user_id=user_id))
            delta = 1
        await db.flush()

        counter = await db.execute(
            update(Issue)
            .where(Issue.id == issue_id)
            .values(upvotes=Issue.upvotes + delta)
            .execution_options(synchronize_session=False)
        )
        if counter.rowcount == 0:
            raise NotFoundError("Issue not found")

        await db.commit()
    except NotFoundError:
        await db.rollback()
        raise
    except IntegrityError as e:
        await db.rollback()
        log.warning(f"Upvote rejected by the database: {e.orig}")
        raise ReferentialIntegrityError("Upvote could not be recorded for this issue") from e
    except Exception as e:
        await db.rollback()
        raise e

    log.info("Upvote added" if delta > 0 else "Upvote removed")

    result = await db.execute(select(Issue).where(Issue.id == issue_id).execution_options(populate_existing=True))
    return result.scalar_one()

