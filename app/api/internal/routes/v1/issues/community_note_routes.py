# Standard library imports
from uuid import UUID

# Third-party imports
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from app.core.db import get_async_session
from app.schemas.issues.community_note_schemas import (
    CommunityNoteCreate,
    CommunityNoteRate,
    CommunityNoteResponse,
)
from app.services.issues import (
    create_community_note,
    delete_community_note,
    list_community_notes,
    rate_community_note,
)

router = APIRouter(prefix="/community-notes", tags=["Community Notes"])


@router.post("/", response_model=CommunityNoteResponse)
async def add_community_note(note_data: CommunityNoteCreate, db: AsyncSession = Depends(get_async_session)):
    """Add a community note to an issue"""
    note = await create_community_note(db, note_data)
    return CommunityNoteResponse.model_validate(note)


@router.get("/issue/{issue_id}", response_model=list[CommunityNoteResponse])
async def get_issue_community_notes(issue_id: UUID, db: AsyncSession = Depends(get_async_session)):
    """Get the notes of an issue, best rated first"""
    notes = await list_community_notes(db, issue_id)
    return [CommunityNoteResponse.model_validate(note) for note in notes]


@router.patch("/{note_id}/rating", response_model=CommunityNoteResponse)
async def rate_note(note_id: UUID, rate_data: CommunityNoteRate, db: AsyncSession = Depends(get_async_session)):
    """Rate a community note"""
    note = await rate_community_note(db, note_id, rate_data)
    return CommunityNoteResponse.model_validate(note)


@router.delete("/{note_id}")
async def remove_community_note(
    note_id: UUID,
    created_by: str = Query(..., min_length=1),
    db: AsyncSession = Depends(get_async_session),
):
    """Delete a community note (only its creator can delete it)"""
    await delete_community_note(db, note_id, created_by)
    return {"message": "Community note deleted successfully"}
