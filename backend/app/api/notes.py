"""Customer notes endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from backend.app.db.session import get_db
from backend.app.dependencies.auth import get_current_user
from backend.app.models.user import User
from backend.app.schemas.note import NoteCreate, NoteRead, NoteUpdate
from backend.app.services import notes as note_service
from backend.app.services.customers import get_customer

router = APIRouter(prefix="/customers", tags=["customers"])


@router.post("/{customer_id}/notes", response_model=NoteRead, status_code=201)
async def create_note(
    customer_id: int,
    note_in: NoteCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    customer = get_customer(db, customer_id)
    return note_service.add_note(
        db,
        customer,
        current_user,
        note_in.note,
        next_follow_up_date=note_in.next_follow_up_date,
        next_follow_up_action=note_in.next_follow_up_action,
    )


@router.get("/{customer_id}/notes", response_model=list[NoteRead])
async def list_notes(
    customer_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    customer = get_customer(db, customer_id)
    return note_service.list_notes(db, customer, current_user)


@router.put("/{customer_id}/notes/{note_id}", response_model=NoteRead)
async def edit_note(
    customer_id: int,
    note_id: int,
    note_in: NoteUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    customer = get_customer(db, customer_id)
    return note_service.edit_note(
        db,
        customer,
        note_id,
        current_user,
        note_in.note,
        next_follow_up_date=note_in.next_follow_up_date,
        next_follow_up_action=note_in.next_follow_up_action,
    )


@router.delete("/{customer_id}/notes/{note_id}")
async def delete_note(
    customer_id: int,
    note_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    customer = get_customer(db, customer_id)
    note_service.delete_note(db, customer, note_id, current_user)
    return {"status": "deleted", "id": note_id}
