"""Customer management endpoints."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from backend.app.db.session import get_db
from backend.app.dependencies.auth import get_current_user
from backend.app.models.user import User
from backend.app.schemas.customer import (
    CustomerClose,
    CustomerCreate,
    CustomerMove,
    CustomerPage,
    CustomerRead,
    CustomerUpdate,
    DueCount,
)
from backend.app.services import customers as customer_service
from backend.app.services import lifecycle
from backend.app.services.visibility import VIEW_ALL, VIEW_FOREIGN, VIEW_MY, ensure_can_view

router = APIRouter(prefix="/customers", tags=["customers"])


def list_filters(
    page: int = 1,
    limit: int = customer_service.DEFAULT_PAGE_SIZE,
    search: str | None = None,
    status: str | None = None,
    priority: str | None = None,
    source_filter: str | None = Query(default=None, alias="sourceFilter"),
    closed: bool = False,
) -> dict:
    return {
        "page": page,
        "limit": limit,
        "search": search,
        "status": status,
        "priority": priority,
        "source_filter": source_filter,
        "closed": closed,
    }


@router.post("", response_model=CustomerRead, status_code=201)
async def create_customer(
    customer_in: CustomerCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return customer_service.create_customer(db, customer_in.model_dump(exclude_unset=True), current_user)


@router.get("", response_model=CustomerPage)
async def list_customers(
    filters: dict = Depends(list_filters),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return customer_service.list_customers(db, current_user, view=VIEW_ALL, **filters)


@router.get("/my/customers", response_model=CustomerPage)
async def list_my_customers(
    filters: dict = Depends(list_filters),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return customer_service.list_customers(db, current_user, view=VIEW_MY, **filters)


@router.get("/foreign/customers", response_model=CustomerPage)
async def list_foreign_customers(
    filters: dict = Depends(list_filters),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return customer_service.list_customers(db, current_user, view=VIEW_FOREIGN, **filters)


@router.get("/follow-ups/due/count", response_model=DueCount)
async def count_due_follow_ups(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return {"count": lifecycle.count_due_follow_ups(db, current_user)}


@router.get("/follow-ups/due", response_model=list[CustomerRead])
async def list_due_follow_ups(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return lifecycle.due_follow_ups(db, current_user)


@router.get("/{customer_id}", response_model=CustomerRead)
async def get_customer(customer_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    customer = customer_service.get_customer(db, customer_id)
    ensure_can_view(current_user, customer)
    return customer


@router.put("/{customer_id}", response_model=CustomerRead)
async def update_customer(
    customer_id: int,
    customer_in: CustomerUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    customer = customer_service.get_customer(db, customer_id)
    return customer_service.update_customer(db, customer, customer_in.model_dump(exclude_unset=True), current_user)


@router.delete("/{customer_id}")
async def delete_customer(customer_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    customer = customer_service.get_customer(db, customer_id)
    customer_service.delete_customer(db, customer, current_user)
    return {"status": "deleted", "id": customer_id}


@router.put("/{customer_id}/move", response_model=CustomerRead)
async def move_customer(
    customer_id: int,
    move_in: CustomerMove,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    customer = customer_service.get_customer(db, customer_id)
    return lifecycle.move_customer(
        db,
        customer,
        current_user,
        zone=move_in.zone,
        thana=move_in.thana,
        agent_id=move_in.agent_id,
    )


@router.put("/{customer_id}/agent-close", response_model=CustomerRead)
async def agent_close_customer(
    customer_id: int,
    close_in: CustomerClose,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    customer = customer_service.get_customer(db, customer_id)
    return lifecycle.agent_close_customer(db, customer, close_in.reason, current_user)


@router.put("/{customer_id}/reopen", response_model=CustomerRead)
async def reopen_customer(customer_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    customer = customer_service.get_customer(db, customer_id)
    return lifecycle.reopen_customer(db, customer, current_user)
