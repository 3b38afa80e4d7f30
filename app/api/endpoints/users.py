"""
User endpoints.

Adding and listing users is admin only. A user's own record can be read,
updated and deleted by that user or by an admin.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import ensure_admin, ensure_correct_user_or_admin
from app.core.security import create_token
from app.crud import user as user_crud
from app.schemas.common import DeletedResponse
from app.schemas.user import (
    AppliedResponse,
    UserCreatedResponse,
    UserDetailEnvelope,
    UserEnvelope,
    UserListEnvelope,
    UserNewRequest,
    UserUpdateRequest,
)

router = APIRouter(prefix="/users", tags=["Users"])


@router.post("/", status_code=201, response_model=UserCreatedResponse, dependencies=[Depends(ensure_admin)])
def create_user(request: UserNewRequest, db: Session = Depends(get_db)):
    """
    Add a user, possibly another admin, and return a token for them.

    This is not the registration endpoint; see POST /auth/register.
    """
    new_user = user_crud.register(db, request)
    token = create_token(new_user["username"], new_user["isAdmin"])
    return {"user": new_user, "token": token}


@router.get("/", response_model=UserListEnvelope, dependencies=[Depends(ensure_admin)])
def list_users(db: Session = Depends(get_db)):
    """List all users. Admin only."""
    return {"users": user_crud.find_all(db)}


@router.get("/{username}", response_model=UserDetailEnvelope, dependencies=[Depends(ensure_correct_user_or_admin)])
def get_user(username: str, db: Session = Depends(get_db)):
    """Retrieve a user and the ids of jobs they applied to."""
    return {"user": user_crud.get(db, username)}


@router.patch("/{username}", response_model=UserEnvelope, dependencies=[Depends(ensure_correct_user_or_admin)])
def update_user(username: str, request: UserUpdateRequest, db: Session = Depends(get_db)):
    """Update any of firstName, lastName, password, email."""
    data = request.model_dump(by_alias=True, exclude_unset=True)
    return {"user": user_crud.update(db, username, data)}


@router.delete("/{username}", response_model=DeletedResponse, dependencies=[Depends(ensure_correct_user_or_admin)])
def delete_user(username: str, db: Session = Depends(get_db)):
    """Delete a user."""
    user_crud.remove(db, username)
    return {"deleted": username}


@router.post(
    "/{username}/jobs/{job_id}",
    response_model=AppliedResponse,
    dependencies=[Depends(ensure_correct_user_or_admin)],
)
def apply_to_job(username: str, job_id: int, db: Session = Depends(get_db)):
    """Apply to a job on behalf of the user."""
    user_crud.apply_to_job(db, username, job_id)
    return {"applied": job_id}
