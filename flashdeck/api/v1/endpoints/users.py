"""
User CRUD endpoints.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session
from typing import List

from flashdeck.api.v1.endpoints.dependencies import verify_access_token
from flashdeck.core.database import get_session
from flashdeck.schemas.card import RowsAffectedResponse
from flashdeck.schemas.user import UserForm, UserResponse
from flashdeck.services import record_store

router = APIRouter(
    prefix="/users",
    tags=["users"],
    dependencies=[Depends(verify_access_token)]
)


@router.get("", response_model=List[UserResponse])
def get_users(session: Session = Depends(get_session)):
    """Get all users."""
    return [UserResponse.model_validate(user) for user in record_store.read_users(session)]


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: int, session: Session = Depends(get_session)):
    """Get a user by ID."""
    user = record_store.read_user(session, user_id)
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return UserResponse.model_validate(user)


@router.post("", response_model=RowsAffectedResponse, status_code=status.HTTP_201_CREATED)
def post_user(user_form: UserForm, session: Session = Depends(get_session)):
    """Create a user. Name and email are required."""
    return RowsAffectedResponse(rows_affected=record_store.create_user(session, user_form))


@router.put("/{user_id}", response_model=RowsAffectedResponse)
def put_user(user_id: int, user_form: UserForm, session: Session = Depends(get_session)):
    """Update the provided fields of a user."""
    return RowsAffectedResponse(rows_affected=record_store.update_user(session, user_id, user_form))


@router.delete("/{user_id}", response_model=RowsAffectedResponse)
def delete_user(user_id: int, session: Session = Depends(get_session)):
    """Delete a user with all of their decks and cards."""
    return RowsAffectedResponse(rows_affected=record_store.delete_user(session, user_id))
