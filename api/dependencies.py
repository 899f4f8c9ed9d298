# api/dependencies.py
from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.orm import Session

from booknet.identity import ActingUser
from booknet.sa.database import get_db
from booknet.sa.repositories.user import UserRepository


def get_acting_user(
    x_user_id: int | None = Header(default=None, description="ID of the authenticated user"),
    db: Session = Depends(get_db)
) -> ActingUser:
    """Resolve the acting user from the header set by the authentication proxy"""
    if x_user_id is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing X-User-Id header")
    if UserRepository(db).get_by_id(x_user_id) is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unknown user")
    return ActingUser(id=x_user_id)
