import logging
import jwt
from fastapi import Depends, Header, HTTPException

from db import get_db
from models.schemas_user import UserOut
from utils.auth_utils import decode_token
from utils.crud_user import get_token


def bearer_token(authorization: str | None = Header(default=None)) -> str:
    if not authorization:
        raise HTTPException(status_code=401, detail="No token provided")
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise HTTPException(status_code=401, detail="Invalid token format")
    return token.strip()


def auth_user(token: str = Depends(bearer_token)) -> UserOut:
    with get_db() as db:
        record = get_token(db, token)
        if record and record.is_expired():
            db.delete(record)
            record = None
        if record:
            user_id, email = record.user_id, record.email
    if not record:
        raise HTTPException(status_code=401, detail="Token has been revoked or expired")
    try:
        data = decode_token(token)
    except jwt.PyJWTError as e:
        logging.warning(f"Token decode failed: {e}")
        raise HTTPException(status_code=401, detail="Invalid token")
    if data.get("sub") != user_id:
        logging.warning(f"Token subject mismatch for user id: {user_id}")
        raise HTTPException(status_code=401, detail="Invalid token")
    return UserOut(id=user_id, email=email)
