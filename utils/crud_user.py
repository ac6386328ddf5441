from datetime import datetime
from sqlalchemy.orm import Session
from sqlalchemy import select, delete
from models.models_user import User, AuthToken

def get_user_by_email(db: Session, email: str) -> User | None:
    return db.execute(select(User).where(User.email == email.lower())).scalar_one_or_none()

def create_user(db: Session, *, email: str, password_hash: str) -> User:
    user = User(email=email.lower(), password_hash=password_hash)
    db.add(user)
    db.flush()
    return user

def store_token(db: Session, *, token: str, user: User, expires_at: datetime) -> AuthToken:
    record = AuthToken(token=token, user_id=user.id, email=user.email, expires_at=expires_at)
    db.add(record)
    return record

def get_token(db: Session, token: str) -> AuthToken | None:
    return db.get(AuthToken, token)

def revoke_token(db: Session, token: str) -> bool:
    result = db.execute(delete(AuthToken).where(AuthToken.token == token))
    return result.rowcount > 0

def purge_expired_tokens(db: Session, now: datetime | None = None) -> int:
    result = db.execute(delete(AuthToken).where(AuthToken.expires_at <= (now or datetime.utcnow())))
    return result.rowcount
