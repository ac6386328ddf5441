from fastapi import FastAPI, Depends, HTTPException, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import Session
import os
import logging

from db import Base, engine, get_db
from models.models_user import User
from models.schemas_user import UserRegister, UserLogin, UserOut, TokenResponse, MessageResponse
from utils.crud_user import get_user_by_email, create_user, store_token, revoke_token, purge_expired_tokens
from utils.auth_utils import hash_password, verify_password, create_token, token_expiry
from utils.auth_deps import bearer_token, auth_user
from planner.routes import router as plans_router
from planner.ai.routes import router as assistant_router
from dotenv import load_dotenv

load_dotenv()

logging.basicConfig(level=logging.INFO)
logging.info("Emergency Planner API starting")

app = FastAPI(
    title="Emergency Planner API",
    version="1.0.0",
    docs_url="/api-docs",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=os.getenv("CORS_ORIGINS", "*").split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

Base.metadata.create_all(bind=engine)


@app.exception_handler(Exception)
async def unhandled_error(request: Request, exc: Exception):
    # the server logs the traceback itself once this handler returns
    logging.error(f"Unhandled error on {request.method} {request.url.path}: {exc!r}")
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def issue_token(db: Session, user: User) -> str:
    expires_at = token_expiry()
    token = create_token(user.id, user.email, expires_at)
    store_token(db, token=token, user=user, expires_at=expires_at)
    return token


def purge_tokens(db: Session) -> None:
    purged = purge_expired_tokens(db)
    if purged:
        logging.info(f"Purged {purged} expired tokens")


@app.post("/auth/register", response_model=TokenResponse, status_code=201, tags=["auth"], summary="Register & get token")
def register(payload: UserRegister):
    with get_db() as db:
        if get_user_by_email(db, payload.email):
            raise HTTPException(status_code=400, detail="User already exists")
        purge_tokens(db)
        user = create_user(db, email=payload.email, password_hash=hash_password(payload.password))
        token = issue_token(db, user)
        user_out = UserOut(id=user.id, email=user.email)
    logging.info(f"Registered user {user_out.id}")
    return TokenResponse(message="User registered successfully", token=token, user=user_out)


@app.post("/auth/login", response_model=TokenResponse, tags=["auth"], summary="Login")
def login(payload: UserLogin):
    with get_db() as db:
        user = get_user_by_email(db, payload.email)
        if not user or not verify_password(payload.password, user.password_hash):
            raise HTTPException(status_code=401, detail="Invalid credentials")
        purge_tokens(db)
        token = issue_token(db, user)
        user_out = UserOut(id=user.id, email=user.email)
    return TokenResponse(message="Login successful", token=token, user=user_out)


@app.post("/auth/logout", response_model=MessageResponse, tags=["auth"], summary="Revoke current token")
def logout(token: str = Depends(bearer_token)):
    with get_db() as db:
        if not revoke_token(db, token):
            raise HTTPException(status_code=401, detail="Token has been revoked or expired")
    return MessageResponse(message="Logged out successfully")


@app.get("/users/me", response_model=UserOut, tags=["users"], summary="Current user")
def me(current: UserOut = Depends(auth_user)):
    return current


@app.get("/health", tags=["meta"], summary="Health check")
def health():
    return {"status": "ok"}


app.include_router(plans_router)
app.include_router(assistant_router)
