import os, uuid, bcrypt, jwt
from datetime import datetime, timedelta
from dotenv import load_dotenv

load_dotenv()

JWT_SECRET = os.getenv("JWT_SECRET", "dev_secret_change_me")
JWT_ALG = "HS256"
JWT_EXP_MIN = int(os.getenv("JWT_EXP_MIN", "60"))

def hash_password(raw: str) -> str:
    return bcrypt.hashpw(raw.encode(), bcrypt.gensalt()).decode()

def verify_password(raw: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(raw.encode(), hashed.encode())
    except ValueError:
        return False

def token_expiry(expires_delta: timedelta | None = None) -> datetime:
    return datetime.utcnow() + (expires_delta or timedelta(minutes=JWT_EXP_MIN))

def create_token(sub: str, email: str, expires_at: datetime) -> str:
    to_encode = {
        "sub": sub,
        "email": email,
        "jti": uuid.uuid4().hex,
        "iat": datetime.utcnow(),
        "exp": expires_at,
    }
    return jwt.encode(to_encode, JWT_SECRET, algorithm=JWT_ALG)

def decode_token(token: str) -> dict:
    return jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALG])
