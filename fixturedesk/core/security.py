import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt
from passlib.context import CryptContext
from fastapi.security import OAuth2PasswordBearer

from fixturedesk.core.config import settings
from fixturedesk.schemas import auth_schemas

ALGORITHM = "HS256"
ADMIN_ROLE = "admin"

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login")

def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=ALGORITHM)

def verify_token(token: str, credentials_exception) -> auth_schemas.TokenData:
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[ALGORITHM])
        username: str = payload.get("sub")
        role: str = payload.get("role")
        if username is None or role != ADMIN_ROLE:
            raise credentials_exception
        token_data = auth_schemas.TokenData(username=username, role=role)
    except JWTError:
        raise credentials_exception
    return token_data

def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)

def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)

def authenticate_admin(username: str, password: str) -> bool:
    """Checks the single admin account configured in settings."""
    if not secrets.compare_digest(username.encode(), settings.ADMIN_USERNAME.encode()):
        return False
    if settings.ADMIN_PASSWORD_HASH:
        return verify_password(password, settings.ADMIN_PASSWORD_HASH)
    return secrets.compare_digest(password.encode(), settings.ADMIN_PASSWORD.encode())
