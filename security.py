"""
Password hashing and bearer tokens for the auth chapter.

Tokens are HS256 JWTs whose `sub` claim is the username. A request is
authenticated when the token decodes, has not expired, and names a user
that still exists.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session

import settings
from database import get_db
from logging_setup import logger
from models import User

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/token")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def password_matches(password: str, hashed: str) -> bool:
    return pwd_context.verify(password, hashed)


def issue_token(username: str, lifetime: Optional[timedelta] = None) -> str:
    if lifetime is None:
        lifetime = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    claims = {"sub": username, "exp": datetime.now(timezone.utc) + lifetime}
    return jwt.encode(claims, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def username_from_token(token: str) -> Optional[str]:
    """Return the token's subject, or None when it is malformed, expired or unsigned by us."""
    try:
        claims = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError as exc:
        logger.info(f"rejected bearer token: {exc}")
        return None
    return claims.get("sub")


def bearer_error(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def find_user(db: Session, username: str) -> Optional[User]:
    return db.query(User).filter(User.username == username).first()


def check_credentials(db: Session, username: str, password: str) -> Optional[User]:
    user = find_user(db, username)
    if user is not None and password_matches(password, user.hashed_password):
        return user
    return None


async def get_current_user(token: str = Depends(oauth2_scheme), db: Session = Depends(get_db)) -> User:
    username = username_from_token(token)
    user = find_user(db, username) if username else None
    if user is None:
        raise bearer_error("Could not validate credentials")
    return user
