from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy import or_
from sqlalchemy.orm import Session

from database import get_db
from logging_setup import logger
from models import User
from schemas import Token, UserCreate, UserOut
from security import bearer_error, check_credentials, get_current_user, hash_password, issue_token

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/signup", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def sign_up(user_in: UserCreate, db: Session = Depends(get_db)):
    taken = db.query(User).filter(or_(User.username == user_in.username, User.email == user_in.email)).first()
    if taken:
        raise HTTPException(status_code=400, detail="Username or email already registered")

    fields = user_in.model_dump(exclude={"password"})
    user = User(**fields, hashed_password=hash_password(user_in.password))
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info(f"user {user.username} signed up")
    return user


# OAuth2 password flow: credentials arrive as form fields, not JSON
@router.post("/token", response_model=Token)
def issue_access_token(form: OAuth2PasswordRequestForm = Depends(), db: Session = Depends(get_db)):
    user = check_credentials(db, form.username, form.password)
    if user is None:
        raise bearer_error("Incorrect username or password")
    return Token(access_token=issue_token(user.username), token_type="bearer")


@router.get("/me", response_model=UserOut)
def read_me(current_user: User = Depends(get_current_user)):
    return current_user
