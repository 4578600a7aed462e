from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from database import get_db
from logging_setup import logger
from models import Item, User
from schemas import ItemCreate, ItemOut, ItemUpdate
from security import get_current_user

router = APIRouter(prefix="/items", tags=["Items"])


def _get_item_or_404(db: Session, item_id: int) -> Item:
    item = db.query(Item).filter(Item.id == item_id).first()
    if not item:
        raise HTTPException(status_code=404, detail="Item not found")
    return item


def _ensure_owner(item: Item, user: User):
    if item.owner_id != user.id:
        raise HTTPException(status_code=403, detail="Not authorized to modify this item")


@router.post("/", response_model=ItemOut, status_code=status.HTTP_201_CREATED)
def create_item(item_in: ItemCreate, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    item = Item(**item_in.model_dump(), owner_id=current_user.id)
    db.add(item)
    db.commit()
    db.refresh(item)
    logger.info(f"item {item.id} created by {current_user.username}")
    return item


@router.get("/", response_model=List[ItemOut])
def list_items(skip: int = Query(0, ge=0), limit: int = Query(20, ge=1, le=100), db: Session = Depends(get_db)):
    return db.query(Item).order_by(Item.id).offset(skip).limit(limit).all()


@router.get("/{item_id}", response_model=ItemOut)
def get_item(item_id: int, db: Session = Depends(get_db)):
    return _get_item_or_404(db, item_id)


@router.put("/{item_id}", response_model=ItemOut)
def update_item(
    item_id: int,
    update: ItemUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    item = _get_item_or_404(db, item_id)
    _ensure_owner(item, current_user)
    for field, value in update.model_dump(exclude_unset=True).items():
        setattr(item, field, value)
    db.commit()
    db.refresh(item)
    return item


@router.delete("/{item_id}")
def delete_item(item_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    item = _get_item_or_404(db, item_id)
    _ensure_owner(item, current_user)
    db.delete(item)
    db.commit()
    logger.info(f"item {item_id} deleted by {current_user.username}")
    return {"message": f"Item {item_id} deleted successfully."}
