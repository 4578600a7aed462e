from typing import Optional

from fastapi import APIRouter

router = APIRouter(prefix="/query-params", tags=["Query parameters"])

fake_items_db = [{"item_name": "Foo"}, {"item_name": "Bar"}, {"item_name": "Baz"}]

LONG_DESCRIPTION = "This is an amazing item that has a long description"


@router.get("/items/")
def read_items(skip: int = 0, limit: int = 10):
    return fake_items_db[skip : skip + limit]


@router.get("/items/{item_id}")
def read_item(item_id: str, q: Optional[str] = None, short: bool = False):
    item = {"item_id": item_id}
    if q:
        item.update({"q": q})
    if not short:
        item.update({"description": LONG_DESCRIPTION})
    return item


@router.get("/users/{user_id}/items/{item_id}")
def read_user_item(user_id: int, item_id: str, q: Optional[str] = None, short: bool = False):
    item = {"item_id": item_id, "owner_id": user_id}
    if q:
        item.update({"q": q})
    if not short:
        item.update({"description": LONG_DESCRIPTION})
    return item


# needy has no default, so it is a required query parameter
@router.get("/needy/{item_id}")
def read_needy_item(item_id: str, needy: str, skip: int = 0, limit: Optional[int] = None):
    return {"item_id": item_id, "needy": needy, "skip": skip, "limit": limit}
