from typing import Optional

from fastapi import APIRouter, Body, Path

from schemas import Item, User

router = APIRouter(prefix="/body-multiple", tags=["Body - multiple parameters"])


# several body parameters: FastAPI expects {"item": {...}, "user": {...}, "importance": 5}
@router.put("/items/{item_id}")
async def update_item(item_id: int, item: Item, user: User, importance: int = Body(..., gt=0)):
    return {"item_id": item_id, "item": item, "user": user, "importance": importance}


@router.put("/embedded/{item_id}")
async def update_embedded_item(item_id: int, item: Item = Body(..., embed=True)):
    return {"item_id": item_id, "item": item}


@router.put("/optional/{item_id}")
async def update_optional_item(
    item_id: int = Path(..., ge=0, le=1000),
    q: Optional[str] = None,
    item: Optional[Item] = None,
):
    results = {"item_id": item_id}
    if q:
        results.update({"q": q})
    if item:
        results.update({"item": item})
    return results
