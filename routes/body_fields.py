from fastapi import APIRouter, Body

from schemas import FieldItem

router = APIRouter(prefix="/body-fields", tags=["Body - fields"])


@router.put("/items/{item_id}")
async def update_item(item_id: int, item: FieldItem = Body(..., embed=True)):
    return {"item_id": item_id, "item": item}
