from typing import Optional

from fastapi import APIRouter, Path, Query

router = APIRouter(prefix="/path-validation", tags=["Path and numeric validation"])


@router.get("/items/{item_id}")
async def read_items(
    *,
    item_id: int = Path(..., title="The ID of the item to get", ge=1, le=1000),
    q: Optional[str] = None,
    size: Optional[float] = Query(None, gt=0, lt=10.5),
):
    results = {"item_id": item_id}
    if q:
        results.update({"q": q})
    if size is not None:
        results.update({"size": size})
    return results
