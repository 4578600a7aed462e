from typing import Dict, List

from fastapi import APIRouter

from schemas import Image, NestedItem, Offer

router = APIRouter(prefix="/nested", tags=["Body - nested models"])


@router.put("/items/{item_id}")
async def update_item(item_id: int, item: NestedItem):
    return {"item_id": item_id, "item": item}


@router.post("/offers/")
async def create_offer(offer: Offer):
    return offer


@router.post("/images/multiple/")
async def create_multiple_images(images: List[Image]):
    return images


# JSON only has string keys, pydantic converts them to int
@router.post("/index-weights/")
async def create_index_weights(weights: Dict[int, float]):
    return {"weights": weights, "total": sum(weights.values())}
