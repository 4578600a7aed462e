from typing import List, Optional

from fastapi import APIRouter, Query

router = APIRouter(prefix="/query-validation", tags=["Query validation"])

RESULTS = {"items": [{"item_id": "Foo"}, {"item_id": "Bar"}]}


@router.get("/items/")
async def read_items(
    q: Optional[str] = Query(None, min_length=3, max_length=50, pattern="^fixedquery$"),
):
    results = dict(RESULTS)
    if q:
        results.update({"q": q})
    return results


@router.get("/required/")
async def read_required(q: str = Query(..., min_length=3)):
    return {**RESULTS, "q": q}


# repeated keys (?q=foo&q=bar) are collected into the list
@router.get("/list/")
async def read_list(q: List[str] = Query(["foo", "bar"])):
    return {"q": q}


@router.get("/alias/")
async def read_alias(
    q: Optional[str] = Query(
        None,
        alias="item-query",
        title="Query string",
        description="Query string for the items to search in the database that have a good match",
        min_length=3,
        max_length=50,
        deprecated=True,
    ),
):
    results = dict(RESULTS)
    if q:
        results.update({"q": q})
    return results


@router.get("/hidden/")
async def read_hidden(hidden_query: Optional[str] = Query(None, include_in_schema=False)):
    if hidden_query:
        return {"hidden_query": hidden_query}
    return {"hidden_query": "Not found"}
