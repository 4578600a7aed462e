from typing import List, Optional

from fastapi import APIRouter, Header, HTTPException, Response, status

import settings

router = APIRouter(prefix="/headers", tags=["Headers"])


# user_agent is read from the User-Agent header: underscores become hyphens
@router.get("/items/")
async def read_items(user_agent: Optional[str] = Header(None)):
    return {"User-Agent": user_agent}


@router.get("/strange/")
async def read_strange(strange_header: Optional[str] = Header(None, convert_underscores=False)):
    return {"strange_header": strange_header}


# duplicate X-Token headers are collected into the list
@router.get("/tokens/")
async def read_tokens(x_token: Optional[List[str]] = Header(None)):
    return {"X-Token values": x_token}


@router.get("/required/")
async def read_required(response: Response, x_key: str = Header(...)):
    if x_key != settings.API_KEY:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="X-Key header invalid")
    response.headers["X-Process-Note"] = "key accepted"
    return {"x_key": x_key}
