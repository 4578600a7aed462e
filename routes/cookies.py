from typing import Optional

from fastapi import APIRouter, Cookie, Response

router = APIRouter(prefix="/cookies", tags=["Cookies"])

COOKIE_NAME = "ads_id"


@router.get("/items/")
async def read_items(ads_id: Optional[str] = Cookie(None)):
    return {"ads_id": ads_id}


@router.post("/session/{value}")
async def set_session(value: str, response: Response):
    response.set_cookie(key=COOKIE_NAME, value=value, httponly=True)
    return {"message": f"Cookie {COOKIE_NAME} set", COOKIE_NAME: value}


@router.delete("/session")
async def clear_session(response: Response):
    response.delete_cookie(key=COOKIE_NAME)
    return {"message": f"Cookie {COOKIE_NAME} cleared"}
