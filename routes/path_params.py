from enum import Enum

from fastapi import APIRouter

router = APIRouter(prefix="/path-params", tags=["Path parameters"])


class ModelName(str, Enum):
    alexnet = "alexnet"
    resnet = "resnet"
    lenet = "lenet"


@router.get("/items/{item_id}")
def read_item(item_id: int):
    return {"item_id": item_id}


# fixed path has to be declared before /users/{user_id} or it would be read as a user_id
@router.get("/users/me")
def read_user_me():
    return {"user_id": "the current user"}


@router.get("/users/{user_id}")
def read_user(user_id: str):
    return {"user_id": user_id}


@router.get("/models/{model_name}")
def get_model(model_name: ModelName):
    if model_name is ModelName.alexnet:
        return {"model_name": model_name, "message": "Deep Learning FTW!"}
    if model_name.value == "lenet":
        return {"model_name": model_name, "message": "LeCNN all the images"}
    return {"model_name": model_name, "message": "Have some residuals"}


@router.get("/files/{file_path:path}")
def read_file(file_path: str):
    return {"file_path": file_path}
