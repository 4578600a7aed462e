import pytest


def test_within_bounds(client):
    r = client.get("/path-validation/items/1000", params={"q": "x", "size": 10.4})
    assert r.json() == {"item_id": 1000, "q": "x", "size": 10.4}


@pytest.mark.parametrize("item_id", [0, 1001, -5])
def test_item_id_out_of_bounds(client, item_id):
    r = client.get(f"/path-validation/items/{item_id}")
    assert r.status_code == 422
    assert r.json()["detail"][0]["loc"] == ["path", "item_id"]


@pytest.mark.parametrize("size", [0, 10.5, -1])
def test_size_out_of_bounds(client, size):
    r = client.get("/path-validation/items/1", params={"size": size})
    assert r.status_code == 422
    assert r.json()["detail"][0]["loc"] == ["query", "size"]


def test_path_title_in_schema(client):
    params = client.get("/openapi.json").json()["paths"]["/path-validation/items/{item_id}"]["get"]["parameters"]
    item_id = next(p for p in params if p["name"] == "item_id")
    assert item_id["schema"]["title"] == "The ID of the item to get"
    assert item_id["schema"]["minimum"] == 1
    assert item_id["schema"]["maximum"] == 1000
