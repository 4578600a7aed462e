import pytest

from routes.query_params import LONG_DESCRIPTION


def test_defaults_return_all_items(client):
    r = client.get("/query-params/items/")
    assert r.json() == [{"item_name": "Foo"}, {"item_name": "Bar"}, {"item_name": "Baz"}]


def test_skip_and_limit(client):
    r = client.get("/query-params/items/", params={"skip": 1, "limit": 1})
    assert r.json() == [{"item_name": "Bar"}]


def test_skip_must_be_int(client):
    assert client.get("/query-params/items/", params={"skip": "one"}).status_code == 422


def test_optional_q_and_long_description(client):
    r = client.get("/query-params/items/foo", params={"q": "hello"})
    assert r.json() == {"item_id": "foo", "q": "hello", "description": LONG_DESCRIPTION}


@pytest.mark.parametrize("value", ["1", "true", "True", "on", "yes"])
def test_short_truthy_values(client, value):
    r = client.get("/query-params/items/foo", params={"short": value})
    assert r.json() == {"item_id": "foo"}


@pytest.mark.parametrize("value", ["0", "false", "off", "no"])
def test_short_falsy_values(client, value):
    r = client.get("/query-params/items/foo", params={"short": value})
    assert r.json()["description"] == LONG_DESCRIPTION


def test_short_rejects_garbage(client):
    assert client.get("/query-params/items/foo", params={"short": "maybe"}).status_code == 422


def test_multiple_path_parameters(client):
    r = client.get("/query-params/users/7/items/bar", params={"short": "true"})
    assert r.json() == {"item_id": "bar", "owner_id": 7}


def test_required_query_parameter(client):
    r = client.get("/query-params/needy/foo")
    assert r.status_code == 422
    assert r.json()["detail"][0]["loc"] == ["query", "needy"]
    assert r.json()["detail"][0]["type"] == "missing"


def test_required_query_parameter_present(client):
    r = client.get("/query-params/needy/foo", params={"needy": "sooo", "limit": 5})
    assert r.json() == {"item_id": "foo", "needy": "sooo", "skip": 0, "limit": 5}
