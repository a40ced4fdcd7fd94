"""Request Validation — verifies the strict body policy and its 400 envelope.

Invariants:
    - Undeclared body fields reject the request with 400
    - Primitive values are coerced to the declared types
    - Validation bodies carry statusCode, a message list and error="Bad Request"
"""

from tests.api.sample_routes import handler_calls


async def test_unknown_field_is_rejected(sample_client):
    res = await sample_client.post(
        "/sample/posts", json={"title": "Hello", "author": "mallory"},
    )
    assert res.status_code == 400
    body = res.json()
    assert body["statusCode"] == 400
    assert body["error"] == "Bad Request"
    assert body["message"] == ["author: Extra inputs are not permitted"]
    assert handler_calls == []


async def test_primitives_are_coerced(sample_client):
    res = await sample_client.post("/sample/echo", json={"count": "5", "flag": "true"})
    assert res.status_code == 200
    assert res.json() == {"count": 5, "flag": True}


async def test_uncoercible_value_is_rejected(sample_client):
    res = await sample_client.post("/sample/echo", json={"count": "five", "flag": True})
    assert res.status_code == 400
    assert res.json()["message"][0].startswith("count: ")


async def test_missing_body_field_is_reported(sample_client):
    res = await sample_client.post("/sample/echo", json={"flag": True})
    assert res.status_code == 400
    assert res.json()["message"] == ["count: Field required"]
