"""Unhandled Errors — verifies the catch-all never leaks internals."""


async def test_unhandled_exception_returns_generic_500(make_client, settings):
    async with make_client(settings, raise_app_exceptions=False) as c:
        res = await c.get("/sample/boom")
    assert res.status_code == 500
    assert res.json() == {
        "statusCode": 500,
        "message": "Internal server error",
    }
    assert "secret" not in res.text


async def test_unknown_route_keeps_framework_404(sample_client):
    res = await sample_client.get("/nowhere")
    assert res.status_code == 404
