import json

import httpx
import pytest

from evently.users.clerk import Clerk

pytestmark = pytest.mark.anyio


async def test_update_user_metadata() -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={"id": "user_ada"})

    clerk = Clerk("sk_test_123", transport=httpx.MockTransport(handler))
    await clerk.update_user_metadata("user_ada", {"userId": 42})

    assert len(requests) == 1
    request = requests[0]
    assert request.method == "PATCH"
    assert str(request.url) == "https://api.clerk.com/v1/users/user_ada/metadata"
    assert request.headers["authorization"] == "Bearer sk_test_123"
    assert json.loads(request.content) == {"public_metadata": {"userId": 42}}


async def test_update_user_metadata_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"errors": [{"code": "resource_not_found"}]})

    clerk = Clerk("sk_test_123", transport=httpx.MockTransport(handler))
    with pytest.raises(httpx.HTTPStatusError):
        await clerk.update_user_metadata("user_nobody", {"userId": 42})
