import base64
import datetime
import json
import os
from pathlib import Path
from typing import Any, AsyncIterator, Callable
from unittest import mock

import databases
import pytest
import sqlalchemy
from httpx import ASGITransport, AsyncClient
from jwcrypto import jwk, jwt  # type: ignore
from svix.webhooks import Webhook

from evently.common.tables import metadata
from evently.users.clerk import Clerk
from evently.web.app import Auth, build_app

WEBHOOK_SECRET = "whsec_" + base64.b64encode(b"evently-webhook-test-secret!").decode()


@pytest.fixture(autouse=True)
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def database_url(tmp_path: Path) -> str:
    test_database_url = os.environ.get("TEST_DATABASE_URL")
    if test_database_url is not None:
        return test_database_url
    db_path = tmp_path / "evently.db"
    engine = sqlalchemy.create_engine(f"sqlite:///{db_path}")
    metadata.create_all(engine)
    engine.dispose()
    return f"sqlite:///{db_path}"


# NOTE: With TEST_DATABASE_URL set, migrations are not run as part of the
# tests, it's assumed the database exists and is up-to-date.
@pytest.fixture
async def database(database_url: str) -> AsyncIterator[databases.Database]:
    force_rollback = not database_url.startswith("sqlite")
    database = databases.Database(database_url, force_rollback=force_rollback)
    await database.connect()
    assert database.is_connected
    yield database
    await database.disconnect()
    assert not database.is_connected


@pytest.fixture(scope="session")
def session_key() -> jwk.JWK:
    return jwk.JWK.generate(kty="RSA", size=2048)


@pytest.fixture
def make_session(session_key: jwk.JWK) -> Callable[..., str]:
    """
    Builds a Clerk style __session token.
    """

    def _make_session(sub: str = "user_ada", **claims: Any) -> str:
        token = jwt.JWT(header={"alg": "RS256"}, claims={"sub": sub, **claims})
        token.make_signed_token(session_key)
        return str(token.serialize())

    return _make_session


@pytest.fixture
def auth(session_key: jwk.JWK) -> Auth:
    return Auth(session_key.export_to_pem().decode("utf-8"))


@pytest.fixture
def clerk() -> mock.MagicMock:
    """
    Stands in for the Clerk API so tests never call it.
    """
    return mock.create_autospec(Clerk, instance=True)


@pytest.fixture
async def api(
    database: databases.Database, auth: Auth, clerk: mock.MagicMock
) -> AsyncIterator[AsyncClient]:
    app = build_app(database, auth, clerk)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as api:
        yield api


@pytest.fixture
def webhook_secret(monkeypatch: pytest.MonkeyPatch) -> str:
    monkeypatch.setenv("WEBHOOK_SECRET", WEBHOOK_SECRET)
    return WEBHOOK_SECRET


@pytest.fixture
def sign_webhook(
    webhook_secret: str,
) -> Callable[[dict[str, Any]], tuple[str, dict[str, str]]]:
    """
    Signs a payload the way Svix does when it delivers a Clerk webhook.
    """
    counter = 0

    def _sign_webhook(payload: dict[str, Any]) -> tuple[str, dict[str, str]]:
        nonlocal counter
        counter += 1
        body = json.dumps(payload)
        msg_id = f"msg_{counter}"
        now = datetime.datetime.now(datetime.timezone.utc)
        signature = Webhook(webhook_secret).sign(msg_id, now, body)
        headers = {
            "svix-id": msg_id,
            "svix-timestamp": str(int(now.timestamp())),
            "svix-signature": signature,
            "content-type": "application/json",
        }
        return body, headers

    return _sign_webhook


@pytest.fixture
def clerk_user() -> Callable[..., dict[str, Any]]:
    """
    Builds the "data" of a Clerk user webhook event.
    """

    def _clerk_user(**overrides: Any) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": "user_ada",
            "object": "user",
            "username": "ada",
            "first_name": "Ada",
            "last_name": "Lovelace",
            "image_url": "https://img.clerk.com/ada.png",
            "email_addresses": [
                {
                    "id": "idn_work",
                    "object": "email_address",
                    "email_address": "ada@work.example.com",
                },
                {
                    "id": "idn_home",
                    "object": "email_address",
                    "email_address": "ada@example.com",
                },
            ],
            "primary_email_address_id": "idn_home",
            "public_metadata": {},
        }
        data.update(overrides)
        return data

    return _clerk_user
