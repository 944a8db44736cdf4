import json
import logging
import os
from pathlib import Path
from typing import Any

import databases
import sentry_sdk
from fastapi import Depends, FastAPI, Query, Request, Response
from fastapi.responses import HTMLResponse, JSONResponse
from jinja2_fragments.fastapi import Jinja2Blocks  # type: ignore
from svix.webhooks import Webhook

from evently.users.clerk import Clerk

from . import service
from .auth import Auth, AuthSession, session_user_id
from .schemas import parse_webhook_event
from .tracing import setup_tracing

logger = logging.getLogger(__name__)

SVIX_HEADERS = ("svix-id", "svix-timestamp", "svix-signature")

web_dir = Path(__file__).parent
templates = Jinja2Blocks(directory=web_dir / "templates")


def build_app(database: databases.Database, auth: Auth, clerk: Clerk) -> FastAPI:
    clerk_publishable_key = os.environ.get("CLERK_PUBLISHABLE_KEY")

    app = FastAPI()

    def view(
        request: Request,
        template: str,
        block_name: str | None = None,
        **kwargs: Any,
    ) -> Any:
        if block_name is None:
            block_name = request.headers.get("hx-target")

        kwargs["clerk_publishable_key"] = clerk_publishable_key
        return templates.TemplateResponse(
            request,
            template,
            kwargs,
            block_name=block_name,
        )

    @app.on_event("startup")
    async def startup() -> None:
        await database.connect()

    @app.on_event("shutdown")
    async def shutdown() -> None:
        await database.disconnect()

    @app.get("/health", response_class=HTMLResponse)
    async def check_health(request: Request) -> Any:
        return Response(status_code=200)

    @app.get("/profile", response_class=HTMLResponse)
    async def get_profile(
        request: Request,
        session: AuthSession = Depends(auth),
        events_page: int = Query(1, alias="eventsPage", ge=1),
    ) -> Any:
        # A session without a userId still renders, with an empty list.
        user_id = session_user_id(session)
        organized_events = await service.get_organized_events(
            database, user_id, events_page
        )
        return view(
            request,
            "profile.html",
            organized_events=organized_events,
            page=events_page,
        )

    @app.post("/api/webhooks")
    @app.post("/api/webhooks/route")
    async def clerk_webhook(request: Request) -> Any:
        webhook_secret = os.environ.get("WEBHOOK_SECRET")
        if not webhook_secret:
            logger.error("WEBHOOK_SECRET is not set")
            return JSONResponse(
                status_code=500, content={"error": "Server configuration error"}
            )

        svix_headers = {name: request.headers.get(name) for name in SVIX_HEADERS}
        if not all(svix_headers.values()):
            logger.error("Missing svix headers")
            return JSONResponse(
                status_code=400, content={"error": "Missing svix headers"}
            )

        try:
            body = await request.body()
            Webhook(webhook_secret).verify(body, svix_headers)
            payload = json.loads(body)
            event = parse_webhook_event(payload)
            return await service.handle_webhook_event(database, clerk, event)
        except Exception as e:
            logger.exception("Error processing webhook")
            sentry_sdk.capture_exception(e)
            return JSONResponse(
                status_code=500,
                content={"error": "Error processing webhook", "details": str(e)},
            )

    return app


def app() -> FastAPI:
    logging.basicConfig(level=logging.INFO)

    database_url = os.environ.get("DATABASE_URL")
    if database_url is None:
        database_url = os.environ.get("TEST_DATABASE_URL")
    assert database_url is not None
    database = databases.Database(database_url)

    clerk_jwt_public_key = os.environ.get("CLERK_JWT_PUBLIC_KEY")
    assert clerk_jwt_public_key is not None
    auth = Auth(clerk_jwt_public_key)

    clerk_secret_key = os.environ.get("CLERK_SECRET_KEY")
    assert clerk_secret_key is not None
    clerk = Clerk(clerk_secret_key)

    setup_tracing()

    return build_app(database, auth, clerk)
