import os
from typing import Any

import sentry_sdk

# Load balancer health checks.
UNSAMPLED_PATHS = ("/health",)


def traces_sampler(ctx: dict[str, Any], sample_rate: float = 1.0) -> float:
    if "asgi_scope" in ctx:
        asgi = ctx["asgi_scope"]
        path = asgi.get("path")
        if path is not None and path.startswith(UNSAMPLED_PATHS):
            return 0.0
    return sample_rate


def setup_tracing() -> None:
    sentry_dsn = os.environ.get("SENTRY_DSN")
    sentry_environment = os.environ.get("SENTRY_ENVIRONMENT")
    if sentry_dsn is not None and sentry_environment is not None:
        sample_rate = float(os.environ.get("SENTRY_TRACES_SAMPLE_RATE", "1.0"))
        sentry_sdk.init(
            dsn=sentry_dsn,
            environment=sentry_environment,
            profiles_sample_rate=1.0,
            traces_sampler=lambda ctx: traces_sampler(ctx, sample_rate),
        )
