"""FastAPI app. Lifespan: load the allow-list once; it is read-only afterwards."""
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from tlscheck.api.tls_check import router as tls_check_router
from tlscheck.config import Settings, get_settings
from tlscheck.logging_config import configure_logging, get_logger
from tlscheck.models import HealthResponse
from tlscheck.policy.allowlists import load_allowlist

logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level, settings.log_json)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.allowlist = load_allowlist(settings)
        logger.info(
            "allowlist_loaded",
            size=len(app.state.allowlist),
            source=app.state.allowlist.source,
        )
        yield

    app = FastAPI(title=settings.app_name, debug=settings.debug, lifespan=lifespan)
    app.include_router(tls_check_router)

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        """Liveness greeting."""
        return "Hello World"

    @app.get("/health", response_model=HealthResponse)
    async def health(request: Request):
        return HealthResponse(status="ok", allowlist_size=len(request.app.state.allowlist))

    return app


class Server(uvicorn.Server):
    """uvicorn server that prints a readiness line once the socket is listening."""

    async def startup(self, sockets=None) -> None:
        await super().startup(sockets=sockets)
        if self.should_exit:
            return
        port = self.config.port
        print(f"Server is running on port :{port}\nhttp://localhost:{port}/", flush=True)


def run() -> None:
    settings = get_settings()
    config = uvicorn.Config(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
    Server(config).run()


app = create_app()


if __name__ == "__main__":
    run()
