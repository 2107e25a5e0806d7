import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse, JSONResponse

from .logging import setup_logging
from .settings import get_settings
from .domain import compound
from .web.api import api_router
from .web.views import view_router
from .services.metrics import get_metrics

setup_logging()
logger = logging.getLogger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "Bond yield calculator starting app_env=%s currency=%s",
        settings.app_env,
        settings.currency_symbol,
    )
    yield


def create_app() -> FastAPI:
    app = FastAPI(title="Bond Yield Calculator", lifespan=lifespan)
    app.include_router(api_router, prefix="/api")
    app.include_router(view_router)

    @app.get("/health")
    async def health():
        return JSONResponse(
            content={
                "status": "ok",
                "app_env": settings.app_env,
                "current_year": compound.current_year(),
            }
        )

    @app.get("/metrics", response_class=PlainTextResponse)
    async def metrics():
        return PlainTextResponse(get_metrics().render())

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.http_host, port=settings.http_port)
