import logging
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager

from app import __version__
from app.config import get_settings
from app.api.interaction_routes import router as interaction_router
from app.commands import build_dispatcher
from app.core.storage.redis_storage import RedisSheetStorage
from app.dice.engine import get_dice_engine
from app.discord.followup import FollowUpPublisher
from app.discord.handler import InteractionHandler
from app.discord.signature import SignatureVerifier
from app.sheets.cache import SheetCache
from app.sheets.client import SheetServiceClient
from app.spells.client import SpellServiceClient

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def build_interaction_handler(storage: RedisSheetStorage) -> InteractionHandler:
    sheet_cache = SheetCache(storage, SheetServiceClient())
    dispatcher = build_dispatcher(sheet_cache, get_dice_engine(), SpellServiceClient())
    return InteractionHandler(
        verifier=SignatureVerifier(),
        dispatcher=dispatcher,
        publisher=FollowUpPublisher(),
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting dice roll interaction service...")

    # one shared store handle for the whole process
    storage = RedisSheetStorage()
    await storage.connect()
    app.state.sheet_storage = storage
    app.state.interaction_handler = build_interaction_handler(storage)
    logger.info("Interaction handler initialized")

    yield

    logger.info("Shutting down dice roll interaction service...")
    publisher = app.state.interaction_handler.publisher
    if publisher.pending:
        logger.info(f"Waiting for {publisher.pending} pending follow-up(s)")
        await publisher.drain()
    await storage.disconnect()


app = FastAPI(
    title="Dice Roll Interaction Webhook",
    description="Discord slash-command webhook for dice rolls, sheet sync and spell lookup",
    version=__version__,
    lifespan=lifespan
)

app.include_router(interaction_router)


@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "service": "dice-roll-interactions",
        "version": __version__
    }


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {str(exc)}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"}
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
