"""RaDixpert AI service — FastAPI app with lifespan-managed inference clients."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from radixpert.chat.relay import ChatRelay
from radixpert.clients.openai_vision import VisionClient
from radixpert.config import settings
from radixpert.middleware.cors import RelayCORSMiddleware
from radixpert.reports.gateway import ReportGateway
from radixpert.routes.chat import router as chat_router
from radixpert.routes.health import router as health_router
from radixpert.routes.report import router as report_router

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the inference clients and relays, close them on shutdown."""
    vision = VisionClient(settings)
    app.state.report_gateway = ReportGateway(vision)
    app.state.chat_relay = ChatRelay(settings)

    if not settings.openai_api_key:
        logger.warning("OPENAI_API_KEY is not set; relay requests will fail with 500")

    logger.info("RaDixpert AI service started — relays ready")
    yield

    await vision.close()
    logger.info("RaDixpert AI service shutdown — clients closed")


app = FastAPI(title="RaDixpert Radiology AI Service", lifespan=lifespan)

app.add_middleware(RelayCORSMiddleware)

app.include_router(health_router)
app.include_router(chat_router)
app.include_router(report_router)
