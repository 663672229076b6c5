from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from .config import settings
from .routers import calculator

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("courtshare")

app = FastAPI(
    title="Court Share Calculator",
    description="Split court and shuttle costs fairly by sessions played",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(calculator.router, prefix="/api")


@app.get("/health")
def health():
    return {"status": "ok", "app": settings.APP_NAME}


@app.on_event("startup")
def log_startup():
    logger.info(
        "Serving %s (%s, %s grouping, %d default rows)",
        settings.APP_NAME, settings.CURRENCY_CODE,
        settings.DIGIT_GROUPING, settings.DEFAULT_PARTICIPANT_SLOTS,
    )
