# feedscout/main.py
from __future__ import annotations

from pathlib import Path
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

from feedscout.core.config import settings
from feedscout.core.logging import setup_logging
from feedscout.api.routes_feeds import router as feeds_router


PROJECT_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(dotenv_path=PROJECT_ROOT / ".env", override=False)

setup_logging(settings.log_level)

app = FastAPI(title="feedscout - descubrimiento y normalización de feeds")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(feeds_router, prefix="/feeds", tags=["feeds"])


@app.get("/health")
def health_check():
    return {"status": "ok", "version": "0.1.0", "env": settings.env}
