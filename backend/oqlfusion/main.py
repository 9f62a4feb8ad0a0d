import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from oqlfusion.api.v1 import router as api_router
from oqlfusion.config import get_settings

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logging.basicConfig(level=settings.log_level.upper())
    yield


app = FastAPI(
    title=settings.app_title,
    description="Translates structural variant OQL into filter queries and gene pairs",
    version=settings.app_version,
    lifespan=lifespan
)

# CORS configuration
cors_origins = settings.cors_origins
if settings.cors_allow_all:
    cors_origins = ["*"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_router, prefix="/api/v1")


@app.get("/health")
async def health_check():
    return {"status": "healthy"}
