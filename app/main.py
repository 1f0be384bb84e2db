from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.routes import router
from app.config import (
    ALLOWED_HEADERS,
    ALLOWED_METHODS,
    ALLOWED_ORIGIN,
    API_TITLE,
    API_VERSION,
)

app = FastAPI(
    title=API_TITLE,
    version=API_VERSION,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)

# Applied to every response, preflights are answered before routing
app.add_middleware(
    CORSMiddleware,
    allow_origins=[ALLOWED_ORIGIN],
    allow_methods=ALLOWED_METHODS,
    allow_headers=ALLOWED_HEADERS,
)

app.include_router(router)
