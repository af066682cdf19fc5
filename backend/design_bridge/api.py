import logging
import traceback
from contextlib import asynccontextmanager
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Load environment variables from .env file
load_dotenv()

from design_bridge.api_models import ErrorResponse
from design_bridge.bridge import PluginBridge
from design_bridge.config import configure_logging, get_settings
from design_bridge.exceptions import PromptValidationError, UpstreamError
from design_bridge.host import DesignHost
from design_bridge.metrics import metrics_endpoint
from design_bridge.services.scene_store_client import SceneStoreClient

log = logging.getLogger(__name__)

_settings = get_settings()
configure_logging(_settings.log_level)


# --- Lifespan: one host document and bridge per process ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    app.state.design_host = DesignHost()
    app.state.scene_store_client = SceneStoreClient(settings.save_scene_url)
    app.state.plugin_bridge = PluginBridge(app.state.design_host, app.state.scene_store_client)
    log.info(f"Design bridge started (save endpoint: {settings.save_scene_url})")
    yield
    log.info("Design bridge shutting down")


# --- Define FastAPI App ---
app = FastAPI(
    title="Design Bridge API",
    description="Renders scene descriptions into design documents and forwards prompts to a language model.",
    version="0.1.0",
    lifespan=lifespan,
)

# --- Add Middleware ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=_settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Routers ---
from design_bridge.routers import convert, health, plugin_ws, prompt, scenes

app.include_router(health.router)
app.include_router(scenes.router)
app.include_router(prompt.router)
app.include_router(convert.router)
app.include_router(plugin_ws.router)

# --- Metrics ---
app.add_route("/metrics", metrics_endpoint, methods=["GET"])


# --- Global Exception Handlers ---
_UPSTREAM_CODES = {
    401: "unauthorized",
    429: "rate_limited",
    500: "upstream_error",
}


def _error(status_code: int, message: str, code: Optional[str] = None) -> JSONResponse:
    err = ErrorResponse(error_message=message, error_code=code)
    return JSONResponse(status_code=status_code, content=err.model_dump())


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    return _error(exc.status_code, str(exc.detail))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # Undecodable or mistyped bodies are client errors, reported as 400 like a missing prompt.
    return _error(400, f"Invalid request body: {exc.errors()}", "invalid_request")


@app.exception_handler(PromptValidationError)
async def prompt_validation_handler(request: Request, exc: PromptValidationError):
    return _error(400, str(exc), "invalid_prompt")


@app.exception_handler(UpstreamError)
async def upstream_error_handler(request: Request, exc: UpstreamError):
    return _error(exc.status_code, exc.detail, _UPSTREAM_CODES.get(exc.status_code, "upstream_error"))


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    log.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}\n{traceback.format_exc()}")
    return _error(500, "Internal server error")

# To run the API: uvicorn design_bridge.api:app --reload --port 8000
