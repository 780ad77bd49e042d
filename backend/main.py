import socket
import sys
import time

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api import api_router
from .config import ConfigError, get_app_config
from .logging_config import get_logger, get_logging_config, log_api_access

# Only the two exact paths are routed; "/api/" is a miss, not a redirect
app = FastAPI(title="Backend API", version="1.0.0", redirect_slashes=False)
app.include_router(api_router)

logger = get_logger("backend")

# Answers preflights; simple responses get their header from add_cors_and_log_request
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Backend stopped")


@app.exception_handler(StarletteHTTPException)
async def unsupported_method_as_not_found(request: Request, exc: StarletteHTTPException):
    # Only GET is routed; a known path with another method is a routing miss like any other
    if exc.status_code == 405:
        exc = StarletteHTTPException(status_code=404)
    return await http_exception_handler(request, exc)


@app.middleware("http")
async def add_cors_and_log_request(request: Request, call_next):
    start_time = time.time()

    try:
        response = await call_next(request)
    except Exception as e:
        process_time = time.time() - start_time
        log_api_access(request.method, request.url.path, 500, process_time, error=str(e))
        logger.error(f"{request.method} {request.url.path} failed: {e} ({process_time:.3f}s)")
        raise

    response.headers.setdefault("access-control-allow-origin", "*")
    process_time = time.time() - start_time
    log_api_access(request.method, request.url.path, response.status_code, process_time)
    return response


def bind_listener(host: str, port: int) -> socket.socket:
    """Bind the listening socket up front so a busy port fails before anything is served"""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
    except OSError:
        sock.close()
        raise
    sock.set_inheritable(True)
    return sock


def run() -> None:
    """Start the listener on the configured port; any startup failure exits with status 1"""
    get_logging_config().setup_logging()

    try:
        config = get_app_config()
    except ConfigError as e:
        logger.error(f"Listener startup failed: {e}")
        sys.exit(1)

    try:
        sock = bind_listener(config.host, config.port)
    except OSError as e:
        logger.error(f"Listener startup failed on port {config.port}: {e}")
        sys.exit(1)

    logger.info(f"Backend running on port {sock.getsockname()[1]}")

    server = uvicorn.Server(uvicorn.Config(app, host=config.host, port=config.port, log_config=None))
    try:
        server.run(sockets=[sock])
    except SystemExit as e:
        if e.code:
            logger.error(f"Listener startup failed on port {config.port} (exit code {e.code})")
            sys.exit(1)
        raise

    if not server.started:
        logger.error(f"Listener startup failed on port {config.port}")
        sys.exit(1)


if __name__ == "__main__":
    run()
