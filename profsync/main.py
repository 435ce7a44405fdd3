# Role: FastAPI app bootstrap. Loads environment config early, configures logging, registers routers
# and error handlers, and exposes health/docs endpoints.

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import profsync.config
profsync.config.load_env()
profsync.config.configure_logging()

from profsync.api.chat import router as chat_router
from profsync.api.history import router as history_router
from profsync.core.errors import ValidationError

logger = logging.getLogger("profsync")

app = FastAPI(title="ProfSync Chat API", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(chat_router)
app.include_router(history_router)


@app.exception_handler(ValidationError)
async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": str(exc)})


@app.exception_handler(RequestValidationError)
async def handle_malformed_request(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Unparseable JSON or a body of the wrong shape is not a "missing message": report it as a server error.
    logger.warning("Rejected malformed request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=500, content={"error": "Internal Server Error"})


@app.exception_handler(Exception)
async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s", request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal Server Error"})


@app.get("/")
def root() -> dict:
    # Role: quick discoverability for clients (where are docs/health).
    return {
        "message": "ProfSync Chat API is running",
        "docs": "/docs",
        "health": "/health",
    }


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


def run() -> None:
    import uvicorn

    logger.info("Server running on port %s", profsync.config.PORT)
    uvicorn.run(app, host="0.0.0.0", port=profsync.config.PORT)


if __name__ == "__main__":
    run()
