from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
import uuid
import time

from ledger_ocr import __version__
from ledger_ocr.api.endpoints import parse
from ledger_ocr.common.logging_config import setup_logging, set_request_id, get_logger
from ledger_ocr.common.settings import Settings

settings = Settings.from_env()
setup_logging(settings.log_level, settings.log_file)
logger = get_logger("api.main")

app = FastAPI(title="Ledger OCR API", version=__version__)

REQUEST_ID_HEADER = "X-Request-ID"


@app.middleware("http")
async def request_context_middleware(request: Request, call_next):
    # Reuse the caller's id so the upload client and this service share one trace.
    request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
    set_request_id(request_id)
    started = time.perf_counter()

    logger.info(
        f"{request.method} {request.url.path}",
        method=request.method,
        path=request.url.path,
        client=request.client.host if request.client else "unknown",
    )

    try:
        response = await call_next(request)
    except Exception as e:
        logger.error(
            f"Request failed: {e}",
            path=request.url.path,
            elapsed_ms=round((time.perf_counter() - started) * 1000, 2),
            exc_info=True,
        )
        raise

    logger.info(
        f"{request.method} {request.url.path} -> {response.status_code}",
        status_code=response.status_code,
        elapsed_ms=round((time.perf_counter() - started) * 1000, 2),
    )
    response.headers[REQUEST_ID_HEADER] = request_id
    return response


# Upload UI dev servers
origins = [
    "http://localhost:5173",
    "http://localhost:3000",
    "http://127.0.0.1:5173",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[REQUEST_ID_HEADER],
)

app.include_router(parse.router, prefix="/api/parse", tags=["Parse"])


@app.get("/api/health")
def health_check():
    return {"status": "ok", "app": "Ledger OCR", "version": __version__}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="127.0.0.1", port=8010)
