# backend/main.py

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import DEBUG, CORS_ORIGINS, HISTORY_BACKEND
from exceptions import DocSummError
from runtime import llm_provider_name
from routes.upload import router as upload_router
from routes.summarize import router as summarize_router
from routes.history import router as history_router
from logger import logger

INTERNAL_ERROR_MESSAGE = "Internal server error"

app = FastAPI(debug=DEBUG, title="DocSumm")
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
    allow_credentials=False,
)
app.include_router(upload_router, prefix="/upload", tags=["upload"])
app.include_router(summarize_router, prefix="/summarize", tags=["summarize"])
app.include_router(history_router, prefix="/history", tags=["history"])


@app.exception_handler(DocSummError)
async def docsumm_error_handler(request: Request, exc: DocSummError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
    else:
        message = "Invalid request"
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("%s %s failed with an unexpected error", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": INTERNAL_ERROR_MESSAGE})


@app.on_event("startup")
async def log_configuration():
    provider = llm_provider_name()
    if provider is None:
        logger.warning("No AI credential configured; /summarize will return 500")
    else:
        logger.info("Summaries generated with the %s chat model", provider)
    logger.info("History backend: %s", HISTORY_BACKEND)


@app.get("/")
def root():
    return {"message": "DocSumm running"}


def main():
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=DEBUG)


if __name__ == "__main__":
    main()
