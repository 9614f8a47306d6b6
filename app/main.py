# Run from project root: uvicorn app.main:app --reload  (or: python -m app.main)

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.routes import router
from app.core.config import FRONTEND_URL, PORT
from app.core.errors import ApiError

logging.basicConfig(level=logging.INFO)
# httpx logs full request URLs at INFO, and the Gemini key is a query parameter.
logging.getLogger("httpx").setLevel(logging.WARNING)

logger = logging.getLogger(__name__)


app = FastAPI(title="AI Chatbot Backend")
app.add_middleware(
    CORSMiddleware,
    allow_origins=[FRONTEND_URL],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(router)


@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed JSON, a non-object body or a non-string message is the same client error as a missing message."""
    logger.info("[api] rejected body: %s", exc.errors()[:3])
    return JSONResponse(status_code=400, content={"error": "Message is required."})


if __name__ == "__main__":
    import uvicorn

    logger.info("Server is running on port %d", PORT)
    uvicorn.run(app, host="0.0.0.0", port=PORT)
