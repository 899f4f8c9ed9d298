# api/main.py
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from booknet.config import configure_logging, get_settings
from booknet.exceptions import (
    BookNetworkError, NotFoundError, ForbiddenError,
    OperationNotPermittedError, InvalidRequestError
)
from booknet.sa.database import get_database
from api.routes import books, feedback

logger = logging.getLogger(__name__)

# Most specific first; the base class is the fallback
ERROR_STATUS = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
    (OperationNotPermittedError, status.HTTP_400_BAD_REQUEST),
    (InvalidRequestError, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (BookNetworkError, status.HTTP_400_BAD_REQUEST),
]

app = FastAPI(title="Book Network API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(books.router)
app.include_router(feedback.router)

@app.exception_handler(BookNetworkError)
async def book_network_error_handler(request: Request, exc: BookNetworkError):
    status_code = next(code for error_type, code in ERROR_STATUS if isinstance(exc, error_type))
    logger.info("%s %s -> %s: %s", request.method, request.url.path, status_code, exc)
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})

# Initialize database on startup
@app.on_event("startup")
async def startup_event():
    # Invalid configuration stops startup
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Approval guard: %s", settings.approval_guard.value)
    get_database().init_db()

@app.get("/")
async def root():
    return {"message": "Book Network API"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True
    )
