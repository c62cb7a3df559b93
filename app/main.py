import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.friends.router import router as friends_router
from app.api.health.router import router as health_router
from app.api.users.router import router as users_router
from app.core.config import settings
from app.core.exceptions import FriendshipError, StorageError, ValidationError

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Friendship graph API: friends, requests, suggestions and search",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(friends_router)
app.include_router(users_router)


@app.exception_handler(FriendshipError)
async def friendship_error_handler(request: Request, exc: FriendshipError):
    if isinstance(exc, StorageError):
        logger.error(f"Storage error on {request.url.path}: {exc}", exc_info=exc)
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": "Server error",
                "status_code": exc.status_code
            }
        )

    content = {
        "error": exc.message,
        "status_code": exc.status_code
    }
    if isinstance(exc, ValidationError) and exc.field:
        content["field"] = exc.field
    return JSONResponse(status_code=exc.status_code, content=content)


@app.exception_handler(404)
async def not_found_handler(request: Request, exc: Exception):
    return JSONResponse(
        status_code=404,
        content={
            "error": "Not found",
            "path": str(request.url),
            "status_code": 404
        }
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unexpected error: {str(exc)}", exc_info=True)

    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "status_code": 500
        }
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host="127.0.0.1",
        port=8000,
        log_level="info",
    )
