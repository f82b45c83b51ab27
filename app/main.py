import uvicorn
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.auth.router import router as router_auth
from app.config import app, settings
from app.constants.messages import INVALID_REQUEST_MESSAGE, ROOT_MESSAGE
from app.exceptions import HabitTrackerError
from app.habit.router import router as router_habit

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOW_ORIGINS,  # Use configuration from settings
    allow_credentials=settings.ALLOW_CREDENTIALS,
    allow_methods=["*"],  # Allow all methods
    allow_headers=["*"],  # Allow all headers
)


@app.exception_handler(HabitTrackerError)
async def habit_tracker_error_handler(request: Request, exc: HabitTrackerError) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.detail}")
    return JSONResponse(status_code=exc.status_code, content={"msg": exc.detail})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path} -> 400: {exc.errors()}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"msg": INVALID_REQUEST_MESSAGE})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.detail}")
    return JSONResponse(status_code=exc.status_code, content={"msg": exc.detail}, headers=exc.headers)


@app.get(settings.API_PREFIX, response_class=PlainTextResponse, tags=["Root"])
@app.get(f"{settings.API_PREFIX}/", response_class=PlainTextResponse, include_in_schema=False)
def home_page():
    return ROOT_MESSAGE


app.include_router(router_auth)
app.include_router(router_habit)


if __name__ == "__main__":
    uvicorn.run("app.main:app", host=settings.UVICORN_HOST, port=int(settings.UVICORN_PORT))
