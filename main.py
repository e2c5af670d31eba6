# main.py
import routes
from contextlib import asynccontextmanager
from util.enums import Environment, Color
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.middleware.cors import CORSMiddleware
from config.settings import settings
from model.api import HealthResponse
from util.constants import InternalURIs
from util.errors import AppError, app_error_handler, request_validation_handler
from util.logger import setup_logging

setup_logging(settings.LOG_LEVEL)


@asynccontextmanager
async def lifespan(fastApi: FastAPI):
    print(f"{Color.GREEN}Server Started{Color.RESET}")
    print(f"{Color.GREEN}Explorer: {settings.EXPLORER_TX_URL}{Color.RESET}")
    try:
        yield
    finally:
        print(f"{Color.RED}Server Shutdown{Color.RESET}")


app: FastAPI = FastAPI(title="Evaluation Service", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.ALLOWED_ORIGIN],
    allow_credentials=True,  # Allow cookies and other credentials
    allow_methods=["GET", "POST"],  # Allowed HTTP Methods
    allow_headers=["Authorization", "Content-Type", "Accept"],  # Allowed HTTP Headers
)

app.add_exception_handler(AppError, app_error_handler)
app.add_exception_handler(RequestValidationError, request_validation_handler)


@app.get(InternalURIs.HEALTHZ, response_model=HealthResponse)
async def healthz():
    return {"ok": True}


routes.register_routes(app)

if __name__ == "__main__":
    import uvicorn

    reload = settings.APP_ENV == Environment.DEV
    uvicorn.run("main:app", host=settings.SERVER_HOST, port=settings.SERVER_PORT, reload=reload)
