# config/settings.py
import os
import sys
from dotenv import load_dotenv
from pydantic import ValidationError, Field
from pydantic_settings import BaseSettings
from util.enums import Environment
from util.constants import ExternalURIs


if os.getenv("APP_ENV", Environment.DEV) == Environment.DEV:
    load_dotenv()


class Settings(BaseSettings):
    # App
    APP_ENV: Environment = Field(Environment.DEV, validation_alias="APP_ENV")
    LOG_LEVEL: str = Field("INFO", validation_alias="LOG_LEVEL")
    SERVER_HOST: str = Field("127.0.0.1", validation_alias="SERVER_HOST")
    SERVER_PORT: int = Field(8000, validation_alias="SERVER_PORT")

    # CORS
    ALLOWED_ORIGIN: str = Field(
        "http://localhost:3000", validation_alias="ALLOWED_ORIGIN"
    )

    # Mock ledger
    EXPLORER_TX_URL: str = Field(
        ExternalURIs.SEPOLIA_TX, validation_alias="EXPLORER_TX_URL"
    )

    # Chat client
    EVALUATION_API_URL: str = Field(
        "http://127.0.0.1:8000", validation_alias="EVALUATION_API_URL"
    )
    CLIENT_TIMEOUT_SECONDS: float | None = Field(
        None, validation_alias="CLIENT_TIMEOUT_SECONDS"
    )


try:
    settings = Settings()
except ValidationError as e:
    print("❌ Missing/invalid environment variables:", file=sys.stderr)
    for err in e.errors():
        loc = ".".join(str(x) for x in err.get("loc", []))
        msg = err.get("msg", "")
        print(f" - {loc}: {msg}", file=sys.stderr)
    sys.exit(1)
except Exception as e:
    print(f"❌ Settings initialization failed: {e}", file=sys.stderr)
    sys.exit(1)
