import json
from typing import Annotated

from pydantic_settings import BaseSettings, NoDecode
from pydantic import field_validator
from pathlib import Path

_ROOT = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    visa_data_path: Path = _ROOT / "data" / "visa.json"
    # Empty string disables the placeholder lookup tier
    countries_data_path: Path | None = _ROOT / "data" / "countries.json"
    cors_origins: Annotated[list[str], NoDecode] = ["*"]
    api_prefix: str = ""
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 3000

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        if isinstance(v, str):
            # Accept JSON array or comma-separated string
            v = v.strip()
            if v.startswith("["):
                return json.loads(v)
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    @field_validator("countries_data_path", mode="before")
    @classmethod
    def blank_path_is_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("api_prefix")
    @classmethod
    def normalize_prefix(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if v and not v.startswith("/"):
            v = "/" + v
        return v

    model_config = {
        "env_file": str(_ROOT / ".env"),
        "env_file_encoding": "utf-8",
    }


settings = Settings()
