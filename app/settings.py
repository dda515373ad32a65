"""Application settings via Pydantic Settings."""

from functools import lru_cache
import json
from typing import Annotated
from urllib.parse import quote_plus

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


def _compose_mongodb_uri(user: str, password: str, host: str, db_name: str) -> str:
    """
    Build an Atlas-style SRV connection string from credentials.

    Credentials are URL-quoted so passwords containing '@' or ':' survive.
    """
    auth = ""
    if user:
        auth = quote_plus(user)
        if password:
            auth += f":{quote_plus(password)}"
        auth += "@"
    return f"mongodb+srv://{auth}{host}/{db_name}?retryWrites=true&w=majority"


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "Evergreen Nursery API"
    app_version: str = "0.1.0"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 5000

    # Database (MongoDB)
    mongodb_uri: str = Field(
        default="",
        validation_alias=AliasChoices("MONGODB_URI", "MONGO_URL"),
    )
    db_user: str = ""
    db_password: str = ""
    db_cluster_host: str = "cluster0.2g6iibi.mongodb.net"
    db_name: str = "nurseryDB"
    products_collection: str = "products"
    categories_collection: str = "category"
    mongodb_timeout_ms: int = Field(default=5000, ge=100, le=120000)

    @property
    def mongodb_url(self) -> str:
        """Get the MongoDB connection string.

        An explicit MONGODB_URI wins; otherwise one is composed from
        DB_USER / DB_PASSWORD / DB_CLUSTER_HOST.
        """
        if self.mongodb_uri:
            return self.mongodb_uri
        return _compose_mongodb_uri(
            self.db_user, self.db_password, self.db_cluster_host, self.db_name
        )

    # CORS
    cors_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["https://evergreen-nursery-client.vercel.app"],
        validation_alias=AliasChoices("CORS_ORIGINS", "ALLOWED_ORIGINS", "CLIENT_URL"),
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _parse_cors_origins(cls, v: object) -> list[str]:
        """
        Accept either:
        - JSON array string: '["https://a.com","http://localhost:3000"]'
        - Comma-separated string: "https://a.com,http://localhost:3000"
        - Already-parsed list[str]
        """
        if v is None:
            return []
        if isinstance(v, list):
            return [str(x).strip() for x in v if str(x).strip()]
        if isinstance(v, str):
            s = v.strip()
            if not s:
                return []
            if s.startswith("["):
                try:
                    parsed = json.loads(s)
                except json.JSONDecodeError:
                    parsed = s.split(",")
                if isinstance(parsed, list):
                    return [str(x).strip() for x in parsed if str(x).strip()]
                return [str(parsed).strip()]
            return [part.strip() for part in s.split(",") if part.strip()]
        return [str(v).strip()] if str(v).strip() else []

    # Errors
    expose_error_details: bool = Field(
        default=True,
        description=(
            "Echo the underlying exception text in 500 responses. "
            "Leaks store internals to clients; disable in production."
        ),
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
