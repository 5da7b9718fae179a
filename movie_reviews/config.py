"""
Application settings loaded from the environment (and an optional .env file)
"""
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """Runtime configuration for the API and its database connection"""

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    db_url: Optional[str] = Field(None, alias="DATABASE_URL")
    db_host: str = Field("localhost", alias="DB_HOST")
    db_user: str = Field("root", alias="DB_USER")
    db_password: str = Field("", alias="DB_PASSWORD")
    db_name: str = Field("movies", alias="DB_NAME")
    db_port: int = Field(3306, alias="DB_PORT")
    pool_size: int = Field(10, alias="DB_POOL_SIZE")
    query_timeout: int = Field(30, alias="DB_QUERY_TIMEOUT")  # Seconds
    db_echo: bool = Field(False, alias="DB_ECHO")
    port: int = Field(3000, alias="PORT")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    @field_validator("db_port", "pool_size", "query_timeout", "port", mode="before")
    @classmethod
    def fallback_on_invalid_int(cls, v, info):
        """Unset or unparsable numbers fall back to the field default"""
        try:
            return int(v)
        except (TypeError, ValueError):
            return cls.model_fields[info.field_name].default

    @field_validator("log_level")
    @classmethod
    def upper_log_level(cls, v):
        return v.upper()

    @classmethod
    def from_env(cls) -> "Settings":
        return cls()

    @property
    def database_url(self):
        """
        SQLAlchemy URL for the store.

        DATABASE_URL wins when set; otherwise a MySQL URL is assembled from
        the DB_* parts (URL.create escapes credentials).
        """
        if self.db_url:
            return self.db_url
        return URL.create(
            "mysql+pymysql",
            username=self.db_user,
            password=self.db_password or None,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )


def get_settings() -> Settings:
    return Settings.from_env()
