"""Module: config."""

from pydantic_settings import BaseSettings, SettingsConfigDict


# Centralized runtime configuration loaded from environment variables.
class Settings(BaseSettings):
    # SQLAlchemy connection string; SQLite file by default, Postgres in deployment.
    database_url: str = "sqlite:///./petclinic.db"
    # Rows per page for owner search results and the vet list.
    page_size: int = 5
    # Key used to sign flash message cookies.
    secret_key: str = "change-me-petclinic-secret"
    flash_cookie_name: str = "petclinic_flash"
    log_level: str = "INFO"
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]
    # Load the classic sample data at startup when the owners table is empty.
    seed_demo_data: bool = False

    # Also load values from a local .env file.
    model_config = SettingsConfigDict(env_file=".env", env_prefix="PETCLINIC_")


# Global settings instance imported by app modules at runtime.
settings = Settings()
