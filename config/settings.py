from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Listener (matches the local dev defaults)
    HOST: str = "localhost"
    PORT: int = 8000

    # Store — backend name is resolved through the store registry
    STORE_BACKEND: str = "memory"
    STORE_LATENCY_SECONDS: float = 1.0  # simulated per-lookup latency of the mock store

    # App
    APP_NAME: str = "Coin Balance Service"
    APP_VERSION: str = "0.1.0"
    LOG_LEVEL: str = "INFO"


settings = Settings()
