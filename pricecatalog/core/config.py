from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    POCKETPRICE_API_URL: str = "https://api.pocketprice.work"
    POCKETPRICE_API_KEY: str = ""
    POCKETPRICE_CACHE_TTL: int = 3600
    POCKETPRICE_TIMEOUT_SECONDS: float = 15.0

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    STORE_PROVIDER: str = "memory"
    STORE_DIR: str = "./data/store"
    SEED_FILE: str | None = None


settings = Settings()
