from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env")

    app_name: str = "HearthForge"
    debug: bool = False
    log_level: str = "INFO"

    hearth_sim_url: str = "https://api.hearthstonejson.com/v1/latest/enUS/cards.json"

    # Card id metadata is refetched once it is older than this (one week)
    card_id_refresh_seconds: float = 7 * 24 * 60 * 60

    # After a failed refresh, lookups wait this long before fetching again
    card_id_retry_seconds: float = 60.0

    http_timeout: float = 30.0


settings = Settings()


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
