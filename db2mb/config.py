from pydantic_settings import BaseSettings, SettingsConfigDict

from db2mb import __version__

# Decked Builder assigns its own ids at or above this value to cards that
# have no Gatherer multiverse id. Those rows cannot be looked up on Scryfall.
PLACEHOLDER_ID_THRESHOLD = 1_000_000

# Scryfall rejects /cards/collection bodies with more identifiers than this
COLLECTION_BATCH_LIMIT = 75


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="DB2MB_")

    scryfall_api_url: str = "https://api.scryfall.com"
    user_agent: str = f"db2mb/{__version__}"

    placeholder_id_threshold: int = PLACEHOLDER_ID_THRESHOLD

    collection_batch_size: int = COLLECTION_BATCH_LIMIT

    # Scryfall asks for 50-100ms between requests
    request_delay: float = 0.1

    # None waits for the lookup indefinitely
    request_timeout: float | None = None


settings = Settings()
