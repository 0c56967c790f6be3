from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env")

    app_name: str = "MTG Converter"
    debug: bool = False

    database_url: str = "sqlite+aiosqlite:///./mtgconverter.db"

    # Durable session snapshot location and schema version.
    # Passed explicitly into SessionStore so separate environments can
    # keep separate sessions side by side.
    session_storage_key: str = "mtg-converter-session"
    session_schema_version: str = "1.0.0"


settings = Settings()


# =============================================================================
# UPLOAD LIMITS
# =============================================================================

# Only tabular exports are accepted
ACCEPTED_FILE_EXTENSIONS = frozenset({".csv"})
