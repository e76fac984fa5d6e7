from pydantic_settings import BaseSettings, SettingsConfigDict

from brickset.request import DEFAULT_ENDPOINT


class Settings(BaseSettings):
    """Client settings loaded from BRICKSET_* environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="BRICKSET_")

    api_key: str = ""
    username: str = ""
    password: str = ""

    # Saved user hash from an earlier login; skips the password prompt
    user_hash: str = ""

    endpoint: str = DEFAULT_ENDPOINT
    timeout: float = 15.0

    user_agent: str = "brickset-python/0.1"


settings = Settings()
