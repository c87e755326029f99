"""Configuration via environment variables."""

from pydantic_settings import BaseSettings

YOUTUBE_BASE_URL = "https://www.youtube.com"

USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_4) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/85.0.4183.83 Safari/537.36,gzip(gfe)"
)


class Settings(BaseSettings):
    model_config = {"env_prefix": "YT_TRANSCRIPT_"}

    base_url: str = YOUTUBE_BASE_URL
    user_agent: str = USER_AGENT
    request_timeout: float = 30.0
