from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_prefix": "CNS_", "env_file": ".env", "env_file_encoding": "utf-8"}

    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=False)
    cors_origins: str = Field(default="*")

    source_timeout_seconds: float = Field(default=10.0, gt=0)
    max_sources: int = Field(default=30, ge=1)
    user_agent: str = Field(
        default="Mozilla/5.0 (compatible; CryptoNewsSignal/0.1; +https://github.com)"
    )

    cryptopanic_url: str = Field(default="https://cryptopanic.com/api/free/v1/posts/")
    cryptopanic_auth_token: str = Field(default="free")
    google_news_url: str = Field(default="https://news.google.com/rss/search")
    coindesk_feed_url: str = Field(default="https://www.coindesk.com/arc/outboundfeeds/rss/")

    # Legacy instant-answer search, off unless explicitly enabled
    duckduckgo_url: str = Field(default="https://api.duckduckgo.com/")
    enable_duckduckgo: bool = Field(default=False)


settings = Settings()
