from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Values are read from process environment and optionally from `.env`.
    """

    codechef_profile_url: str = "https://www.codechef.com/users/{username}"
    fetch_timeout_seconds: float = 7.0
    user_agent: str = "codechef-card"
    min_active_days: int = 5
    fallback_max_count: int = 9
    cache_s_maxage: int = 300
    cache_stale_while_revalidate: int = 600
    log_level: str = "INFO"
    sentry_dsn: str | None = None
    environment: str = "development"
    release: str | None = None
    sentry_traces_sample_rate: float = 0.1

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def cache_control(self) -> str:
        return (
            f"s-maxage={self.cache_s_maxage}, "
            f"stale-while-revalidate={self.cache_stale_while_revalidate}"
        )
