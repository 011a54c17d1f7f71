from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Required from environment (.env / deployment secrets)
    database_url: str
    app_env: str = "development"  # development, staging, production

    # CORS origins as comma-separated values
    # Example: "https://tracker.example.com,http://localhost:5173"
    cors_allow_origins: str = "http://localhost:5173"

    log_level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR

    # Dev auth: the caller identifies itself with this header
    user_id_header: str = "x-user-id"

    # Days between an application and its follow-up reminder
    follow_up_days: int = 5

    # URL metadata scraping
    parse_url_timeout_seconds: float = 5.0
    parse_url_user_agent: str = "Mozilla/5.0"

    # Request guards
    rate_limit_parse_url_per_min: int = 10

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
