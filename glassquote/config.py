from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "glassquote"
    CURRENCY: str = "COP"
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: str = "*"  # comma-separated

    # Used when a request omits the model's margin
    DEFAULT_PROFIT_MARGIN_PCT: float = 0.0

    class Config:
        env_file = ".env"


settings = Settings()
