from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # "openai" needs OPENAI_API_KEY at startup; "mock" runs the offline keyword NLU
    NLU_PROVIDER: str = "openai"

    OPENAI_API_KEY: str | None = None
    OPENAI_MODEL_NLU: str = "gpt-4o-mini"
    OPENAI_TEMPERATURE_NLU: float = 0.0
    OPENAI_TIMEOUT_SECONDS: float = 10.0

    RESTAURANT_NAME: str = "our restaurant"
    RESTAURANT_TIMEZONE: str = "UTC"
    DEFAULT_CONVERSATION_ID: str = "default"

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"
    HOST: str = "0.0.0.0"
    PORT: int = 3000


settings = Settings()
