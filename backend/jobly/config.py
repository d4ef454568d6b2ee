from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite:///jobly.sqlite"
    # Override in every deployed environment.
    secret_key: str = "jobly-development-secret-change-me-0123456789"
    jwt_algorithm: str = "HS256"
    token_ttl_seconds: int = 24 * 60 * 60  # 1 day
    api_prefix: str = ""
    host: str = "127.0.0.1"
    port: int = 8000

    model_config = {"env_prefix": "JOBLY_"}


settings = Settings()
