from pydantic_settings import BaseSettings


class Settings(BaseSettings):

    docs_path: str = "./docs"

    accepted_media_types: list[str] = ["application/pdf"]
    extraction_timeout: float | None = None

    preview_length: int = 150

    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
