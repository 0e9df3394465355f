from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    allowed_origins: str = "http://localhost:3000"
    log_level: str = "INFO"

    # Number of previous turns carried into a grounded chat prompt
    chat_history_window: int = 5

    # Character budget for content sent to the document-analysis prompt
    analysis_max_chars: int = 3000

    @property
    def origins_list(self) -> list[str]:
        return [o.strip() for o in self.allowed_origins.split(",")]

    class Config:
        env_file = ".env"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
