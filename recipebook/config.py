from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


BASE_DIR = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="RECIPEBOOK_", env_file=".env")

    title: str = "Recipe Book"
    database_url: str = "sqlite:///./recipes.db"
    templates_dir: Path = BASE_DIR / "templates"
    seed_file: Path = BASE_DIR / "data" / "recipes.json"
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()
