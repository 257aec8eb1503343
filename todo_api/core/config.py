"""Service-wide configuration.

Settings are read from the environment (and an optional env file) so the same
code runs locally against a development database and in production behind the
prebuilt frontend bundle.
"""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Shown by the client view until the first quote arrives
DEFAULT_QUOTE = (
    "Productivity is never an accident. It is always the result of a commitment "
    "to excellence, intelligent planning, and focused effort."
)


class Settings(BaseSettings):
    MONGO_URL: str = 'mongodb://localhost:27017'  # connection string of the mongo server
    DB_NAME: str = 'todoDB'  # database holding the todo collection
    COLLECTION: str = 'todos'

    HOST: str = '0.0.0.0'
    PORT: int = 8000
    NODE_ENV: str = 'development'  # `production` also serves the frontend bundle

    CORS_ORIGIN: str = 'http://localhost:5173'
    STATIC_DIR: Path = Path('frontend/dist')

    # Client view
    API_URL: str = 'http://localhost:8000'
    QUOTE_URL: str = 'https://dummyjson.com/quotes/random'
    QUOTE_INTERVAL: float = 5.0  # seconds between quote fetches

    LOG_LEVEL: str = 'INFO'

    model_config = SettingsConfigDict(case_sensitive=True, extra='ignore')

    @property
    def is_production(self) -> bool:
        return self.NODE_ENV == 'production'


def load_settings(conf_file: Path | str | None = None) -> Settings:
    if conf_file is None:
        conf_file = os.environ.get('TODO_CONFIG', '.env')

    return Settings(_env_file=conf_file, _env_file_encoding='utf-8')
