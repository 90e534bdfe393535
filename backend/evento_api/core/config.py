from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_ignore_empty=True)

    database_url: str
    app_name: str = "eventosApp"
    alerts_translatable: bool = False
    evento_store: Literal["sql", "memory"] = "sql"


settings = Settings()
