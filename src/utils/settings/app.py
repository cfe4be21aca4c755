from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    DEBUG: bool = False
    ENVIRONMENT: str = "DEV"
    APP_VERSION: str = "0.1.0"

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.upper() == "PROD"
