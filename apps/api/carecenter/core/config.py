from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_env: str = "dev"
    app_version: str = "1.0.0"
    root_path: str = ""
    api_prefix: str = "/api"
    log_level: str = "INFO"
    server_host: str = "0.0.0.0"
    server_port: int = 3000

    # Comma-separated; "*" keeps the demo open to any frontend origin.
    cors_allow_origins: str = "*"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def cors_origins(self) -> list[str]:
        return [item.strip() for item in self.cors_allow_origins.split(",") if item.strip()]


settings = Settings()
