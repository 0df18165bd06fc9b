from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # Snapshot file, rewritten after every mutation
    PLACES_FILE: str = "places.json"

    LOGGER: int = 20
    LOG_DIRECTORY: str = "logs"
    LOG_FILE: str = "app.log"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8082

    SERVICE_NAME: str = "Places Catalog"
    WELCOME_MESSAGE: str = "Welcome to my places service!"

    model_config = SettingsConfigDict(
        # Look for .env in the current folder OR the parent folder
        env_file=(".env", "../.env"),
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()
