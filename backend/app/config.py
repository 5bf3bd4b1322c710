from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_prefix": "", "case_sensitive": False}

    # App
    environment: str = "development"
    debug: bool = True
    app_name: str = "GridPilot"

    # Logging
    log_json: bool = False

    # CORS
    cors_origins: str = "http://localhost:3000,http://localhost:5173"

    # Rate limiting (simulation routes)
    simulation_rate_limit: int = 30
    simulation_rate_window_seconds: int = 60


settings = Settings()
