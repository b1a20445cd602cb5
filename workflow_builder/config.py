from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # Security: Read from .env, never hardcode defaults here
    OPENAI_API_KEY: str

    # Model Configuration
    OPENAI_MODEL: str = "gpt-4o-mini"

    # Generation Parameters
    LLM_TEMPERATURE: float = 0.2

    # Database Configuration
    DATABASE_URL: str

    # The API process that runs workflows. The status check pings its /health
    # endpoint before probing the store and the LLM provider.
    ORCHESTRATOR_URL: str = "http://localhost:8000"

    # Upper bounds (seconds) for a single transform call and a single health probe
    STEP_TIMEOUT_SECONDS: float = 60.0
    PROBE_TIMEOUT_SECONDS: float = 5.0

    LOG_LEVEL: str = "INFO"

    # Loads from a .env file in the root directory
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

# Singleton instance
settings = Settings()
