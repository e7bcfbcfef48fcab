from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    GROQ_API_URL: str = "https://api.groq.com/openai/v1"
    GROQ_API_KEY: str = ""
    GROQ_MODEL: str = "llama-3.3-70b-versatile"

    # Generation params
    TEMPERATURE: float = 0.4
    MAX_OUTPUT_TOKENS: int = 800
    REQUEST_TIMEOUT: float = 60.0

    # Unknown mode -> 400 instead of falling back to safe_qa
    STRICT_MODE: bool = False

    STORE_DIR: str = ".mentor_store"
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

settings = Settings()


def get_settings() -> Settings:
    return settings
