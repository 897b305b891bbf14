"""RaDixpert configuration — loaded from environment variables / .env file."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # OpenAI
    openai_api_key: str = ""
    openai_base_url: str = "https://api.openai.com/v1"

    # Report generation (vision)
    report_model: str = "gpt-4o"
    report_max_tokens: int = 1500
    report_temperature: float = 0.2

    # Chat relay
    chat_model: str = "gpt-4o-mini"
    chat_temperature: float = 0.3

    # Chat service the session manager talks to
    chat_service_url: str = "http://localhost:8000/radiology-ai-chat"
    chat_service_api_key: str = ""

    # Service settings
    service_port: int = 8000
    inference_timeout_seconds: float = 60.0

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
