from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Remote service
    openai_api_key: str = ""
    openai_base_url: str = "https://api.openai.com"

    # Timeouts (seconds)
    request_timeout: float = 60.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
