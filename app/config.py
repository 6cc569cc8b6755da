from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    apper_project_id: str = ""
    apper_public_key: str = ""
    apper_base_url: str = "https://api.apper.io/v1"
    request_timeout: float = 30.0
    log_level: str = "INFO"
