from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    legend_template: str = "classic"
    legend_columns: int = 2
    legend_width: int = 360
    render_cache_size: int = 256
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
