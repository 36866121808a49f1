from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "Raugupatis Log"
    database_url: str = "sqlite:///./data/raugupatis.db"
    auto_create_tables: bool = False
    sql_echo: bool = False

    max_batch_name_length: int = 255
    default_temperature_unit: str = "fahrenheit"
    min_temperature_f: float = 0.0
    max_temperature_f: float = 212.0

    model_config = SettingsConfigDict(env_prefix="RAUGUPATIS_", env_file=".env", env_file_encoding="utf-8")


settings = Settings()
