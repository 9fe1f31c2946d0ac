"""Runtime settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="SCHEMABRIDGE_", extra="ignore")

    app_name: str = "SchemaBridge"
    env: str = "dev"
    log_level: str = "info"
    # stderr only unless enabled; the file lives under log_dir
    log_to_file: bool = False
    log_dir: str = "logs"

    # accepted and forwarded to translators, unknown fields still pass through
    strict_unknown_fields: bool = False
    # False keeps only the count in translation_completed events
    log_unknown_field_names: bool = True

    round_trip_cases_path: str = "schemabridge/config/round_trip_cases.yaml"


settings = Settings()
