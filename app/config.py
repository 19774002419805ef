from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

load_dotenv()


class Settings(BaseSettings):
    # Application settings
    app_name: str = "OptiML Site Config"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"

    # Public site settings
    base_url: str = "http://localhost:4321"
    base_path: str = "/optiml-website"

    # i18n settings
    reference_locale: str = "en"
    supported_locales: list[str] = ["en", "nl"]
    prefix_reference_locale: bool = False
    strict_translations: bool = False

    # Logging settings
    log_level: str = "INFO"
    log_json: bool = True

    # CMS admin settings
    cms_cloud_project: str = "cosmic-themes/voyager"
    cms_brand_name: str = "Cosmic Themes"

    # CORS settings
    allowed_origins: list[str] = ["http://localhost:4321", "http://localhost:8000"]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


settings = Settings()
