import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

@dataclass
class Settings:
    # Application settings
    app_name: str = os.getenv("APP_NAME", "Library Catalog")
    app_version: str = os.getenv("APP_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "False").lower() in ("true", "1", "yes")

    # Logging settings
    log_level: str = os.getenv("LOG_LEVEL", "WARNING")
    log_format: str = os.getenv("LOG_FORMAT", "%(name)s: %(message)s")

    # CLI settings
    default_output_mode: str = os.getenv("DEFAULT_OUTPUT_MODE", "rich")  # plain | json | rich
    show_emojis: bool = os.getenv("SHOW_EMOJIS", "True").lower() in ("true", "1", "yes")

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level.upper()


settings = Settings()
