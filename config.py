import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

@dataclass
class Settings:
    # Application settings
    app_name: str = os.getenv("APP_NAME", "Mini Library Management System")
    app_version: str = os.getenv("APP_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "False").lower() in ("true", "1", "yes")

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "DEBUG" if debug else "WARNING").upper()

    # Catalog settings
    load_sample_data: bool = os.getenv("LIBRARY_LOAD_SAMPLE_DATA", "True").lower() in ("true", "1", "yes")

    # CLI settings: plain | json | rich
    default_output: str = os.getenv("LIB_CLI_OUTPUT", "plain").lower()


settings = Settings()
