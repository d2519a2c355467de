from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

load_dotenv()


class Settings(BaseSettings):
    # Segmentation
    max_skills: int = 20
    header_max_length: int = 50
    name_scan_lines: int = 5
    capture_experience_dates: bool = True

    # Extraction / normalization
    min_text_length: int = 10
    line_y_tolerance: float = 2.0
    # Splits "SoftwareEngineer" into "Software Engineer"; also splits
    # genuine mixed-case tokens such as "iPhone" or "JavaScript".
    split_camel_case: bool = True

    # HTTP surface
    max_upload_bytes: int = 10 * 1024 * 1024
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="RESUME_INGEST_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
