from resume_ingest.config import Settings, get_settings


def get_app_settings() -> Settings:
    # Overridden in tests through app.dependency_overrides
    return get_settings()
