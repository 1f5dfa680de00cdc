import os


def get_settings_module() -> str:
    # APP_ENV picks the settings module, 'development' by default
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "plexpay.settings.production"

    if env in {"test", "testing"}:
        return "plexpay.settings.testing"

    return "plexpay.settings.development"


def build_database_uri() -> str:
    """MySQL URI from DB_* variables, unless DATABASE_URL overrides it."""
    import urllib.parse

    override = os.getenv("DATABASE_URL")
    if override:
        return override

    user = os.getenv("DB_USER", "root")
    password = urllib.parse.quote_plus(os.getenv("DB_PASSWORD", ""))
    host = os.getenv("DB_HOST", "localhost")
    port = int(os.getenv("DB_PORT", "3306"))
    name = os.getenv("DB_NAME", "plexpay_db")
    return f"mysql+mysqlconnector://{user}:{password}@{host}:{port}/{name}"
