import os


class Settings:
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Optioneel: logs ook naar de database (leeg = alleen stdout)
    DATABASE_URL = os.getenv("DATABASE_URL", "")

    MENU_JSON = os.getenv("MENU_JSON", "data/catalog.json")

    CURRENCY_LABEL = os.getenv("CURRENCY_LABEL", "ر.س")

    # MODE: 'dev' of 'prod'
    APP_MODE = os.getenv("APP_MODE", "dev")

settings = Settings()

def is_dev() -> bool:
    """True als de applicatie in ontwikkelmodus draait."""
    return (settings.APP_MODE or "dev").lower() == "dev"
