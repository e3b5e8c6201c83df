from os import getenv


class ConfigError(RuntimeError):
    """Configuration invalide au démarrage"""


class Settings:
    def __init__(self):
        # Pas de secret par défaut : on refuse de démarrer sans JWT_SECRET
        self.JWT_SECRET = getenv("JWT_SECRET", "")
        if not self.JWT_SECRET:
            raise ConfigError("JWT_SECRET must be set")
        self.APP_ENV = getenv("APP_ENV", "development")
        self.LOG_LEVEL = getenv("LOG_LEVEL", "INFO")

    @property
    def is_production(self) -> bool:
        return self.APP_ENV == "production"


settings = Settings()
