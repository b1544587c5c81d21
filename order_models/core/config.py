"""
Configuración centralizada del paquete.

Este módulo maneja las variables de entorno y configuraciones
usando Pydantic Settings para validación automática.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from order_models.version import VERSION


class Settings(BaseSettings):
    """
    Configuración del paquete usando Pydantic Settings.

    Todas las configuraciones se cargan desde variables de entorno
    con el prefijo ORDER_MODELS_ y valores por defecto apropiados
    para desarrollo.
    """

    # === CONFIGURACIÓN BÁSICA ===
    APP_NAME: str = "order-models"
    APP_VERSION: str = VERSION
    ENVIRONMENT: str = "development"
    DEBUG: bool = False

    # === CONFIGURACIÓN DE LOGGING ===
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    LOG_FILE_PATH: Optional[str] = None
    LOG_MAX_SIZE_MB: int = Field(default=10, ge=1)
    LOG_BACKUP_COUNT: int = Field(default=5, ge=0)

    # === CONFIGURACIÓN DE SERIALIZACIÓN ===
    JSON_INDENT: Optional[int] = Field(default=None, ge=0)
    LOG_PAYLOADS: bool = False  # Loggear payloads completos en DEBUG

    model_config = SettingsConfigDict(
        env_prefix="ORDER_MODELS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v):
        """Valida que el nivel de log sea válido."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"LOG_LEVEL debe ser uno de: {valid_levels}")
        return v.upper()

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v):
        """Valida que el entorno sea válido."""
        valid_envs = ["development", "staging", "production", "testing"]
        if v.lower() not in valid_envs:
            raise ValueError(f"ENVIRONMENT debe ser uno de: {valid_envs}")
        return v.lower()

    @property
    def is_production(self) -> bool:
        """Verifica si está en entorno de producción."""
        return self.ENVIRONMENT == "production"

    @property
    def is_development(self) -> bool:
        """Verifica si está en entorno de desarrollo."""
        return self.ENVIRONMENT == "development"


@lru_cache()
def get_settings() -> Settings:
    """
    Obtiene instancia singleton de configuración.

    Usa LRU cache para evitar recrear la configuración
    múltiples veces durante la ejecución.

    Returns:
        Settings: Instancia de configuración
    """
    return Settings()


def reload_settings() -> Settings:
    """
    Recarga la configuración (útil para testing).

    Returns:
        Settings: Nueva instancia de configuración
    """
    get_settings.cache_clear()
    return get_settings()


def get_environment_info() -> dict:
    """
    Obtiene información del entorno actual.

    Returns:
        dict: Información del entorno
    """
    settings = get_settings()

    return {
        "app_name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
        "debug": settings.DEBUG,
        "is_production": settings.is_production,
        "is_development": settings.is_development,
        "log_level": settings.LOG_LEVEL,
        "serialization": {
            "json_indent": settings.JSON_INDENT,
            "log_payloads": settings.LOG_PAYLOADS,
        },
    }
