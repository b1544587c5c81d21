"""
Sistema de manejo de errores personalizado.

Este módulo define las excepciones del paquete y utilidades para
registrar errores de forma consistente.
"""

import logging
import traceback
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)


class ErrorCode(Enum):
    """
    Códigos de error estandardizados.
    """

    UNKNOWN_ERROR = "UNKNOWN_ERROR"

    # Errores de formato de cable (wire)
    MALFORMED_PAYLOAD = "MALFORMED_PAYLOAD"
    SERIALIZATION_ERROR = "SERIALIZATION_ERROR"


class ErrorSeverity(Enum):
    """
    Niveles de severidad para errores.
    """

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class AppException(Exception):
    """
    Excepción base para todas las excepciones del paquete.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR,
        details: Optional[Dict[str, Any]] = None,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
    ):
        """
        Inicializa la excepción.

        Args:
            message: Mensaje de error
            error_code: Código de error estandardizado
            details: Información adicional del error
            severity: Severidad del error
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.severity = severity
        self.timestamp = datetime.now(timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convierte la excepción a diccionario.

        Returns:
            Dict: Representación de la excepción
        """
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code.value,
            "details": self.details,
            "severity": self.severity.value,
            "timestamp": self.timestamp.isoformat(),
        }

    def __str__(self) -> str:
        """String representation del error."""
        return f"{self.error_code.value}: {self.message}"


class MalformedPayloadException(AppException):
    """
    Excepción para payloads entrantes que no respetan el formato de cable:
    JSON inválido, un valor que no es objeto o un tipo incorrecto en una clave.
    """

    def __init__(
        self,
        message: str,
        model: str,
        errors: Optional[List[Dict[str, Any]]] = None,
        **kwargs,
    ):
        """
        Inicializa la excepción de payload malformado.

        Args:
            message: Mensaje de error
            model: Nombre del modelo que se intentaba construir
            errors: Errores de validación (formato de pydantic)
            **kwargs: Argumentos adicionales para AppException
        """
        super().__init__(
            message=message,
            error_code=ErrorCode.MALFORMED_PAYLOAD,
            severity=ErrorSeverity.LOW,
            **kwargs,
        )
        self.model = model
        self.errors = errors or []

        self.details.update({"model": model, "errors": self.errors})


class SerializationException(AppException):
    """
    Excepción para objetos que no se pueden escribir en el formato de cable.
    """

    def __init__(
        self,
        message: str,
        model: str,
        errors: Optional[List[Dict[str, Any]]] = None,
        **kwargs,
    ):
        super().__init__(
            message=message,
            error_code=ErrorCode.SERIALIZATION_ERROR,
            **kwargs,
        )
        self.model = model
        self.errors = errors or []

        self.details.update({"model": model, "errors": self.errors})


def log_error(
    exception: Exception,
    context: Optional[Dict[str, Any]] = None,
    level: int = logging.ERROR,
) -> None:
    """
    Loggea un error de manera consistente.

    Args:
        exception: Excepción a loggear
        context: Contexto adicional
        level: Nivel de logging
    """
    context = context or {}

    log_data = {
        "exception_type": type(exception).__name__,
        "exception_message": str(exception),
        "traceback": traceback.format_exc(),
        **context,
    }

    if isinstance(exception, AppException):
        message = f"{exception.error_code.value}: {exception.message}"
        log_data.update(
            {
                "error_code": exception.error_code.value,
                "severity": exception.severity.value,
            }
        )
    else:
        message = f"Unhandled exception: {type(exception).__name__}: {str(exception)}"

    logger.log(level, message, extra=log_data)
