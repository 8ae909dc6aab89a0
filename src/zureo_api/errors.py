from typing import Optional


class ZureoError(Exception):
    """
    Base for every error the bridge reports to a caller.
    Keeps the base message plus an optional context (usually the step).
    """
    default_message = "Error de automatización en Zureo."
    status_code = 500

    def __init__(self, message: Optional[str] = None, *, context: Optional[str] = None):
        self.context = context
        final_msg = message or self.default_message
        if context:
            final_msg = f"{final_msg} | Paso: {context}"
        super().__init__(final_msg)


class MissingDependency(ZureoError):
    default_message = "Faltan módulos requeridos."


class MissingConfiguration(ZureoError):
    default_message = "Faltan variables de entorno requeridas."


class NoSessionError(ZureoError):
    default_message = "No has iniciado sesión. Usá /zureo/login primero."
    status_code = 400


class InvalidQuantityError(ZureoError):
    default_message = "Cantidad inválida."
    status_code = 400


class AuthenticationError(ZureoError):
    default_message = "Faltan credenciales de Zureo."
    status_code = 401


class NotFoundError(ZureoError):
    default_message = "Stock no encontrado."
    status_code = 404


class RemoteNavigationError(ZureoError):
    default_message = "La página de Zureo no terminó de cargar."
    status_code = 502


class ElementTimeoutError(ZureoError):
    status_code = 504

    def __init__(self, step: str, timeout: float):
        self.step = step
        self.timeout = timeout
        super().__init__(f"Timeout después de {timeout:g}s esperando: {step}")
        self.context = step
