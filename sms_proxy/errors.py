from typing import Optional


class ProxyError(Exception):
    """Base para os erros do proxy."""


class ConfigError(ProxyError):
    """config.json ausente, ilegível ou com tipos inválidos. Fatal no startup."""


class DecodeError(ProxyError):
    """Corpo do webhook não é JSON válido ou não tem o formato esperado."""


class DeliveryError(ProxyError):
    """Falha ao entregar uma mensagem para um número.

    status_code é None quando a falha foi de transporte (conexão, DNS, etc).
    """

    def __init__(self, message: str, status_code: Optional[int] = None, body: str = "", phone_number: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body
        self.phone_number = phone_number
