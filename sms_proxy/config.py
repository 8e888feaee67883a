import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from .constants import APP_PORT
from .errors import ConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ServerConfig:
    ip: str = ""
    port: str = ""
    path: str = ""


@dataclass(frozen=True)
class Config:
    server: ServerConfig = field(default_factory=ServerConfig)
    phone_numbers: Tuple[str, ...] = ()
    url: str = ""
    username: str = ""
    password: str = ""

    def listen_port(self) -> int:
        if not self.server.port:
            return APP_PORT
        try:
            return int(self.server.port)
        except ValueError:
            raise ConfigError(f"server.port inválido: {self.server.port!r}")


def _get_str(data: Dict[str, Any], key: str, where: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ConfigError(f"campo '{where}{key}' deve ser string, recebido {type(value).__name__}")
    return value


def _get_object(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"campo '{key}' deve ser objeto, recebido {type(value).__name__}")
    return value


def _get_phone_numbers(data: Dict[str, Any]) -> Tuple[str, ...]:
    value = data.get("phone_numbers")
    if value is None:
        return ()
    if not isinstance(value, list):
        raise ConfigError(f"campo 'phone_numbers' deve ser lista, recebido {type(value).__name__}")
    numbers = []
    for idx, item in enumerate(value):
        if not isinstance(item, str):
            raise ConfigError(f"phone_numbers[{idx}] deve ser string, recebido {type(item).__name__}")
        numbers.append(item)
    return tuple(numbers)


def parse_config(data: Optional[Dict[str, Any]]) -> Config:
    """
    Converte o JSON já carregado em Config.
    Não há validação de campos obrigatórios: ausentes/null viram string vazia ou lista vazia.
    """
    if data is None:
        return Config()
    if not isinstance(data, dict):
        raise ConfigError(f"config deve ser um objeto JSON, recebido {type(data).__name__}")

    server = _get_object(data, "server")
    return Config(
        server=ServerConfig(
            ip=_get_str(server, "ip", "server."),
            port=_get_str(server, "port", "server."),
            path=_get_str(server, "path", "server."),
        ),
        phone_numbers=_get_phone_numbers(data),
        url=_get_str(data, "url", ""),
        username=_get_str(data, "username", ""),
        password=_get_str(data, "password", ""),
    )


def load_config(file_path: str) -> Config:
    try:
        with open(file_path, 'r', encoding='utf-8') as fp:
            data = json.load(fp)
    except FileNotFoundError:
        raise ConfigError(f"arquivo de configuração não encontrado: {file_path}")
    except OSError as exc:
        raise ConfigError(f"falha ao ler {file_path}: {exc}")
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ConfigError(f"JSON inválido em {file_path}: {exc}")

    config = parse_config(data)
    logger.debug(f"Config carregado de {file_path}: {len(config.phone_numbers)} números, path={config.server.path!r}")
    return config
