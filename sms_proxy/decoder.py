import json
from dataclasses import dataclass
from typing import Any, List, Union

from .errors import DecodeError


@dataclass(frozen=True)
class AlertEntry:
    title: str = ""
    description: str = ""


def _optional_str(value: Any, where: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DecodeError(f"{where} deve ser string, recebido {type(value).__name__}")
    return value


def _parse_entry(raw: Any, idx: int) -> AlertEntry:
    if raw is None:
        return AlertEntry()
    if not isinstance(raw, dict):
        raise DecodeError(f"alerts[{idx}] deve ser objeto, recebido {type(raw).__name__}")

    annotations = raw.get('annotations')
    if annotations is None:
        annotations = {}
    elif not isinstance(annotations, dict):
        raise DecodeError(f"alerts[{idx}].annotations deve ser objeto, recebido {type(annotations).__name__}")

    return AlertEntry(
        title=_optional_str(raw.get('title'), f"alerts[{idx}].title"),
        description=_optional_str(annotations.get('description'), f"alerts[{idx}].annotations.description"),
    )


def decode_alerts(raw_body: Union[bytes, str]) -> List[AlertEntry]:
    """
    Converte o corpo do webhook do Grafana em lista de AlertEntry, na ordem do payload.

    Só title e annotations.description são lidos; demais campos (labels, status,
    values...) são ignorados. Qualquer entrada inválida rejeita o payload inteiro.
    """
    if isinstance(raw_body, bytes):
        try:
            raw_body = raw_body.decode('utf-8')
        except UnicodeDecodeError as exc:
            raise DecodeError(f"corpo não é UTF-8: {exc}")

    try:
        data = json.loads(raw_body)
    except json.JSONDecodeError as exc:
        raise DecodeError(f"JSON inválido: {exc}")

    if data is None:
        return []
    if not isinstance(data, dict):
        raise DecodeError(f"payload deve ser objeto, recebido {type(data).__name__}")

    alerts = data.get('alerts')
    if alerts is None:
        return []
    if not isinstance(alerts, list):
        raise DecodeError(f"alerts deve ser lista, recebido {type(alerts).__name__}")

    return [_parse_entry(item, idx) for idx, item in enumerate(alerts)]
