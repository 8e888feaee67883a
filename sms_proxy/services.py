import json
import logging
from dataclasses import dataclass
from typing import Dict, Union

import requests

from .config import Config
from .constants import OUTBOUND_TIMEOUT_SECONDS
from .errors import DeliveryError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeliveryResult:
    phone_number: str
    status_code: int
    body: str


def build_sms_body(message: str, phone_number: str) -> str:
    return json.dumps({"Message": message, "PhoneNumber": phone_number}, ensure_ascii=False, separators=(',', ':'))


def _headers(config: Config) -> Dict[str, Union[str, bytes]]:
    # A API de SMS espera as credenciais em headers próprios, não em Authorization.
    # Enviadas como bytes UTF-8: http.client só codifica str em latin-1
    return {
        "Content-Type": "application/json",
        "UserName": config.username.encode('utf-8'),
        "Password": config.password.encode('utf-8'),
    }


def send_message(config: Config, message: str, phone_number: str) -> DeliveryResult:
    """
    Envia uma mensagem para um único número via POST na URL configurada.

    Só status 200 é sucesso; qualquer outro (inclusive 201/204) vira DeliveryError
    com o status e o corpo da resposta.
    """
    body = build_sms_body(message, phone_number)
    logger.info(f"Sending request to destination API with body: {body}")

    try:
        resp = requests.post(
            config.url,
            data=body.encode('utf-8'),
            headers=_headers(config),
            timeout=OUTBOUND_TIMEOUT_SECONDS,
        )
    except requests.RequestException as exc:
        raise DeliveryError(f"failed to send HTTP request: {exc}", phone_number=phone_number)

    resp_text = resp.text
    logger.info(f"Response from destination API: {resp_text}")

    if resp.status_code != 200:
        raise DeliveryError(
            f"received non-OK response: {resp.status_code} {resp_text}",
            status_code=resp.status_code,
            body=resp_text,
            phone_number=phone_number,
        )

    return DeliveryResult(phone_number=phone_number, status_code=resp.status_code, body=resp_text)
