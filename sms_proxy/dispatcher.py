import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, List

from .config import Config
from .decoder import AlertEntry
from .formatters import compose_message
from .services import DeliveryResult, send_message

logger = logging.getLogger(__name__)

SendFunc = Callable[[Config, str, str], DeliveryResult]


@dataclass(frozen=True)
class RelayReport:
    alerts: int = 0
    deliveries: List[DeliveryResult] = field(default_factory=list)


def dispatch_message(config: Config, message: str, send: SendFunc = send_message) -> List[DeliveryResult]:
    """
    Entrega a mensagem para cada número, na ordem do config.

    Fail-fast: o primeiro DeliveryError sobe imediatamente e os números
    restantes não são tentados.
    """
    results = []
    for phone_number in config.phone_numbers:
        results.append(send(config, message, phone_number))
    return results


def relay_alerts(config: Config, alerts: Iterable[AlertEntry], send: SendFunc = send_message) -> RelayReport:
    # Uma falha interrompe também os alertas seguintes do mesmo payload
    deliveries: List[DeliveryResult] = []
    count = 0
    for alert in alerts:
        message = compose_message(alert)
        deliveries.extend(dispatch_message(config, message, send=send))
        count += 1
    logger.debug(f"{count} alertas entregues em {len(deliveries)} envios")
    return RelayReport(alerts=count, deliveries=deliveries)
