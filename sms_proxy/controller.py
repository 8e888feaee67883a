import logging

from flask import Flask, Response, request

from .config import Config
from .constants import SERVICE_NAME, SUCCESS_MESSAGE
from .decoder import decode_alerts
from .dispatcher import relay_alerts
from .errors import ConfigError, DecodeError, DeliveryError

logger = logging.getLogger(__name__)

WEBHOOK_METHODS = ['GET', 'POST', 'PUT', 'PATCH', 'DELETE', 'OPTIONS']


def _text(body: str, status: int) -> Response:
    return Response(body, status=status, mimetype='text/plain')


def _error(body: str, status: int) -> Response:
    return _text(body + "\n", status)


def normalize_path(path: str) -> str:
    # O path é literal; "<" e ">" virariam variáveis de rota no Werkzeug
    if "<" in path or ">" in path:
        raise ConfigError(f"server.path não pode conter '<' ou '>': {path!r}")
    if not path:
        return '/'
    if not path.startswith('/'):
        return '/' + path
    return path


def create_app(config: Config):
    app = Flask(__name__)
    webhook_path = normalize_path(config.server.path)

    if webhook_path != '/health':
        @app.route('/health', methods=['GET'])
        def health():
            return {'status': 'ok', 'service': SERVICE_NAME}, 200

    def webhook():
        if request.method != 'POST':
            return _error("Invalid HTTP method", 405)

        raw_body = request.get_data()
        logger.debug(f"Received data: {raw_body[:2000]!r}")

        try:
            alerts = decode_alerts(raw_body)
        except DecodeError as exc:
            logger.warning(f"Webhook rejeitado: {exc}")
            return _error("Invalid JSON", 400)

        try:
            report = relay_alerts(config, alerts)
        except DeliveryError as exc:
            logger.error(f"Falha ao enviar para {exc.phone_number}: {exc}")
            return _error(f"Error sending message: {exc}", 500)

        logger.info(f"{report.alerts} alertas processados, {len(report.deliveries)} mensagens enviadas")
        return _text(SUCCESS_MESSAGE, 200)

    app.add_url_rule(
        webhook_path,
        endpoint='webhook',
        view_func=webhook,
        methods=WEBHOOK_METHODS,
        provide_automatic_options=False,
    )
    return app
