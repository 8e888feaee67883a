import logging
import sys

from sms_proxy.config import load_config
from sms_proxy.constants import CONFIG_FILE, DEBUG_MODE, LOG_LEVEL
from sms_proxy.controller import create_app
from sms_proxy.errors import ConfigError
from sms_proxy.logging_config import configure_logging

logger = logging.getLogger("sms_proxy")


def main():
    configure_logging(LOG_LEVEL)
    try:
        config = load_config(CONFIG_FILE)
        port = config.listen_port()
        app = create_app(config)
    except ConfigError as exc:
        logger.critical(f"Error reading config: {exc}")
        sys.exit(1)

    host = config.server.ip or '0.0.0.0'
    logger.info(f"Starting server at {host}:{port}...")
    # use_reloader=False evita carregar o config duas vezes em DEBUG_MODE
    app.run(host=host, port=port, debug=DEBUG_MODE, use_reloader=False)


if __name__ == '__main__':
    main()
