import os

# Arquivo de configuração (servidor, números, credenciais da API de SMS)
CONFIG_FILE = os.getenv("CONFIG_FILE", "./config.json")

DEBUG_MODE = os.getenv("DEBUG_MODE", "False").lower() == "true"
LOG_LEVEL = "DEBUG" if DEBUG_MODE else os.getenv("LOG_LEVEL", "INFO").upper()

# Porta usada apenas quando server.port vier vazio no config.json
APP_PORT = int(os.getenv("APP_PORT", "5001"))

# Sem timeout por padrão: a chamada pode bloquear enquanto o destino não responder
_timeout_env = os.getenv("OUTBOUND_TIMEOUT_SECONDS", "").strip()
OUTBOUND_TIMEOUT_SECONDS = float(_timeout_env) if _timeout_env else None

SERVICE_NAME = "grafana-sms-proxy"
SUCCESS_MESSAGE = "Alert titles and descriptions sent successfully"
