"""Pacote do proxy Grafana -> gateway de SMS.

Este pacote contém:
- constants: variáveis de ambiente do processo
- errors: exceções do domínio (config, decodificação, entrega)
- config: leitura do config.json
- decoder: parsing do webhook do Grafana
- formatters: montagem do texto da mensagem
- services: integração com a API de SMS
- dispatcher: envio para cada número configurado
- controller: criação do Flask app e endpoints
- logging_config: configuração do logging do processo
"""
