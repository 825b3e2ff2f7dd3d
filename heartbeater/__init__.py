"""
Heartbeater - codificação do heartbeat de um cliente de acesso à rede.

Módulos:
- protocol: Atributos TLV, tokens de keepalive e bloco de heartbeat
- security: Primitivas criptográficas
- utils: Constantes, configuração e logging

O logging do pacote está desligado por omissão; ver utils.logger.setup_logger.
"""

from loguru import logger

__version__ = "0.1.0"

logger.disable("heartbeater")
