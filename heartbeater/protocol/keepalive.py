"""
Derivação do token de keepalive (KeepAlive-Data).

token = hex(MD5(timestamp_be32 + salt))

O salt é o token anterior. No primeiro heartbeat não há token anterior
e usa-se KEEPALIVE_SEED. Cada heartbeat encadeia no anterior:

    t1 = f(ts1, "llwl")
    t2 = f(ts2, t1)
    t3 = f(ts3, t2)
"""

import struct
import time
from typing import Optional

from heartbeater.security.crypto import md5_digest
from heartbeater.utils.constants import (
    KEEPALIVE_SEED,
    DEFAULT_ENCODING,
    UINT32_MAX,
)
from heartbeater.utils.logger import get_logger

logger = get_logger("keepalive")


def current_timestamp() -> int:
    """
    Timestamp UNIX atual em segundos, truncado a 32 bits.

    Returns:
        Timestamp u32
    """
    return int(time.time()) & UINT32_MAX


def calculate_keepalive_data(
    timestamp: Optional[int] = None,
    last_data: Optional[str] = None,
) -> str:
    """
    Calcula o token de keepalive.

    Args:
        timestamp: Timestamp UNIX u32 (usa o tempo atual se None)
        last_data: Token enviado no heartbeat anterior (None = primeiro heartbeat)

    Returns:
        Token de 32 caracteres hex minúsculos

    Raises:
        ValueError: Se o timestamp não couber em 32 bits
    """
    if timestamp is None:
        timestamp = current_timestamp()

    if not (0 <= timestamp <= UINT32_MAX):
        raise ValueError(f"timestamp deve estar entre 0 e {UINT32_MAX}, recebeu {timestamp}")

    salt = last_data if last_data is not None else KEEPALIVE_SEED

    token = md5_digest(struct.pack("!I", timestamp), salt.encode(DEFAULT_ENCODING)).hex()

    logger.debug(
        f"Token de keepalive calculado: ts={timestamp}, "
        f"{'encadeado' if last_data is not None else 'seed'}"
    )

    return token


derive_token = calculate_keepalive_data


class KeepaliveChain:
    """
    Mantém o último token enviado e encadeia o seguinte.

    As funções de derivação continuam puras; esta classe só guarda o
    estado do lado do chamador. Não é thread-safe: usar uma por sessão.
    """

    def __init__(self, last_token: Optional[str] = None):
        """
        Inicializa a cadeia.

        Args:
            last_token: Token já enviado (None = começa pelo seed)
        """
        self.last_token: Optional[str] = last_token
        self.count = 0

    def next_token(self, timestamp: Optional[int] = None) -> str:
        """
        Calcula o próximo token e guarda-o como último.

        Args:
            timestamp: Timestamp do heartbeat (usa o tempo atual se None)

        Returns:
            Novo token
        """
        token = calculate_keepalive_data(timestamp, self.last_token)
        self.last_token = token
        self.count += 1
        return token

    def reset(self):
        """Volta ao início da cadeia (próximo token usa o seed)."""
        logger.info(f"Cadeia de keepalive reiniciada após {self.count} tokens")
        self.last_token = None
        self.count = 0
