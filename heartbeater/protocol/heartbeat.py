"""
Bloco de atributos do heartbeat.

O cliente envia heartbeats periódicos com a descrição da máquina e o
token de keepalive. Ordem típica dos atributos no bloco:

User-Name, Client-IP-Address, Client-Version, Client-Type, OS-Version,
OS-Lang, CPU-Info, MAC-Address, Memory-Size, Default-Explorer,
KeepAlive-Data, KeepAlive-Time

O header do pacote, checksum e envio ficam a cargo do chamador.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from heartbeater.protocol import factory
from heartbeater.protocol.attributes import Attribute, serialize_attributes
from heartbeater.protocol.keepalive import calculate_keepalive_data, current_timestamp
from heartbeater.utils.config import Config
from heartbeater.utils.logger import get_logger

logger = get_logger("heartbeat")


@dataclass
class HeartbeatProfile:
    """
    Descrição do cliente enviada em cada heartbeat.

    Attributes:
        username: Nome de utilizador da sessão
        client_ip: Endereço IPv4 do cliente ("a.b.c.d")
        client_version: Versão do cliente
        client_type: Tipo do cliente
        os_version: Versão do sistema operativo
        os_lang: Idioma do sistema operativo
        cpu_info: Descrição do CPU
        mac_address: 4 bytes
        memory_size: Memória em unidades do protocolo (u32)
        default_explorer: Browser por omissão
    """
    username: str
    client_ip: str = "0.0.0.0"
    client_version: str = ""
    client_type: str = ""
    os_version: str = ""
    os_lang: str = ""
    cpu_info: str = ""
    mac_address: bytes = b'\x00' * 4
    memory_size: int = 0
    default_explorer: str = ""

    @classmethod
    def from_config(cls, config: Config) -> 'HeartbeatProfile':
        """
        Cria o perfil a partir da configuração (.env).

        Args:
            config: Configuração carregada

        Returns:
            Novo HeartbeatProfile

        Raises:
            ValueError: Se algum valor HB_* for inválido
        """
        return cls(**config.profile())


def build_heartbeat_attributes(
    profile: HeartbeatProfile,
    timestamp: Optional[int] = None,
    last_data: Optional[str] = None,
) -> Tuple[List[Attribute], str]:
    """
    Cria a sequência de atributos de um heartbeat.

    Args:
        profile: Descrição do cliente
        timestamp: Timestamp do heartbeat (usa o tempo atual se None)
        last_data: Token do heartbeat anterior (None = primeiro heartbeat)

    Returns:
        (atributos, token) - o token deve ser passado como last_data
        no heartbeat seguinte
    """
    # Mesmo timestamp para o token e para KeepAlive-Time
    if timestamp is None:
        timestamp = current_timestamp()

    token = calculate_keepalive_data(timestamp, last_data)

    attributes = [
        factory.username(profile.username),
        factory.client_ip_address(profile.client_ip),
        factory.client_version(profile.client_version),
        factory.client_type(profile.client_type),
        factory.os_version(profile.os_version),
        factory.os_language(profile.os_lang),
        factory.cpu_info(profile.cpu_info),
        factory.mac_address(profile.mac_address),
        factory.memory_size(profile.memory_size),
        factory.default_explorer(profile.default_explorer),
        factory.keepalive_data(token),
        factory.keepalive_time(timestamp),
    ]

    logger.debug(f"Atributos de heartbeat criados: user={profile.username}, ts={timestamp}")

    return attributes, token


def create_heartbeat_block(
    profile: HeartbeatProfile,
    timestamp: Optional[int] = None,
    last_data: Optional[str] = None,
) -> Tuple[bytes, str]:
    """
    Cria o bloco de atributos serializado de um heartbeat.

    Args:
        profile: Descrição do cliente
        timestamp: Timestamp do heartbeat (usa o tempo atual se None)
        last_data: Token do heartbeat anterior

    Returns:
        (bloco, token)
    """
    attributes, token = build_heartbeat_attributes(profile, timestamp, last_data)
    return serialize_attributes(attributes), token
