"""
Construtores dos atributos definidos pelo protocolo.

A tabela ATTRIBUTE_TABLE é a única fonte dos pares (identifier, value_kind).
Os construtores só convertem os dados do chamador para o payload certo,
para que ninguém escolha identificadores à mão.

┌──────────────────┬──────┬─────────┬──────────────────────────────┐
│ Campo            │  ID  │  Kind   │ Payload                      │
├──────────────────┼──────┼─────────┼──────────────────────────────┤
│ User-Name        │ 0x01 │ TEXT    │ UTF-8                        │
│ Client-IP-Address│ 0x02 │ BINARY  │ 4 octetos IPv4               │
│ Client-Version   │ 0x03 │ TEXT    │ UTF-8                        │
│ Client-Type      │ 0x04 │ TEXT    │ UTF-8                        │
│ OS-Version       │ 0x05 │ TEXT    │ UTF-8                        │
│ OS-Lang          │ 0x06 │ TEXT    │ UTF-8                        │
│ CPU-Info         │ 0x08 │ TEXT    │ UTF-8                        │
│ MAC-Address      │ 0x09 │ TEXT    │ 4 bytes                      │
│ Memory-Size      │ 0x0A │ INTEGER │ u32 big-endian               │
│ Default-Explorer │ 0x0B │ TEXT    │ UTF-8                        │
│ KeepAlive-Time   │ 0x12 │ INTEGER │ u32 big-endian               │
│ KeepAlive-Data   │ 0x14 │ TEXT    │ UTF-8 do token hex           │
└──────────────────┴──────┴─────────┴──────────────────────────────┘
"""

import ipaddress
import struct
from dataclasses import dataclass
from typing import Dict, Union

from heartbeater.protocol.attributes import Attribute
from heartbeater.protocol.keepalive import calculate_keepalive_data
from heartbeater.utils.constants import (
    AttributeId,
    ValueKind,
    DEFAULT_ENCODING,
    MAC_ADDRESS_SIZE,
    UINT32_MAX,
)


@dataclass(frozen=True)
class AttributeSpec:
    """Entrada da tabela do protocolo."""
    label: str
    identifier: int
    value_kind: int


ATTRIBUTE_TABLE: Dict[str, AttributeSpec] = {
    "username": AttributeSpec("User-Name", AttributeId.USER_NAME, ValueKind.TEXT),
    "client_ip_address": AttributeSpec("Client-IP-Address", AttributeId.CLIENT_IP_ADDRESS, ValueKind.BINARY),
    "client_version": AttributeSpec("Client-Version", AttributeId.CLIENT_VERSION, ValueKind.TEXT),
    "client_type": AttributeSpec("Client-Type", AttributeId.CLIENT_TYPE, ValueKind.TEXT),
    "os_version": AttributeSpec("OS-Version", AttributeId.OS_VERSION, ValueKind.TEXT),
    "os_language": AttributeSpec("OS-Lang", AttributeId.OS_LANG, ValueKind.TEXT),
    "cpu_info": AttributeSpec("CPU-Info", AttributeId.CPU_INFO, ValueKind.TEXT),
    # Kind TEXT apesar do payload ser binário: é o que o servidor espera
    "mac_address": AttributeSpec("MAC-Address", AttributeId.MAC_ADDRESS, ValueKind.TEXT),
    "memory_size": AttributeSpec("Memory-Size", AttributeId.MEMORY_SIZE, ValueKind.INTEGER),
    "default_explorer": AttributeSpec("Default-Explorer", AttributeId.DEFAULT_EXPLORER, ValueKind.TEXT),
    "keepalive_time": AttributeSpec("KeepAlive-Time", AttributeId.KEEPALIVE_TIME, ValueKind.INTEGER),
    "keepalive_data": AttributeSpec("KeepAlive-Data", AttributeId.KEEPALIVE_DATA, ValueKind.TEXT),
}


def make_attribute(field: str, payload: bytes) -> Attribute:
    """
    Cria um atributo a partir da tabela do protocolo.

    Args:
        field: Nome do campo (chave de ATTRIBUTE_TABLE)
        payload: Payload já codificado

    Returns:
        Atributo com identifier e value_kind da tabela

    Raises:
        KeyError: Se o campo não existir na tabela
    """
    spec = ATTRIBUTE_TABLE[field]
    return Attribute.create(
        label=spec.label,
        identifier=spec.identifier,
        value_kind=spec.value_kind,
        payload=payload,
    )


def _encode_text(value: str) -> bytes:
    return value.encode(DEFAULT_ENCODING)


def _encode_uint32(value: int, name: str) -> bytes:
    if not (0 <= value <= UINT32_MAX):
        raise ValueError(f"{name} deve estar entre 0 e {UINT32_MAX}, recebeu {value}")
    return struct.pack("!I", value)


def username(username: str) -> Attribute:
    return make_attribute("username", _encode_text(username))


def client_ip_address(address: Union[str, ipaddress.IPv4Address]) -> Attribute:
    """
    Cria o atributo Client-IP-Address.

    Args:
        address: Endereço IPv4 (objeto ou string "a.b.c.d")

    Returns:
        Atributo com os 4 octetos em network order

    Raises:
        ValueError: Se o endereço não for IPv4 válido
    """
    return make_attribute("client_ip_address", ipaddress.IPv4Address(address).packed)


def client_version(client_version: str) -> Attribute:
    return make_attribute("client_version", _encode_text(client_version))


def client_type(client_type: str) -> Attribute:
    return make_attribute("client_type", _encode_text(client_type))


def os_version(version: str) -> Attribute:
    return make_attribute("os_version", _encode_text(version))


def os_language(language: str) -> Attribute:
    return make_attribute("os_language", _encode_text(language))


def cpu_info(cpu_info: str) -> Attribute:
    return make_attribute("cpu_info", _encode_text(cpu_info))


def mac_address(mac_address: bytes) -> Attribute:
    """
    Cria o atributo MAC-Address.

    Args:
        mac_address: Exatamente 4 bytes

    Returns:
        Atributo com os bytes tal como recebidos

    Raises:
        ValueError: Se não tiver 4 bytes
    """
    if len(mac_address) != MAC_ADDRESS_SIZE:
        raise ValueError(
            f"MAC address deve ter {MAC_ADDRESS_SIZE} bytes, recebeu {len(mac_address)}"
        )
    return make_attribute("mac_address", bytes(mac_address))


def memory_size(size: int) -> Attribute:
    """Cria o atributo Memory-Size (u32 big-endian)."""
    return make_attribute("memory_size", _encode_uint32(size, "memory_size"))


def default_explorer(explorer: str) -> Attribute:
    return make_attribute("default_explorer", _encode_text(explorer))


def keepalive_time(timestamp: int) -> Attribute:
    """Cria o atributo KeepAlive-Time (timestamp u32 big-endian)."""
    return make_attribute("keepalive_time", _encode_uint32(timestamp, "timestamp"))


def keepalive_data(data: str) -> Attribute:
    """
    Cria o atributo KeepAlive-Data.

    Args:
        data: Token hex (ver keepalive.calculate_keepalive_data)

    Returns:
        Atributo com o texto do token
    """
    return make_attribute("keepalive_data", _encode_text(data))


class AttributeFactory:
    """
    Acesso aos construtores através de um único tipo.

    Exemplo:
        AttributeFactory.username("user@DOMAIN")
    """

    username = staticmethod(username)
    client_ip_address = staticmethod(client_ip_address)
    client_version = staticmethod(client_version)
    client_type = staticmethod(client_type)
    os_version = staticmethod(os_version)
    os_language = staticmethod(os_language)
    cpu_info = staticmethod(cpu_info)
    mac_address = staticmethod(mac_address)
    memory_size = staticmethod(memory_size)
    default_explorer = staticmethod(default_explorer)
    keepalive_time = staticmethod(keepalive_time)
    keepalive_data = staticmethod(keepalive_data)
    calculate_keepalive_data = staticmethod(calculate_keepalive_data)
