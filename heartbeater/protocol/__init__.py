"""
Protocolo de heartbeat.

Este módulo contém a codificação do bloco de atributos do heartbeat:

- attributes: Atributo TLV e serialização
- factory: Construtores dos atributos do protocolo
- keepalive: Derivação do token de keepalive
- heartbeat: Montagem do bloco completo a partir do perfil do cliente
"""

from heartbeater.protocol.attributes import Attribute, serialize_attributes
from heartbeater.protocol.factory import (
    ATTRIBUTE_TABLE,
    AttributeFactory,
    AttributeSpec,
    make_attribute,
)
from heartbeater.protocol.keepalive import (
    KeepaliveChain,
    calculate_keepalive_data,
    current_timestamp,
    derive_token,
)
from heartbeater.protocol.heartbeat import (
    HeartbeatProfile,
    build_heartbeat_attributes,
    create_heartbeat_block,
)

__all__ = [
    'Attribute',
    'serialize_attributes',
    'ATTRIBUTE_TABLE',
    'AttributeFactory',
    'AttributeSpec',
    'make_attribute',
    'KeepaliveChain',
    'calculate_keepalive_data',
    'current_timestamp',
    'derive_token',
    'HeartbeatProfile',
    'build_heartbeat_attributes',
    'create_heartbeat_block',
]
