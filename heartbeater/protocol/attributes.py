"""
Formato e serialização dos atributos do heartbeat.

Cada atributo é codificado em TLV:
┌────────────┬──────────────┬─────────────────┐
│ Identifier │    Length    │     Payload     │
│   1 byte   │   2 bytes    │    N bytes      │
└────────────┴──────────────┴─────────────────┘
Length = N + 3 (inclui o header), big-endian.

O bloco de atributos é a concatenação dos atributos pela ordem
escolhida pelo chamador. Não há padding nem terminador.
"""

import struct
from dataclasses import dataclass
from typing import Iterable

from heartbeater.utils.constants import (
    ValueKind,
    ATTRIBUTE_HEADER_FORMAT,
    ATTRIBUTE_HEADER_SIZE,
    ATTRIBUTE_MAX_PAYLOAD,
    DEFAULT_TYPE_TAG,
    UINT8_MAX,
)
from heartbeater.utils.logger import get_logger

logger = get_logger("attributes")


@dataclass(frozen=True)
class Attribute:
    """
    Um campo TLV do bloco de atributos do heartbeat.

    Attributes:
        label: Nome legível (apenas diagnóstico, não é serializado)
        identifier: Código do campo atribuído pelo protocolo (1 byte)
        type_tag: Campo reservado pelo protocolo (sempre 0, não é serializado)
        value_kind: Tipo de valor do payload (ver ValueKind, não é serializado)
        payload: Dados do atributo
    """
    label: str
    identifier: int
    type_tag: int
    value_kind: int
    payload: bytes

    def __post_init__(self):
        """Validação após inicialização."""
        for field_name in ("identifier", "type_tag", "value_kind"):
            value = getattr(self, field_name)
            if not (0 <= value <= UINT8_MAX):
                raise ValueError(f"{field_name} deve estar entre 0 e 255, recebeu {value}")

        if not isinstance(self.payload, (bytes, bytearray)):
            raise TypeError(f"payload deve ser bytes, recebeu {type(self.payload).__name__}")

        # bytearray é mutável
        if isinstance(self.payload, bytearray):
            object.__setattr__(self, "payload", bytes(self.payload))

    @classmethod
    def create(
        cls,
        label: str,
        identifier: int,
        value_kind: int,
        payload: bytes,
        type_tag: int = DEFAULT_TYPE_TAG,
    ) -> 'Attribute':
        """
        Cria um novo atributo.

        Args:
            label: Nome legível do atributo
            identifier: Código do campo
            value_kind: Tipo de valor (ver ValueKind)
            payload: Dados do atributo
            type_tag: Campo reservado (default 0)

        Returns:
            Novo atributo
        """
        return cls(
            label=label,
            identifier=identifier,
            type_tag=type_tag,
            value_kind=value_kind,
            payload=payload,
        )

    def length(self) -> int:
        """
        Calcula o valor do campo length (payload + header).

        Returns:
            Tamanho serializado do atributo

        Raises:
            ValueError: Se o payload não couber no campo length de 16 bits
        """
        if len(self.payload) > ATTRIBUTE_MAX_PAYLOAD:
            raise ValueError(
                f"Payload do atributo {self.label} demasiado grande: "
                f"máximo {ATTRIBUTE_MAX_PAYLOAD} bytes, recebeu {len(self.payload)}"
            )
        return len(self.payload) + ATTRIBUTE_HEADER_SIZE

    def size(self) -> int:
        """Alias de length()."""
        return self.length()

    def to_bytes(self) -> bytes:
        """
        Serializa o atributo para bytes.

        Returns:
            identifier(1) + length(2, big-endian) + payload
        """
        header = struct.pack(ATTRIBUTE_HEADER_FORMAT, self.identifier, self.length())
        return header + self.payload

    def __str__(self) -> str:
        """String representation para debugging."""
        return (
            f"Attribute(\n"
            f"  label={self.label},\n"
            f"  id=0x{self.identifier:02x},\n"
            f"  kind={ValueKind.to_string(self.value_kind)},\n"
            f"  payload_size={len(self.payload)} bytes\n"
            f")"
        )


def serialize_attributes(attributes: Iterable[Attribute]) -> bytes:
    """
    Serializa uma sequência de atributos.

    A ordem é preservada: determina a ordem no fio.

    Args:
        attributes: Atributos a serializar (repetições permitidas)

    Returns:
        Bloco de atributos (concatenação dos atributos serializados)
    """
    chunks = [attribute.to_bytes() for attribute in attributes]
    block = b"".join(chunks)

    logger.debug(f"Bloco de atributos serializado: {len(chunks)} atributos, {len(block)} bytes")

    return block
