"""
Constantes globais do heartbeater.

Define identificadores de atributos, tipos de valor, tamanhos do formato
TLV e configurações default.
"""

# ============================================================================
# Formato TLV dos atributos
# ============================================================================

# Header = Identifier (1 byte) + Length (2 bytes, big-endian)
ATTRIBUTE_ID_SIZE = 1
ATTRIBUTE_LENGTH_SIZE = 2
ATTRIBUTE_HEADER_SIZE = ATTRIBUTE_ID_SIZE + ATTRIBUTE_LENGTH_SIZE

# O campo length inclui o header
ATTRIBUTE_MAX_LENGTH = 0xFFFF
ATTRIBUTE_MAX_PAYLOAD = ATTRIBUTE_MAX_LENGTH - ATTRIBUTE_HEADER_SIZE

# Formato struct do header
ATTRIBUTE_HEADER_FORMAT = "!BH"

# Tamanhos dos payloads fixos (em bytes)
MAC_ADDRESS_SIZE = 4

UINT8_MAX = 0xFF
UINT32_MAX = 0xFFFFFFFF

# ============================================================================
# Value Kinds
# ============================================================================

class ValueKind:
    """Tipos de valor dos atributos (metadata, não vai para o fio)."""
    INTEGER = 0x0   # Inteiro de 32 bits
    BINARY = 0x1    # Binário / IP
    TEXT = 0x2      # Texto UTF-8

    @staticmethod
    def to_string(kind: int) -> str:
        """Converte value kind para string."""
        mapping = {
            0x0: "INTEGER",
            0x1: "BINARY",
            0x2: "TEXT",
        }
        return mapping.get(kind, f"UNKNOWN(0x{kind:02x})")

# ============================================================================
# Attribute Identifiers
# ============================================================================

class AttributeId:
    """Identificadores dos atributos definidos pelo protocolo."""
    USER_NAME = 0x01
    CLIENT_IP_ADDRESS = 0x02
    CLIENT_VERSION = 0x03
    CLIENT_TYPE = 0x04
    OS_VERSION = 0x05
    OS_LANG = 0x06
    CPU_INFO = 0x08
    MAC_ADDRESS = 0x09
    MEMORY_SIZE = 0x0A
    DEFAULT_EXPLORER = 0x0B
    KEEPALIVE_TIME = 0x12
    KEEPALIVE_DATA = 0x14

    @staticmethod
    def to_string(identifier: int) -> str:
        """Converte identifier para o nome do atributo."""
        mapping = {
            0x01: "User-Name",
            0x02: "Client-IP-Address",
            0x03: "Client-Version",
            0x04: "Client-Type",
            0x05: "OS-Version",
            0x06: "OS-Lang",
            0x08: "CPU-Info",
            0x09: "MAC-Address",
            0x0A: "Memory-Size",
            0x0B: "Default-Explorer",
            0x12: "KeepAlive-Time",
            0x14: "KeepAlive-Data",
        }
        return mapping.get(identifier, f"UNKNOWN(0x{identifier:02x})")

# O protocolo reserva este campo, sempre 0
DEFAULT_TYPE_TAG = 0x0

# ============================================================================
# Keepalive
# ============================================================================

# Salt do primeiro heartbeat (não há token anterior)
KEEPALIVE_SEED = "llwl"

# MD5 = 16 bytes = 32 caracteres hex
KEEPALIVE_DIGEST_SIZE = 16
KEEPALIVE_TOKEN_SIZE = KEEPALIVE_DIGEST_SIZE * 2

# ============================================================================
# Paths
# ============================================================================

DEFAULT_LOGS_DIR = "./logs"

# ============================================================================
# Logging
# ============================================================================

# Nível de log default
LOG_LEVEL_INFO = "INFO"

# ============================================================================
# Misc
# ============================================================================

# Encoding dos atributos de texto
DEFAULT_ENCODING = "utf-8"
