"""
Gestão de configuração do projeto.

Lê variáveis de ambiente do ficheiro .env e fornece acesso centralizado
às configurações.
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional
from dotenv import load_dotenv

from heartbeater.utils.constants import (
    DEFAULT_LOGS_DIR,
    LOG_LEVEL_INFO,
)


class Config:
    """
    Classe de configuração singleton.

    Carrega configurações do .env e fornece acesso através de propriedades.
    """

    _instance: Optional['Config'] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self.reload()
        self._initialized = True

    def reload(self):
        """(Re)carrega as configurações do .env e do ambiente."""
        load_dotenv()

        # Paths
        self.logs_dir: Path = Path(os.getenv("LOGS_DIR", DEFAULT_LOGS_DIR))

        # Logging
        self.log_level: str = os.getenv("LOG_LEVEL", LOG_LEVEL_INFO)
        self.log_to_file: bool = os.getenv("LOG_TO_FILE", "false").lower() == "true"

    def profile(self) -> Dict[str, Any]:
        """
        Lê o perfil do cliente (atributos do heartbeat) do ambiente.

        Só é lido quando pedido: um valor inválido não afeta o resto do pacote.

        Returns:
            Dicionário com os campos do HeartbeatProfile

        Raises:
            ValueError: Se HB_MAC_ADDRESS não for hex ou HB_MEMORY_SIZE não for inteiro
        """
        load_dotenv()

        return {
            'username': os.getenv("HB_USERNAME", ""),
            'client_ip': os.getenv("HB_CLIENT_IP", "0.0.0.0"),
            'client_version': os.getenv("HB_CLIENT_VERSION", ""),
            'client_type': os.getenv("HB_CLIENT_TYPE", ""),
            'os_version': os.getenv("HB_OS_VERSION", ""),
            'os_lang': os.getenv("HB_OS_LANG", ""),
            'cpu_info': os.getenv("HB_CPU_INFO", ""),
            'mac_address': bytes.fromhex(os.getenv("HB_MAC_ADDRESS", "00000000")),
            'memory_size': int(os.getenv("HB_MEMORY_SIZE", 0)),
            'default_explorer': os.getenv("HB_DEFAULT_EXPLORER", ""),
        }

    def ensure_directories_exist(self):
        """Cria os diretórios necessários se não existirem."""
        self.logs_dir.mkdir(parents=True, exist_ok=True)

    def __repr__(self) -> str:
        return (
            f"Config(\n"
            f"  logs_dir={self.logs_dir},\n"
            f"  log_to_file={self.log_to_file},\n"
            f"  log_level={self.log_level}\n"
            f")"
        )


# Instância global de configuração
config = Config()
