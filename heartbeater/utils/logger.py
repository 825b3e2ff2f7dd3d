"""
Sistema de logging centralizado usando Loguru.

Fornece logging formatado para ficheiros e consola.
"""

import sys
from typing import Optional
from loguru import logger
from heartbeater.utils.config import config


def setup_logger(
    module_name: str = "heartbeater",
    log_to_file: Optional[bool] = None,
    log_to_console: bool = True,
) -> logger:
    """
    Configura o logger para o módulo especificado.

    Não corre no import: a aplicação chama-a se quiser os sinks do pacote.

    Args:
        module_name: Nome do módulo (usado no nome do ficheiro de log)
        log_to_file: Se True, faz log para ficheiro (None = usa LOG_TO_FILE)
        log_to_console: Se True, faz log para consola

    Returns:
        Logger configurado
    """
    if log_to_file is None:
        log_to_file = config.log_to_file

    # Mensagens do pacote ficam desligadas até aqui
    logger.enable("heartbeater")

    # Remover handlers default
    logger.remove()

    # Formato para consola (mais simples)
    console_format = (
        "<green>{time:HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{extra[name]}</cyan>:<cyan>{function}</cyan> | "
        "<level>{message}</level>"
    )

    # Formato para ficheiro (mais detalhado)
    file_format = (
        "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
        "{level: <8} | "
        "{extra[name]}:{function}:{line} | "
        "{message}"
    )

    # Contexto default para mensagens sem bind()
    logger.configure(extra={"name": module_name})

    if log_to_console:
        logger.add(
            sys.stderr,
            format=console_format,
            level=config.log_level,
            colorize=True,
        )

    if log_to_file:
        try:
            config.ensure_directories_exist()

            log_file = config.logs_dir / f"{module_name}.log"

            logger.add(
                log_file,
                format=file_format,
                level=config.log_level,
                rotation="10 MB",      # Rotação quando atingir 10MB
                retention="7 days",    # Manter logs dos últimos 7 dias
                compression="zip",     # Comprimir logs antigos
                enqueue=True,          # Thread-safe
            )
        except (PermissionError, OSError) as e:
            # Sem permissões: log apenas para consola
            print(f"  Aviso: Não foi possível criar ficheiro de log: {e}", file=sys.stderr)
            print(f"   Logs apenas na consola.", file=sys.stderr)

    return logger


def get_logger(name: str) -> logger:
    """
    Obtém um logger com contexto específico.

    Args:
        name: Nome do contexto (ex: "attributes", "keepalive")

    Returns:
        Logger com contexto
    """
    return logger.bind(name=name)
