"""
Funções criptográficas do heartbeater.

Implementa o digest MD5 usado na derivação do token de keepalive.
"""

from cryptography.hazmat.primitives import hashes


def md5_digest(*chunks: bytes) -> bytes:
    """
    Calcula o MD5 da concatenação dos blocos fornecidos.

    Args:
        chunks: Blocos de dados, processados pela ordem dada

    Returns:
        Digest de 16 bytes

    Note:
        Erros da primitiva criptográfica não são tratados aqui:
        propagam para o chamador como erros fatais.
    """
    digest = hashes.Hash(hashes.MD5())

    for chunk in chunks:
        digest.update(chunk)

    return digest.finalize()
