"""Security module do heartbeater."""

from heartbeater.security.crypto import md5_digest

__all__ = ['md5_digest']
