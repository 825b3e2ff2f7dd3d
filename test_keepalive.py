#!/usr/bin/env python3
"""
Test Keepalive - Unit tests para a derivação do token de keepalive.

Tests:
1. Vetores conhecidos (seed e encadeado)
2. Determinismo
3. Sensibilidade a timestamp e token anterior
4. Timestamp default
5. KeepaliveChain
6. Timestamp fora de 32 bits
"""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent))

import pytest

from heartbeater.protocol import keepalive
from heartbeater.protocol.factory import AttributeFactory
from heartbeater.protocol.keepalive import (
    KeepaliveChain,
    calculate_keepalive_data,
    current_timestamp,
    derive_token,
)
from heartbeater.security.crypto import md5_digest
from heartbeater.utils.constants import KEEPALIVE_TOKEN_SIZE

TIMESTAMP = 1472483020
FIRST_TOKEN = "ffb0b2af94693fd1ba4c93e6b9aebd3f"
SECOND_TOKEN = "d0dce2b013c8adfac646a2917fdab802"


def test_known_vectors():
    """Test tokens conhecidos."""
    print("=" * 70)
    print("TEST 1: Known Vectors")
    print("=" * 70)

    assert derive_token(timestamp=TIMESTAMP, last_data=None) == FIRST_TOKEN
    assert derive_token(timestamp=TIMESTAMP, last_data=FIRST_TOKEN) == SECOND_TOKEN
    assert AttributeFactory.calculate_keepalive_data(TIMESTAMP) == FIRST_TOKEN

    # Seed explícito equivale a não haver token anterior
    assert calculate_keepalive_data(TIMESTAMP, "llwl") == FIRST_TOKEN

    print(f"✅ Token seed: {FIRST_TOKEN}")
    print(f"✅ Token encadeado: {SECOND_TOKEN}")


def test_deterministic():
    """Test mesmas entradas = mesmo token."""
    print("\n" + "=" * 70)
    print("TEST 2: Deterministic")
    print("=" * 70)

    for ts in (0, 1, TIMESTAMP, 0xFFFFFFFF):
        first = calculate_keepalive_data(ts, FIRST_TOKEN)
        assert first == calculate_keepalive_data(ts, FIRST_TOKEN)
        assert len(first) == KEEPALIVE_TOKEN_SIZE
        assert first == first.lower()
        int(first, 16)

    print("✅ Tokens determinísticos")


def test_sensitivity():
    """Test mudar timestamp ou token anterior muda o resultado."""
    print("\n" + "=" * 70)
    print("TEST 3: Sensitivity")
    print("=" * 70)

    by_timestamp = {calculate_keepalive_data(TIMESTAMP + i) for i in range(100)}
    assert len(by_timestamp) == 100

    by_salt = {calculate_keepalive_data(TIMESTAMP, f"token-{i}") for i in range(100)}
    assert len(by_salt) == 100

    # Salt vazio é diferente de não haver salt
    assert calculate_keepalive_data(TIMESTAMP, "") != FIRST_TOKEN

    print("✅ 200 tokens distintos")


def test_default_timestamp(monkeypatch):
    """Test timestamp default vem do relógio, lido em cada chamada."""
    print("\n" + "=" * 70)
    print("TEST 4: Default Timestamp")
    print("=" * 70)

    monkeypatch.setattr(keepalive.time, "time", lambda: TIMESTAMP + 0.75)
    assert current_timestamp() == TIMESTAMP
    assert calculate_keepalive_data() == FIRST_TOKEN
    assert calculate_keepalive_data(last_data=FIRST_TOKEN) == SECOND_TOKEN

    monkeypatch.setattr(keepalive.time, "time", lambda: TIMESTAMP + 1.0)
    assert calculate_keepalive_data() != FIRST_TOKEN

    print("✅ Timestamp default OK")


def test_keepalive_chain():
    """Test cadeia de tokens."""
    print("\n" + "=" * 70)
    print("TEST 5: KeepaliveChain")
    print("=" * 70)

    chain = KeepaliveChain()
    assert chain.last_token is None

    assert chain.next_token(TIMESTAMP) == FIRST_TOKEN
    assert chain.next_token(TIMESTAMP) == SECOND_TOKEN
    assert chain.last_token == SECOND_TOKEN
    assert chain.count == 2

    chain.reset()
    assert chain.last_token is None
    assert chain.next_token(TIMESTAMP) == FIRST_TOKEN

    resumed = KeepaliveChain(last_token=FIRST_TOKEN)
    assert resumed.next_token(TIMESTAMP) == SECOND_TOKEN

    print("✅ Cadeia OK")


def test_timestamp_range():
    """Test timestamp tem de caber em 32 bits."""
    print("\n" + "=" * 70)
    print("TEST 6: Timestamp Range")
    print("=" * 70)

    for ts in (-1, 0x100000000):
        with pytest.raises(ValueError):
            calculate_keepalive_data(ts)

    print("✅ Timestamps inválidos rejeitados")


def test_md5_digest():
    """Test digest MD5 por blocos."""
    print("\n" + "=" * 70)
    print("TEST 7: MD5 Digest")
    print("=" * 70)

    assert md5_digest(b"").hex() == "d41d8cd98f00b204e9800998ecf8427e"
    assert md5_digest(b"ab", b"c") == md5_digest(b"abc")
    assert md5_digest(b"abc").hex() == "900150983cd24fb0d6963f7d28e17f72"

    print("✅ MD5 OK")


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
