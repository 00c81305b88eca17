"""
Identifier generation for registry, marketplace and certificate records
"""

import uuid


def generate_id(prefix: str = "", length: int = 16) -> str:
    """Generate unique ID with optional prefix"""
    return f"{prefix}{uuid.uuid4().hex[:length]}"


def generate_reg_id() -> str:
    return generate_id("GID")


def generate_cert_id() -> str:
    return generate_id("CERT")


def generate_proof_token() -> str:
    """Pseudo transaction hash standing in for an on-chain proof"""
    return generate_id("0x", length=32)


def generate_tx_id() -> str:
    return generate_id("0x")


def generate_item_id() -> str:
    return generate_id("prod_", length=12)
