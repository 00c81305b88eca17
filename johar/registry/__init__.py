"""
Guide Registry - verification state and certificates
"""

from .guide_registry import (
    GuideRegistry,
    issue_certificate,
    verify,
    revoke,
    toggle,
    ensure_certificate,
    REVOKE_RETAINS_CERTIFICATE,
)

__all__ = [
    "GuideRegistry",
    "issue_certificate",
    "verify",
    "revoke",
    "toggle",
    "ensure_certificate",
    "REVOKE_RETAINS_CERTIFICATE",
]
