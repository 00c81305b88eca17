"""
GuideRegistry - Guide Verification and Certificates

Guide lifecycle:
    Unregistered --register--> Unverified <--toggle--> Verified

A certificate is issued the first time a guide becomes verified and is
never replaced afterwards. Revoking verification keeps the certificate
(REVOKE_RETAINS_CERTIFICATE); re-verifying reuses it.

Transitions are pure functions returning a new Guide; GuideRegistry applies
them to the persisted `guides` collection.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional

from johar.models.schemas import Certificate, Guide
from johar.store import RecordStore, parse_record, parse_records
from johar.utils.ids import generate_cert_id, generate_proof_token, generate_reg_id

logger = logging.getLogger(__name__)

GUIDES = "guides"

# Revoked guides keep their certificate; see DESIGN.md
REVOKE_RETAINS_CERTIFICATE = True

CertificateFactory = Callable[[], Certificate]


def issue_certificate() -> Certificate:
    """Fresh certificate with unique id and proof token"""
    return Certificate(
        cert_id=generate_cert_id(),
        issued_at=datetime.now(timezone.utc),
        proof_token=generate_proof_token(),
    )


# ============================================================================
# TRANSITIONS
# ============================================================================

def verify(guide: Guide, issue: CertificateFactory = issue_certificate) -> Guide:
    """Mark verified, issuing a certificate only if none exists"""
    if guide.verified and guide.certificate:
        return guide
    return guide.model_copy(update={
        "verified": True,
        "certificate": guide.certificate or issue(),
    })


def revoke(guide: Guide) -> Guide:
    """Clear the verified flag"""
    update = {"verified": False}
    if not REVOKE_RETAINS_CERTIFICATE:
        update["certificate"] = None
    return guide.model_copy(update=update)


def toggle(guide: Guide, issue: CertificateFactory = issue_certificate) -> Guide:
    return revoke(guide) if guide.verified else verify(guide, issue)


def ensure_certificate(guide: Guide, issue: CertificateFactory = issue_certificate) -> Guide:
    """Issue a certificate (and verify) when missing; otherwise untouched"""
    if guide.certificate:
        return guide
    return guide.model_copy(update={"verified": True, "certificate": issue()})


# ============================================================================
# REGISTRY
# ============================================================================

class GuideRegistry:
    """Guide records and their verification/certificate lifecycle"""

    def __init__(
        self,
        store: RecordStore,
        analytics=None,
        certificate_factory: CertificateFactory = issue_certificate
    ):
        self.store = store
        self.analytics = analytics
        self.issue = certificate_factory
        logger.info("GuideRegistry initialized")

    # ---------- queries ----------

    def list_guides(self) -> List[Guide]:
        return parse_records(Guide, self.store.load(GUIDES), GUIDES)

    def get_guide(self, reg_id: str) -> Optional[Guide]:
        record = self.store.find(GUIDES, "reg_id", reg_id)
        return parse_record(Guide, record, GUIDES) if record else None

    def get_certificate(self, reg_id: str) -> Optional[Certificate]:
        guide = self.get_guide(reg_id)
        return guide.certificate if guide else None

    # ---------- commands ----------

    def register(self, name: str, location: str = "") -> str:
        """Create an unverified guide and return its registration id"""
        guide = Guide(reg_id=generate_reg_id(), name=name, location=location)
        self.store.append(GUIDES, guide.model_dump(mode="json"))
        logger.info(f"🧭 Registered guide {guide.reg_id} ({name})")
        return guide.reg_id

    def toggle_verify(self, reg_id: str) -> Optional[Guide]:
        """Flip verification; None when the guide does not exist"""
        guide = None
        with self.store.edit(GUIDES) as records:
            for idx, record in enumerate(records):
                if record.get("reg_id") != reg_id:
                    continue
                current = parse_record(Guide, record, GUIDES)
                if current is None:
                    return None
                guide = toggle(current, self.issue)
                records[idx] = guide.model_dump(mode="json")
                break

        if guide is None:
            logger.warning(f"No guide with reg_id={reg_id!r}")
            return None

        logger.info(f"Guide {reg_id} {'verified' if guide.verified else 'revoked'}")
        if guide.verified:
            self._report(1)
        return guide

    def verify_all(self) -> int:
        """Verify every unverified guide; returns how many changed"""
        return self._apply_all(lambda g: g if g.verified else verify(g, self.issue))

    def issue_certificates_for_all(self) -> int:
        """Certify every guide lacking a certificate; returns how many changed"""
        return self._apply_all(lambda g: ensure_certificate(g, self.issue))

    def _apply_all(self, transition: Callable[[Guide], Guide]) -> int:
        newly_verified = 0
        changed = 0

        with self.store.edit(GUIDES) as records:
            for idx, record in enumerate(records):
                before = parse_record(Guide, record, GUIDES)
                if before is None:
                    continue
                after = transition(before)
                if after == before:
                    continue
                changed += 1
                if after.verified and not before.verified:
                    newly_verified += 1
                records[idx] = after.model_dump(mode="json")

        logger.info(f"✅ Registry update changed {changed} guide(s)")
        self._report(newly_verified)
        return changed

    def _report(self, newly_verified: int):
        if self.analytics and newly_verified > 0:
            self.analytics.record({"verifiedGuides": newly_verified})
