"""Identity token issuance and validation tests."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
import unittest
from uuid import uuid4

import jwt

from app.adapters.auth import (
    InvalidSubjectFormat,
    JwtTokenService,
    MalformedToken,
    MissingSubject,
    SignatureInvalid,
    TokenExpired,
    UnsupportedAlgorithm,
    clamp_ttl,
)

SECRET = "token-tests-secret-0123456789abcdef0123456789abcdef0123456789abcdef"
OTHER_SECRET = "another-secret-fedcba9876543210fedcba9876543210fedcba9876543210fedcba"
T0 = datetime(2026, 3, 1, 12, 0, 0, tzinfo=UTC)


class _FixedClock:
    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


def _claims(**overrides: object) -> dict[str, object]:
    claims: dict[str, object] = {
        "iss": "chirpy",
        "sub": str(uuid4()),
        "iat": int(T0.timestamp()),
        "exp": int((T0 + timedelta(minutes=5)).timestamp()),
    }
    claims.update(overrides)
    return {key: value for key, value in claims.items() if value is not None}


class ClampTtlTests(unittest.TestCase):
    def test_missing_and_out_of_range_requests_default_to_one_hour(self) -> None:
        for requested in (None, 0, -5, 3601, 7200, timedelta(0), timedelta(hours=2), 10**30):
            with self.subTest(requested=requested):
                self.assertEqual(clamp_ttl(requested), timedelta(hours=1))

    def test_in_range_requests_are_honored(self) -> None:
        self.assertEqual(clamp_ttl(10), timedelta(seconds=10))
        self.assertEqual(clamp_ttl(3600), timedelta(hours=1))
        self.assertEqual(clamp_ttl(timedelta(minutes=15)), timedelta(minutes=15))


class JwtTokenServiceTests(unittest.TestCase):
    def setUp(self) -> None:
        self.clock = _FixedClock(T0)
        self.service = JwtTokenService(SECRET, clock=self.clock)

    def test_issue_then_validate_returns_subject(self) -> None:
        subject = uuid4()

        token = self.service.issue(subject, 60)

        self.assertEqual(self.service.validate(token), subject)

    def test_issued_claims_carry_issuer_and_clamped_expiry(self) -> None:
        token = self.service.issue(uuid4(), timedelta(hours=5))

        claims = jwt.decode(token, options={"verify_signature": False})
        self.assertEqual(jwt.get_unverified_header(token)["alg"], "HS256")
        self.assertEqual(claims["iss"], "chirpy")
        self.assertEqual(claims["iat"], int(T0.timestamp()))
        self.assertEqual(claims["exp"] - claims["iat"], 3600)

    def test_issuer_claim_is_not_enforced_on_validation(self) -> None:
        for issuer in ("someone-else", None):
            with self.subTest(issuer=issuer):
                subject = uuid4()
                token = jwt.encode(_claims(iss=issuer, sub=str(subject)), SECRET, algorithm="HS256")

                self.assertEqual(self.service.validate(token), subject)

    def test_expiry_boundary_is_rejected(self) -> None:
        subject = uuid4()
        token = self.service.issue(subject, 60)

        self.clock.now = T0 + timedelta(seconds=59)
        self.assertEqual(self.service.validate(token), subject)

        self.clock.now = T0 + timedelta(seconds=60)
        with self.assertRaises(TokenExpired):
            self.service.validate(token)

        self.clock.now = T0 + timedelta(days=1)
        with self.assertRaises(TokenExpired):
            self.service.validate(token)

    def test_token_signed_with_other_secret_is_rejected(self) -> None:
        other = JwtTokenService(OTHER_SECRET, clock=self.clock)
        token = other.issue(uuid4(), 60)

        with self.assertRaises(SignatureInvalid):
            self.service.validate(token)

    def test_tampered_payload_is_rejected(self) -> None:
        token = self.service.issue(uuid4(), 60)
        header, _, signature = token.split(".")
        forged_payload = jwt.encode(_claims(), OTHER_SECRET, algorithm="HS256").split(".")[1]

        with self.assertRaises(SignatureInvalid):
            self.service.validate(f"{header}.{forged_payload}.{signature}")

    def test_unsigned_token_is_rejected_as_unsupported_algorithm(self) -> None:
        token = jwt.encode(_claims(), None, algorithm="none")

        with self.assertRaises(UnsupportedAlgorithm):
            self.service.validate(token)

    def test_other_hmac_family_members_are_accepted(self) -> None:
        subject = uuid4()
        token = jwt.encode(_claims(sub=str(subject)), SECRET, algorithm="HS512")

        self.assertEqual(self.service.validate(token), subject)

    def test_structurally_invalid_tokens_are_malformed(self) -> None:
        for token in ("", "garbage", "not.a.token", "a.b"):
            with self.subTest(token=token):
                with self.assertRaises(MalformedToken):
                    self.service.validate(token)

    def test_missing_expiry_is_malformed(self) -> None:
        token = jwt.encode(_claims(exp=None), SECRET, algorithm="HS256")

        with self.assertRaises(MalformedToken):
            self.service.validate(token)

    def test_missing_subject_is_rejected(self) -> None:
        for subject in (None, ""):
            with self.subTest(subject=subject):
                token = jwt.encode(_claims(sub=subject), SECRET, algorithm="HS256")
                with self.assertRaises(MissingSubject):
                    self.service.validate(token)

    def test_non_uuid_subject_is_rejected(self) -> None:
        token = jwt.encode(_claims(sub="user-123"), SECRET, algorithm="HS256")

        with self.assertRaises(InvalidSubjectFormat):
            self.service.validate(token)

    def test_empty_secret_is_refused(self) -> None:
        with self.assertRaises(ValueError):
            JwtTokenService("")


if __name__ == "__main__":
    unittest.main()
