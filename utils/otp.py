"""
One-time passcode helpers.

Codes are six random digits and expire after a configurable number of minutes.
"""

import secrets
from datetime import datetime, timedelta

OTP_LENGTH = 6
DEFAULT_TTL_MINUTES = 10


def generate_otp():
    """Return a six digit numeric code (never starting with 0)."""
    return str(100000 + secrets.randbelow(900000))


def otp_expiry(ttl_minutes=DEFAULT_TTL_MINUTES, now=None):
    now = now or datetime.utcnow()
    return now + timedelta(minutes=ttl_minutes)


def is_expired(expires_at, now=None):
    if expires_at is None:
        return True
    now = now or datetime.utcnow()
    return expires_at < now


def check_otp(expected, expires_at, submitted, now=None):
    """
    Compare a submitted code against the stored one.

    Returns:
        tuple: (ok, error_message)
    """
    if not expected or str(submitted).strip() != expected:
        return False, "Invalid OTP"
    if is_expired(expires_at, now):
        return False, "OTP expired"
    return True, ""
