"""
Email one-time-passcode authentication.

Signup: send_signup_otp -> verify_signup_otp -> register_user.
Login:  request_login_otp -> verify_login_otp (caller logs the user in).

Both the REST routes and the Dash pages call these functions, so every rule
lives in one place. Failures are raised as APIError.
"""

import logging

from flask import current_app

from db_models.databases import db
from db_models.users import User, EmailVerification
from api.errors import APIError
from utils.otp import generate_otp, otp_expiry, check_otp
from utils.mailer import send_otp_email, MailDeliveryError

logger = logging.getLogger(__name__)


def _normalize_email(email):
    return (email or '').strip().lower()


def _ttl_minutes():
    return current_app.config.get('OTP_TTL_MINUTES', 10)


def _deliver(email, code, purpose):
    try:
        send_otp_email(email, code, purpose=purpose, ttl_minutes=_ttl_minutes())
    except MailDeliveryError:
        db.session.rollback()
        raise APIError('Failed to send OTP. Please try again.', 500)


def send_signup_otp(email):
    email = _normalize_email(email)
    if not email:
        raise APIError('Email is required', 400)
    if User.query.filter_by(email=email).first():
        raise APIError('Email already registered', 400)

    code = generate_otp()
    record = EmailVerification.query.filter_by(email=email).first()
    if record is None:
        record = EmailVerification(email=email)
        db.session.add(record)
    record.otp = code
    record.otp_expires = otp_expiry(_ttl_minutes())
    record.verified = False
    db.session.commit()

    _deliver(email, code, 'signup')
    logger.info("Signup OTP issued for %s", email)
    return code


def verify_signup_otp(email, otp):
    email = _normalize_email(email)
    if not email or not otp:
        raise APIError('Email and OTP are required', 400)
    record = EmailVerification.query.filter_by(email=email).first()
    if record is None:
        raise APIError('No verification pending for this email', 404)

    ok, message = check_otp(record.otp, record.otp_expires, otp)
    if not ok:
        raise APIError(message, 400)

    record.verified = True
    record.otp = None
    record.otp_expires = None
    db.session.commit()
    return True


def register_user(name, email, phone=None):
    email = _normalize_email(email)
    name = (name or '').strip()
    if not name or not email:
        raise APIError('Name and email are required', 400)
    if User.query.filter_by(email=email).first():
        raise APIError('Email already registered', 400)

    record = EmailVerification.query.filter_by(email=email).first()
    if record is None or not record.verified:
        raise APIError('Verify your email first', 400)

    user = User(name=name, email=email, phone=(phone or '').strip() or None, email_verified=True)
    db.session.add(user)
    db.session.delete(record)
    db.session.commit()
    logger.info("User registered: %s", email)
    return user


def request_login_otp(email, purpose='login'):
    email = _normalize_email(email)
    if not email:
        raise APIError('Email is required', 400)
    user = User.query.filter_by(email=email).first()
    if user is None:
        raise APIError('User is not registered! Please sign up first.', 404)
    if not user.email_verified:
        raise APIError('Verify your email first', 400)

    code = generate_otp()
    user.set_otp(code, otp_expiry(_ttl_minutes()))
    db.session.commit()

    _deliver(email, code, purpose)
    logger.info("Login OTP issued for %s", email)
    return code


def verify_login_otp(email, otp):
    email = _normalize_email(email)
    if not email or not otp:
        raise APIError('Email and OTP are required', 400)
    user = User.query.filter_by(email=email).first()
    if user is None:
        raise APIError('User not found', 404)

    ok, message = check_otp(user.otp, user.otp_expires, otp)
    if not ok:
        raise APIError(message, 400)

    user.clear_otp()
    user.email_verified = True
    db.session.commit()
    logger.info("OTP verified for %s", email)
    return user
