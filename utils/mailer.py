"""
Outgoing email for one-time passcodes.

When MAIL_SUPPRESS_SEND is set (development and tests) the message is logged
instead of being handed to the SMTP server.
"""

import logging
import smtplib
from email.message import EmailMessage

from flask import current_app

logger = logging.getLogger(__name__)


class MailDeliveryError(Exception):
    """Raised when the SMTP server refuses or cannot be reached."""
    pass


def send_email(to_address, subject, html_body):
    cfg = current_app.config
    if cfg.get("MAIL_SUPPRESS_SEND", True):
        logger.info("Mail suppressed: to=%s subject=%s", to_address, subject)
        return False

    msg = EmailMessage()
    msg["Subject"] = subject
    msg["From"] = cfg.get("MAIL_SENDER")
    msg["To"] = to_address
    msg.set_content("This message requires an HTML capable mail client.")
    msg.add_alternative(html_body, subtype="html")

    try:
        with smtplib.SMTP(cfg.get("MAIL_SERVER"), cfg.get("MAIL_PORT"), timeout=10) as smtp:
            if cfg.get("MAIL_USE_TLS"):
                smtp.starttls()
            if cfg.get("MAIL_USERNAME"):
                smtp.login(cfg.get("MAIL_USERNAME"), cfg.get("MAIL_PASSWORD"))
            smtp.send_message(msg)
    except (smtplib.SMTPException, OSError) as e:
        logger.error(f"Failed to send mail to {to_address}: {str(e)}")
        raise MailDeliveryError(str(e)) from e

    logger.info("Mail sent: to=%s subject=%s", to_address, subject)
    return True


def send_otp_email(to_address, code, purpose="login", ttl_minutes=10):
    titles = {
        "login": "Login OTP Verification",
        "signup": "Verify your email",
        "resend": "Your New Verification Code",
    }
    subject = titles.get(purpose, "Your verification code")
    body = (
        '<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">'
        f"<h2>{subject}</h2>"
        f"<p>Your verification code is <b>{code}</b>.</p>"
        f"<p>This code will expire in {ttl_minutes} minutes.</p>"
        "<p>If you didn't request this, please ignore this email.</p>"
        "</div>"
    )
    return send_email(to_address, subject, body)
