"""Email service using SendGrid."""

import logging

from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail

from userhub.config import settings
from userhub.services.exceptions import EmailDispatchError

logger = logging.getLogger(__name__)


class EmailService:
    """Service for sending transactional emails via SendGrid."""

    @staticmethod
    def _send_email(to_email: str, subject: str, html_content: str) -> bool:
        """Send email via SendGrid. Returns True if successful."""
        if not settings.sendgrid_api_key:
            logger.warning("SendGrid API key not configured, skipping email send")
            return False

        message = Mail(
            from_email=(settings.email_from_address, settings.email_from_name),
            to_emails=to_email,
            subject=subject,
            html_content=html_content,
        )

        try:
            sg = SendGridAPIClient(settings.sendgrid_api_key)
            response = sg.send(message)
            logger.info(f"Email sent to {to_email}, status: {response.status_code}")
            return response.status_code in (200, 201, 202)
        except Exception:
            logger.exception(f"Failed to send email to {to_email}")
            return False

    @classmethod
    def send_account_activation(cls, email: str, token: str) -> None:
        """Send the account activation link.

        Raises:
            EmailDispatchError: If the message could not be handed to SendGrid.
        """
        activation_url = f"{settings.frontend_url}/#/login?token={token}"

        # Local development without a SendGrid key: print the link instead
        if not settings.sendgrid_api_key and settings.debug:
            logger.info(f"Email delivery disabled, activation link for {email}: {activation_url}")
            return

        html = f"""
        <div>
            <p>Please click below link to activate your account</p>
        </div>
        <div>
            <a href="{activation_url}">Activate</a>
        </div>
        """
        if not cls._send_email(email, "Account Activation", html):
            raise EmailDispatchError(email)
