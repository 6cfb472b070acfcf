"""Email integration stub for CRMPro.

No provider is contacted. Each message is logged and appended to the
notifier's outbox, which is the whole observable effect of sending.
"""

import logging
import os
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from typing import Deque, Optional

from dotenv import load_dotenv

from crmpro.models.constants import TRIAL_DAYS

load_dotenv()

logger = logging.getLogger(__name__)

EMAIL_FROM = os.getenv("EMAIL_FROM", "CRMPro <noreply@crmpro.com>")

# Most recent messages kept in memory
OUTBOX_SIZE = 100


@dataclass
class SentEmail:
    """A message accepted by the stub."""
    to: str
    subject: str
    body_html: str
    sender: str = EMAIL_FROM
    sent_at: datetime = field(default_factory=datetime.utcnow)


class Notifier:
    """Console email sender."""

    def __init__(self, sender: Optional[str] = None):
        self.sender = sender or EMAIL_FROM
        self.outbox: Deque[SentEmail] = deque(maxlen=OUTBOX_SIZE)

    def notify(self, to: str, subject: str, body_html: str) -> SentEmail:
        """Record and log an email. Always succeeds.

        Args:
            to: Recipient address
            subject: Subject line
            body_html: HTML body

        Returns:
            The recorded message
        """
        message = SentEmail(to=to, subject=subject, body_html=body_html, sender=self.sender)
        self.outbox.append(message)
        logger.info(f"Email sent (simulated) from={self.sender} to={to} subject={subject!r}")
        logger.debug(f"Email body for {to}:\n{body_html}")
        return message


def build_verification_email(name: str, link: str, trial_days: int = TRIAL_DAYS) -> str:
    """Render the HTML body of the account verification email."""
    return f"""
    <div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
        <h2>CRMPro'ya Hoş Geldiniz, {name}!</h2>
        <p>Hesabınızı doğrulamak için aşağıdaki bağlantıya tıklayın:</p>
        <p><a href="{link}">E-posta adresimi doğrula</a></p>
        <p>{trial_days} günlük ücretsiz deneme süreniz başladı.</p>
        <p>CRMPro Ekibi</p>
    </div>
    """


_notifier: Optional[Notifier] = None


def get_notifier() -> Notifier:
    """FastAPI dependency returning the process-wide notifier."""
    global _notifier
    if _notifier is None:
        _notifier = Notifier()
    return _notifier
