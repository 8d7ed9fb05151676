# visitorinfo/utils/mailer.py
from typing import Optional, Sequence, Union

from flask import current_app
from flask_mail import Message

from visitorinfo.extensions import mail


def send_mail(
    subject: str,
    recipients: Union[str, Sequence[str]],
    *,
    body: Optional[str] = None,
    html: Optional[str] = None,
    sender: Optional[str] = None,
) -> None:
    recips = [recipients] if isinstance(recipients, str) else list(recipients or [])
    msg = Message(
        subject=subject,
        sender=sender or current_app.config.get("MAIL_DEFAULT_SENDER"),
        recipients=recips,
    )
    if body:
        msg.body = body
    if html:
        msg.html = html
    mail.send(msg)
