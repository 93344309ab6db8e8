from typing import Optional

from mimeheaders.application.mailbox_header import MailboxHeader
from mimeheaders.domain.mailbox import MailboxInput


def format_mailboxes(field_name: str, mailboxes: MailboxInput, charset: Optional[str] = None) -> str:
    """Build a one-off header and return its field body."""
    return MailboxHeader(field_name, mailboxes, charset=charset).get_field_body()
