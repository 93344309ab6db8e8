from typing import Iterable, List

from mimeheaders.domain.header_context import PhraseEncoder
from mimeheaders.domain.mailbox import Mailbox

SEPARATOR = ", "


class PhraseRenderer:
    """Render mailboxes as RFC 2822 name-addr / addr-spec tokens.

    Display names are delegated to the encoder. Only the first token on the
    line reserves room for the ``"<field-name>: "`` prefix.
    """

    def __init__(self, encoder: PhraseEncoder, charset: str, field_name: str = ""):
        self._encoder = encoder
        self._charset = charset
        self._field_name = field_name

    @property
    def reserved_prefix_width(self) -> int:
        return len(self._field_name) + 2 if self._field_name else 0

    def render_one(self, mailbox: Mailbox, first: bool = False) -> str:
        if mailbox.name is None:
            return mailbox.address
        reserved = self.reserved_prefix_width if first else 0
        name = self._encoder.encode_phrase(mailbox.name, self._charset, reserved)
        return f"{name} <{mailbox.address}>"

    def render(self, mailboxes: Iterable[Mailbox]) -> List[str]:
        tokens: List[str] = []
        for mailbox in mailboxes:
            tokens.append(self.render_one(mailbox, first=not tokens))
        return tokens

    @staticmethod
    def join(tokens: Iterable[str]) -> str:
        return SEPARATOR.join(tokens)
