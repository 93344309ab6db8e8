from typing import Dict, Iterable, Iterator, List, Optional

from mimeheaders.domain.address_validator import AddressValidator
from mimeheaders.domain.mailbox import Mailbox


class MailboxList:
    """Value object for an ordered, unique set of validated mailboxes.

    - keyed by address, value is the display name (or None)
    - preserves the order in which addresses were first introduced
    - a repeated address overwrites the name in place, never appends
    """

    def __init__(self, mailboxes: Optional[Dict[str, Optional[str]]] = None):
        self._mailboxes: Dict[str, Optional[str]] = dict(mailboxes or {})

    @classmethod
    def normalize(cls, mailboxes: Iterable[Mailbox], validator: AddressValidator) -> "MailboxList":
        """Validate every mailbox into a fresh list; the first invalid address aborts."""
        normalized: Dict[str, Optional[str]] = {}
        for mailbox in mailboxes:
            validator.validate(mailbox.address)
            normalized[mailbox.address] = mailbox.name
        return cls(normalized)

    def remove(self, address: str) -> bool:
        return self._mailboxes.pop(address, _MISSING) is not _MISSING

    @property
    def addresses(self) -> List[str]:
        return list(self._mailboxes)

    def to_dict(self) -> Dict[str, Optional[str]]:
        return dict(self._mailboxes)

    def entries(self) -> List[Mailbox]:
        return [Mailbox(address, name) for address, name in self._mailboxes.items()]

    def __iter__(self) -> Iterator[Mailbox]:
        return iter(self.entries())

    def __len__(self) -> int:
        return len(self._mailboxes)


_MISSING = object()
