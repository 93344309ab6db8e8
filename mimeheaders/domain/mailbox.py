from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional, Tuple, Union


@dataclass(frozen=True)
class Mailbox:
    """One address with an optional display name.

    ``name=None`` means no display name; an empty string is still a name.
    """

    address: str
    name: Optional[str] = None

    def without_name(self) -> "Mailbox":
        return Mailbox(self.address)


MailboxEntry = Union[str, Mailbox, Tuple[str, Optional[str]]]
MailboxInput = Union[str, Mailbox, Mapping[str, Optional[str]], Iterable[MailboxEntry]]


def _to_mailbox(entry: MailboxEntry) -> Mailbox:
    if isinstance(entry, Mailbox):
        return entry
    if isinstance(entry, str):
        return Mailbox(entry)
    address, name = entry
    return Mailbox(address, name)


def mailboxes_from(value: MailboxInput) -> List[Mailbox]:
    """Convert the convenience input shapes to an ordered list of Mailbox records.

    Accepted shapes:
    - a single address string or Mailbox
    - a mapping of address -> name (None for no name)
    - an iterable mixing address strings, (address, name) pairs and Mailbox records
    """
    if isinstance(value, (str, Mailbox)):
        return [_to_mailbox(value)]
    if isinstance(value, Mapping):
        return [Mailbox(address, name) for address, name in value.items()]
    return [_to_mailbox(entry) for entry in value]
