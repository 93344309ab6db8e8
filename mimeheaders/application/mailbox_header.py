import logging
from typing import Dict, Iterable, List, Optional, Union

from mimeheaders.application.phrase_renderer import PhraseRenderer
from mimeheaders.domain.address_validator import AddressValidator, GrammarProvider
from mimeheaders.domain.header_context import HeaderContext, PhraseEncoder
from mimeheaders.domain.mailbox import MailboxInput, mailboxes_from
from mimeheaders.domain.mailbox_list import MailboxList


class MailboxHeader:
    """A mailbox address header such as From, Sender, To or Cc.

    Mailboxes may be given as a single address, a list of addresses, a mapping
    of address -> display name, or a list mixing addresses, (address, name)
    pairs and Mailbox records::

        MailboxHeader("From", {"chris@example.org": "Chris Corbyn"})
        MailboxHeader("Cc", ["one@example.org", ("two@example.org", "Two")])

    The field body is rendered lazily and cached until the mailboxes, the
    charset or the encoder change. Invalid addresses raise InvalidAddressError
    and leave the header untouched.
    """

    def __init__(
        self,
        field_name: str,
        mailboxes: Optional[MailboxInput] = None,
        charset: Optional[str] = None,
        encoder: Optional[PhraseEncoder] = None,
        grammar: Optional[GrammarProvider] = None,
    ):
        self._context = HeaderContext(field_name, charset=charset, encoder=encoder, grammar=grammar)
        self._validator = AddressValidator(self._context.initialize_grammar())
        self._mailboxes = MailboxList()

        if mailboxes is not None:
            self.set_name_addresses(mailboxes)

    # --- Context ---
    @property
    def field_name(self) -> str:
        return self._context.field_name

    @property
    def charset(self) -> str:
        return self._context.get_charset()

    def set_charset(self, charset: str) -> None:
        self._context.set_charset(charset)

    @property
    def encoder(self) -> PhraseEncoder:
        return self._context.get_encoder()

    def set_encoder(self, encoder: PhraseEncoder) -> None:
        self._context.set_encoder(encoder)

    # --- Mailboxes ---
    def set_name_addresses(self, mailboxes: MailboxInput) -> None:
        """Replace all mailboxes; on an invalid address nothing changes."""
        normalized = MailboxList.normalize(mailboxes_from(mailboxes), self._validator)
        self._replace(normalized)

    def set_addresses(self, addresses: Union[str, Iterable[str]]) -> None:
        """Replace all mailboxes with plain addresses; previous names are dropped."""
        self.set_name_addresses([mailbox.without_name() for mailbox in mailboxes_from(addresses)])

    def get_name_addresses(self) -> Dict[str, Optional[str]]:
        return self._mailboxes.to_dict()

    def get_addresses(self) -> List[str]:
        return self._mailboxes.addresses

    def get_name_address_strings(self) -> List[str]:
        return self._renderer().render(self._mailboxes)

    def remove_addresses(self, addresses: Union[str, Iterable[str]]) -> None:
        self._invalidate()
        if isinstance(addresses, str):
            addresses = [addresses]
        removed = [address for address in addresses if self._mailboxes.remove(address)]
        logging.debug(f"{self.field_name}: removed {len(removed)} mailbox(es)")

    def get_field_body(self) -> str:
        body = self._context.get_cached_value()
        if body is None:
            body = self._create_mailbox_list_string()
            self._context.set_cached_value(body)
        return body

    # --- Internals ---
    def _replace(self, mailboxes: MailboxList) -> None:
        self._mailboxes = mailboxes
        self._invalidate()
        logging.debug(f"{self.field_name}: mailboxes replaced, count={len(mailboxes)}")

    def _invalidate(self) -> None:
        self._context.clear_cached_value()

    def _renderer(self) -> PhraseRenderer:
        return PhraseRenderer(self.encoder, self.charset, self.field_name)

    def _create_mailbox_list_string(self) -> str:
        logging.debug(f"{self.field_name}: rendering field body")
        renderer = self._renderer()
        return renderer.join(renderer.render(self._mailboxes))
