import logging
import re
from typing import Protocol


class GrammarProvider(Protocol):
    def get_pattern(self, production_name: str) -> str: ...


class InvalidAddressError(ValueError):
    """Raised when an address does not match the RFC 2822 addr-spec production."""

    def __init__(self, address: str):
        super().__init__(
            f"Address in mailbox given [{address}] does not comply with RFC 2822, 3.6.2."
        )
        self.address = address


class AddressValidator:
    """Full-string match of an address against the grammar's addr-spec."""

    def __init__(self, grammar: GrammarProvider):
        self._pattern = re.compile(grammar.get_pattern("addr-spec"))

    def is_valid(self, address: str) -> bool:
        return isinstance(address, str) and self._pattern.fullmatch(address) is not None

    def validate(self, address: str) -> None:
        if not self.is_valid(address):
            logging.warning(f"[MAILBOX-INVALID-ADDRESS] address={address!r}")
            raise InvalidAddressError(address)
