from typing import Optional, Protocol

from mimeheaders import config
from mimeheaders.domain.address_validator import GrammarProvider
from mimeheaders.domain.field_body_cache import FieldBodyCache


class PhraseEncoder(Protocol):
    def encode_phrase(self, text: str, charset: str, reserved_width: int = 0) -> str: ...


class HeaderContext:
    """State shared by structured headers: field name, charset, encoder, grammar, cache.

    Headers hold one of these instead of inheriting storage. Changing the
    charset to a different value, or replacing the encoder, clears the cache.
    """

    def __init__(
        self,
        field_name: str,
        charset: Optional[str] = None,
        encoder: Optional[PhraseEncoder] = None,
        grammar: Optional[GrammarProvider] = None,
    ):
        self.field_name = field_name
        self._charset = charset
        self._encoder = encoder
        self._grammar = grammar
        self._cache = FieldBodyCache()

    # --- Grammar ---
    def initialize_grammar(self) -> GrammarProvider:
        if self._grammar is None:
            from mimeheaders.infrastructure.rfc2822_grammar import Rfc2822Grammar

            self._grammar = Rfc2822Grammar()
        return self._grammar

    @property
    def grammar(self) -> GrammarProvider:
        return self.initialize_grammar()

    # --- Charset ---
    def get_charset(self) -> str:
        return self._charset or config.get_default_charset()

    def set_charset(self, charset: str) -> None:
        if charset != self._charset:
            self.clear_cached_value()
        self._charset = charset

    # --- Encoder ---
    def get_encoder(self) -> PhraseEncoder:
        if self._encoder is None:
            from mimeheaders.infrastructure.phrase_encoder import QpPhraseEncoder

            self._encoder = QpPhraseEncoder(self.grammar)
        return self._encoder

    def set_encoder(self, encoder: PhraseEncoder) -> None:
        self._encoder = encoder
        self.clear_cached_value()

    # --- Cached value ---
    def get_cached_value(self) -> Optional[str]:
        return self._cache.get()

    def set_cached_value(self, value: str) -> None:
        self._cache.set(value)

    def clear_cached_value(self) -> None:
        self._cache.invalidate()
