import itertools
import re
from email.charset import QP, RFC2047_CHROME_LEN, Charset
from typing import Optional

from mimeheaders import config
from mimeheaders.domain.address_validator import GrammarProvider

_PRINTABLE_ASCII = re.compile(r"[\x20-\x7E]*")
_QUOTED_SPECIALS = re.compile(r'(["\\])')


class QpPhraseEncoder:
    """Encode a display-name phrase for use in a header.

    - text matching the grammar's phrase production is returned unchanged
    - other printable ASCII becomes a quoted-string
    - anything else becomes RFC 2047 Q-encoded words, one per line
    """

    def __init__(self, grammar: GrammarProvider, max_line_length: Optional[int] = None):
        self._phrase = re.compile(grammar.get_pattern("phrase"))
        self._max_line_length = max_line_length

    @property
    def max_line_length(self) -> int:
        return self._max_line_length or config.get_max_line_length()

    def encode_phrase(self, text: str, charset: str, reserved_width: int = 0) -> str:
        if self._phrase.fullmatch(text):
            return text
        if _PRINTABLE_ASCII.fullmatch(text):
            return '"' + _QUOTED_SPECIALS.sub(r"\\\1", text) + '"'
        return self.encode_words(text, charset, reserved_width)

    def encode_words(self, text: str, charset: str, reserved_width: int = 0) -> str:
        cs = Charset(charset)
        cs.header_encoding = QP
        limit = self.max_line_length
        # one 4-byte character, fully Q-encoded, must fit on any line
        minimum = len(cs.get_output_charset()) + RFC2047_CHROME_LEN + 12
        if limit - 1 < minimum:
            raise ValueError(
                f"max line length {limit} is too small for {cs.get_output_charset()} encoded words"
            )
        # continuation lines start with a single folding space
        first = max(limit - reserved_width, minimum)
        budgets = itertools.chain([first], itertools.repeat(limit - 1))
        return "\r\n ".join(cs.header_encode_lines(text, budgets))
