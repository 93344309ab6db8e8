from typing import Dict


class Rfc2822Grammar:
    """Regular-expression rendition of the RFC 2822 productions used by headers.

    Patterns are returned unanchored; callers decide how to match them.
    Comments nest up to ``comment_depth`` levels since ``re`` has no recursion.
    Atoms are matched with a negative lookahead so that repeated words cannot
    backtrack exponentially on invalid input.
    """

    def __init__(self, comment_depth: int = 2):
        self._productions = self._build(comment_depth)

    def get_pattern(self, production_name: str) -> str:
        return self._productions[production_name]

    def production_names(self):
        return list(self._productions)

    @staticmethod
    def _build(comment_depth: int) -> Dict[str, str]:
        g: Dict[str, str] = {}
        g["NO-WS-CTL"] = r"[\x01-\x08\x0B\x0C\x0E-\x1F\x7F]"
        g["WSP"] = r"[ \t]"
        g["CRLF"] = r"(?:\r\n)"
        g["quoted-pair"] = r"(?:\\[\x00-\x09\x0B\x0C\x0E-\x7F])"
        g["FWS"] = "(?:(?:%s*%s)?%s+)" % (g["WSP"], g["CRLF"], g["WSP"])
        g["ctext"] = r"(?:%s|[\x21-\x27\x2A-\x5B\x5D-\x7E])" % g["NO-WS-CTL"]

        # innermost comment first, then wrap it as ccontent of the next level
        comment = None
        for _ in range(comment_depth + 1):
            alternatives = [g["ctext"], g["quoted-pair"]]
            if comment:
                alternatives.append(comment)
            ccontent = "(?:%s)" % "|".join(alternatives)
            comment = r"(?:\((?:%s?%s)*%s?\))" % (g["FWS"], ccontent, g["FWS"])
        g["comment"] = comment
        g["CFWS"] = "(?:(?:%s?%s)+%s?|%s)" % (g["FWS"], g["comment"], g["FWS"], g["FWS"])

        g["qtext"] = r"(?:%s|[\x21\x23-\x5B\x5D-\x7E])" % g["NO-WS-CTL"]
        g["qcontent"] = "(?:%s|%s)" % (g["qtext"], g["quoted-pair"])
        bare_quoted = '(?:"(?:%s?%s)*%s?")' % (g["FWS"], g["qcontent"], g["FWS"])
        g["quoted-string"] = "(?:%s?%s%s?)" % (g["CFWS"], bare_quoted, g["CFWS"])

        g["atext"] = r"[a-zA-Z0-9!#$%&'*+\-/=?^_`{}|~]"
        atext_run = "%s+(?!%s)" % (g["atext"], g["atext"])
        g["atom"] = "(?:%s?%s%s?)" % (g["CFWS"], atext_run, g["CFWS"])
        g["dot-atom-text"] = r"(?:%s(?:\.%s)*)" % (atext_run, atext_run)
        g["dot-atom"] = "(?:%s?%s%s?)" % (g["CFWS"], g["dot-atom-text"], g["CFWS"])
        g["word"] = "(?:%s|%s)" % (g["atom"], g["quoted-string"])

        # obs-phrase allows "." between words, as in "Chris J. Corbyn"
        word_core = r"(?:%s|%s|\.)" % (atext_run, bare_quoted)
        g["phrase"] = "(?:%s?%s(?:%s?%s)*%s?)" % (
            g["CFWS"], word_core, g["CFWS"], word_core, g["CFWS"],
        )

        g["local-part"] = "(?:%s|%s)" % (g["dot-atom"], g["quoted-string"])
        g["dtext"] = r"(?:%s|[\x21-\x5A\x5E-\x7E])" % g["NO-WS-CTL"]
        g["dcontent"] = "(?:%s|%s)" % (g["dtext"], g["quoted-pair"])
        g["domain-literal"] = r"(?:%s?\[(?:%s?%s)*%s?\]%s?)" % (
            g["CFWS"], g["FWS"], g["dcontent"], g["FWS"], g["CFWS"],
        )
        g["domain"] = "(?:%s|%s)" % (g["dot-atom"], g["domain-literal"])
        g["addr-spec"] = "(?:%s@%s)" % (g["local-part"], g["domain"])
        return g
