"""
Query Lexer - split a query expression into terms.

Terms are separated by spaces. A term containing spaces is written in
single or double quotes, and a field prefix (optionally preceded by "not:")
may be glued to the opening quote, eg desc:'coffee shop'. Quotes are
stripped and the prefix is kept.
"""

import logging
import re
from typing import List, Optional, Sequence

from ..models.parser_models import TermShape, Token

logger = logging.getLogger(__name__)

# Field prefixes which may precede a quoted phrase. Excludes "not:",
# which may precede any of these.
QUERY_PREFIXES = [
    "inacctonly:",
    "inacct:",
    "desc:",
    "acct:",
    "date:",
    "edate:",
    "status:",
    "real:",
    "empty:",
    "depth:",
]

NEGATION_PREFIX = "not:"

SEPARATORS = " \n\r"


class QueryLexer:
    """Quote- and prefix-aware tokenizer for query expressions."""

    def __init__(self, prefixes: Optional[Sequence[str]] = None):
        self.prefixes = list(QUERY_PREFIXES if prefixes is None else prefixes)

        # Longest first so that inacctonly: wins over inacct:
        alternatives = "|".join(
            re.escape(p) for p in sorted(self.prefixes, key=len, reverse=True)
        )
        if alternatives:
            prefix_pattern = f"{NEGATION_PREFIX}(?:{alternatives})?|{alternatives}"
        else:
            prefix_pattern = NEGATION_PREFIX

        # Term patterns (order matters!)
        self.term_patterns = [
            (
                re.compile(
                    rf"(?P<prefix>{prefix_pattern})['\"](?P<phrase>[^'\"]*)['\"]"
                ),
                TermShape.PREFIXED_QUOTED,
            ),
            (re.compile(r"['\"](?P<phrase>[^'\"]*)['\"]"), TermShape.QUOTED),
            (re.compile(rf"[^{SEPARATORS}]+"), TermShape.PLAIN),
        ]

    def tokenize(self, text: str) -> List[Token]:
        """Split a query expression into tokens, in input order."""
        tokens = []
        position = 0

        while position < len(text):
            if text[position] in SEPARATORS:
                position += 1
                continue

            token, position = self._next_token(text, position)
            tokens.append(token)

        logger.debug(f"Tokenized {text!r} into {[t.value for t in tokens]}")
        return tokens

    def _next_token(self, text: str, position: int):
        for pattern, shape in self.term_patterns:
            match = pattern.match(text, position)
            if not match or not self._at_term_end(text, match.end()):
                continue

            if shape == TermShape.PLAIN:
                value = match.group(0)
            else:
                value = (match.groupdict().get("prefix") or "") + match.group("phrase")

            return Token(shape=shape, value=value, position=position), match.end()

        # Unreachable: a plain run matches any non-separator character
        raise AssertionError(f"No term pattern matched at {position} in {text!r}")

    @staticmethod
    def _at_term_end(text: str, position: int) -> bool:
        return position == len(text) or text[position] in SEPARATORS


def tokenize(text: str, prefixes: Optional[Sequence[str]] = None) -> List[str]:
    """Split a query expression into term strings."""
    return [token.value for token in QueryLexer(prefixes).tokenize(text)]
