import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from wish.config import MAX_TOKENS
from wish.errors import GrammarError

logger = logging.getLogger(__name__)


class TokenKind(Enum):
    WORD = "word"
    REDIRECT = ">"
    PARALLEL = "&"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str

    @classmethod
    def word(cls, text):
        return cls(TokenKind.WORD, text)

    @property
    def is_word(self):
        return self.kind is TokenKind.WORD


REDIRECT = Token(TokenKind.REDIRECT, ">")
PARALLEL = Token(TokenKind.PARALLEL, "&")

# Redirect is split out before parallel
OPERATORS = (REDIRECT, PARALLEL)


@dataclass(frozen=True)
class CommandSpec:
    """One program (or built-in) name, its arguments and an optional
    output file."""
    argv: tuple
    redirect: Optional[str] = None

    @property
    def name(self):
        return self.argv[0]

    @property
    def args(self):
        return self.argv[1:]


def _split_operator(token, op):
    """
    Split one word on an operator character.
    Returns: list of tokens, operators standalone and empty pieces dropped
    """
    if not token.is_word:
        return [token]
    if token.text == op.text:
        return [op]

    pieces = token.text.split(op.text)
    if len(pieces) == 1:
        return [token]

    out = []
    for idx, piece in enumerate(pieces):
        if idx > 0:
            out.append(op)
        if piece:
            out.append(Token.word(piece))
    return out


def tokenize(line):
    """
    Split a raw line into tokens.
    Whitespace separates words; '>' and '&' always come out as their own
    tokens, even when fused to a word ("a&b>out").
    Returns: list of Token
    """
    tokens = [Token.word(w) for w in line.split()]
    for op in OPERATORS:
        tokens = [piece for tok in tokens for piece in _split_operator(tok, op)]
    logger.debug("tokenized %r -> %s", line, [t.text for t in tokens])
    return tokens


def _build_spec(group):
    """Turn one '&'-delimited group of tokens into a CommandSpec."""
    redirects = [i for i, tok in enumerate(group) if tok.kind is TokenKind.REDIRECT]
    if not redirects:
        return CommandSpec(argv=tuple(t.text for t in group))

    if len(redirects) > 1:
        raise GrammarError("more than one '>' in a command")
    pos = redirects[0]
    if pos == 0:
        raise GrammarError("'>' without a command")

    target = group[pos + 1:]
    if len(target) != 1:
        raise GrammarError("'>' needs exactly one file name, got %d" % len(target))

    return CommandSpec(argv=tuple(t.text for t in group[:pos]), redirect=target[0].text)


def parse_tokens(tokens):
    """
    Group tokens into command specifications separated by '&'.
    A trailing '&' is tolerated; an empty command before any other '&' is not.
    Returns: list of CommandSpec (the execution batch)
    """
    if len(tokens) > MAX_TOKENS:
        raise GrammarError("line has %d tokens, limit is %d" % (len(tokens), MAX_TOKENS))

    groups, cur = [], []
    for tok in tokens:
        if tok.kind is TokenKind.PARALLEL:
            if not cur:
                raise GrammarError("empty command before '&'")
            groups.append(cur)
            cur = []
        else:
            cur.append(tok)
    if cur:
        groups.append(cur)

    batch = [_build_spec(g) for g in groups]
    logger.debug("parsed batch: %s", batch)
    return batch


def parse_command(line):
    """
    Parse a full input line.
    Returns: list of CommandSpec, empty for a blank line
    """
    return parse_tokens(tokenize(line))
