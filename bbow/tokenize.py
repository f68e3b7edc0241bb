import regex
from typing import Iterator, List

# A chunk is a maximal run of non-whitespace (Unicode White_Space property)
_CHUNK_RE = regex.compile(r'\P{White_Space}+')
# From the first alphabetic character to the last one; everything outside is edge punctuation
_SPAN_RE = regex.compile(r'\p{Alphabetic}(?:.*\p{Alphabetic})?', regex.DOTALL)
_WORD_RE = regex.compile(r'\p{Alphabetic}+')
_UPPER_RE = regex.compile(r'\p{Uppercase}')


def iter_chunks(text: str) -> Iterator[str]:
    """Whitespace-delimited chunks of `text`, empty chunks never produced."""
    for m in _CHUNK_RE.finditer(text):
        yield m.group(0)


def trim(chunk: str) -> str:
    """Strip leading and trailing non-alphabetic characters.

    Interior characters are kept, so "b-banana," trims to "b-banana".
    Returns '' when the chunk has no alphabetic character at all.
    """
    m = _SPAN_RE.search(chunk)
    return m.group(0) if m else ''


def iter_candidates(text: str) -> Iterator[str]:
    for chunk in iter_chunks(text):
        yield trim(chunk)


def is_word(span: str) -> bool:
    # fullmatch also rejects the empty span
    return _WORD_RE.fullmatch(span) is not None


def has_uppercase(span: str) -> bool:
    return _UPPER_RE.search(span) is not None


def normalize(word: str) -> str:
    """Lowercase `word` only if it carries an uppercase character, otherwise keep it as is."""
    if has_uppercase(word):
        return word.lower()
    return word


def iter_words(text: str) -> Iterator[str]:
    """Normalized words of `text` in order of appearance."""
    for span in iter_candidates(text):
        if is_word(span):
            yield normalize(span)


def tokenize(text: str) -> List[str]:
    return list(iter_words(text))
