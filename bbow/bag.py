import logging
from collections import Counter
from typing import Iterable, Iterator, List, Optional, Tuple

from .tokenize import iter_words, is_word, has_uppercase

logger = logging.getLogger(__name__)


class Bag:
    """Big Bag Of Words: each distinct normalized word mapped to its number of occurrences.

    Built up by feeding text fragments to `extend_from_text`, which returns the bag
    itself so calls can be chained over several documents:

        bag = Bag().extend_from_text("Hello world.").extend_from_text("Hello again!")
        bag.match_count("hello")  # 2

    Counts only ever grow; a word is present iff its count is at least 1.
    """

    def __init__(self):
        self._counts: Counter = Counter()

    @classmethod
    def from_texts(cls, texts: Iterable[str]) -> 'Bag':
        bag = cls()
        for text in texts:
            bag.extend_from_text(text)
        return bag

    def extend_from_text(self, text: str) -> 'Bag':
        """Add every valid word of `text` to the bag. Non-words are skipped silently."""
        n_before = len(self._counts)
        n_words = 0
        for word in iter_words(text):
            self._counts[word] += 1
            n_words += 1
        logger.debug('ingested %d words (%d new) from fragment of length %d',
                     n_words, len(self._counts) - n_before, len(text))
        return self

    # the builder operation under its generic name
    ingest = extend_from_text

    def update(self, other: 'Bag') -> 'Bag':
        """Fold the counts of another bag into this one, e.g. bags built by separate workers."""
        self._counts.update(other._counts)
        return self

    def copy(self) -> 'Bag':
        bag = type(self)()
        bag._counts = self._counts.copy()
        return bag

    def match_count(self, keyword: str) -> int:
        """Occurrences of `keyword`, which must already be a lowercase single word.

        Anything else (empty, punctuated, uppercase, several words) is reported as 0.
        """
        if not is_word(keyword) or has_uppercase(keyword):
            return 0
        # .get so a miss never inserts a zero entry into the Counter
        return self._counts.get(keyword, 0)

    def words(self) -> Iterator[str]:
        """Distinct words in ascending code point order."""
        for word in sorted(self._counts):
            yield word

    def items(self) -> Iterator[Tuple[str, int]]:
        for word in sorted(self._counts):
            yield word, self._counts[word]

    def most_common(self, n: Optional[int] = None) -> List[Tuple[str, int]]:
        """(word, count) pairs, most frequent first; ties in ascending word order."""
        ranked = sorted(self._counts.items(), key=lambda wc: (-wc[1], wc[0]))
        return ranked if n is None else ranked[:max(n, 0)]

    def count(self) -> int:
        """Total number of words, repeated occurrences counted separately."""
        return sum(self._counts.values())

    def len(self) -> int:
        """Number of distinct words."""
        return len(self._counts)

    def is_empty(self) -> bool:
        return not self._counts

    def __len__(self):
        return len(self._counts)

    def __iter__(self):
        return self.words()

    def __contains__(self, keyword):
        return isinstance(keyword, str) and self.match_count(keyword) > 0

    def __eq__(self, other):
        if not isinstance(other, Bag):
            return NotImplemented
        return self._counts == other._counts

    def __repr__(self):
        inner = ', '.join(f'{w!r}: {c}' for w, c in self.items())
        return f'Bag({{{inner}}})'
