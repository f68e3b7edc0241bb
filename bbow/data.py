import logging
from dataclasses import dataclass, field
from typing import List, Dict, Optional

import numpy as np
import pandas as pd

from .bag import Bag
from .config import DEFAULT_MAX_VOCAB, DEFAULT_MIN_DF

logger = logging.getLogger(__name__)


@dataclass
class Document:
    text: str
    covariates: Dict[str, float] = field(default_factory=dict)  # document-level features
    _bag: Optional[Bag] = field(default=None, init=False, repr=False, compare=False)

    @property
    def bag(self) -> Bag:
        if self._bag is None:
            self._bag = Bag().extend_from_text(self.text)
        return self._bag


@dataclass
class Corpus:
    docs: List[Document]
    vocab: List[str]
    # doc-term matrix (list of dict for sparsity: {v_idx: count})
    dtm: List[Dict[int, int]]


def _as_documents(docs) -> List[Document]:
    return [d if isinstance(d, Document) else Document(text=d) for d in docs]


def build_vocabulary(docs, max_vocab: int = DEFAULT_MAX_VOCAB, min_df: int = DEFAULT_MIN_DF) -> List[str]:
    """
    docs: texts or Documents
    Keeps words seen in at least `min_df` documents, most frequent first (ties by word),
    at most `max_vocab` of them.
    """
    if max_vocab < 1:
        raise ValueError(f'max_vocab must be >= 1, got {max_vocab}')
    if min_df < 1:
        raise ValueError(f'min_df must be >= 1, got {min_df}')
    freq = Bag()
    df: Dict[str, int] = {}
    for doc in _as_documents(docs):
        freq.update(doc.bag)
        for w in doc.bag.words():
            df[w] = df.get(w, 0) + 1
    # filter by doc freq, then sort by frequency
    vocab = [w for w, _ in freq.most_common() if df[w] >= min_df][:max_vocab]
    logger.debug('vocabulary: %d of %d distinct words kept', len(vocab), freq.len())
    return vocab


def vectorize_corpus(docs, vocab: List[str]) -> List[Dict[int, int]]:
    index: Dict[str, int] = {w: i for i, w in enumerate(vocab)}
    dtm: List[Dict[int, int]] = []
    for doc in _as_documents(docs):
        counts: Dict[int, int] = {}
        for w, c in doc.bag.items():
            if w in index:
                counts[index[w]] = c
        dtm.append(counts)
    return dtm


def build_doc_term_matrix(dtm: List[Dict[int, int]], vocab_size: int) -> np.ndarray:
    """Dense D x V count matrix from the sparse per-document dicts."""
    D = len(dtm)
    mat = np.zeros((D, vocab_size), dtype=np.int64)
    for d, counts in enumerate(dtm):
        for v, c in counts.items():
            mat[d, v] = c
    return mat


def build_corpus(texts, max_vocab: int = DEFAULT_MAX_VOCAB, min_df: int = DEFAULT_MIN_DF) -> Corpus:
    docs = _as_documents(texts)
    vocab = build_vocabulary(docs, max_vocab=max_vocab, min_df=min_df)
    dtm = vectorize_corpus(docs, vocab)
    return Corpus(docs=docs, vocab=vocab, dtm=dtm)


def frequency_frame(bag: Bag) -> pd.DataFrame:
    """Word frequency table, most frequent first; `share` is the fraction of all occurrences."""
    rows = bag.most_common()
    df = pd.DataFrame(rows, columns=['word', 'count'])
    total = bag.count()
    df['share'] = df['count'] / total if total > 0 else 0.0
    return df
