# Big Bag Of Words (BBOW)
# Reduces text to a collection of normalized words, each with its number of occurrences.
# Words are whitespace-separated spans of Unicode alphabetic characters; leading and
# trailing punctuation is trimmed, interior punctuation rejects the word.

from .tokenize import tokenize, is_word, has_uppercase, normalize
from .bag import Bag
from .data import Document, Corpus, build_vocabulary, vectorize_corpus, build_doc_term_matrix
from .data import build_corpus, frequency_frame
