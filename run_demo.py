from typing import List

from bbow.bag import Bag
from bbow.data import Document, build_corpus, build_doc_term_matrix, frequency_frame
from bbow.viz import plot_top_words
from bbow.config import OUTPUT_DIR

"""
Demo runner:
- Try to load Yelp Review Full via datasets; if unavailable, fallback to a small local sample.
- Build one bag over all reviews and print the most frequent words
- Build vocabulary and doc-term matrix
- Save the top-words chart
"""


def load_yelp_reviews(n_docs: int = 1000) -> List[Document]:
    try:
        from datasets import load_dataset
        ds = load_dataset('yelp_review_full', split=f'train[:{n_docs}]')
        docs: List[Document] = []
        for row in ds:
            # labels: 0..4 -> stars 1..5
            stars = int(row['label']) + 1
            docs.append(Document(text=row['text'], covariates={'stars': float(stars)}))
        return docs
    except Exception as e:
        print(f'datasets unavailable ({e}), using the built-in sample')
        samples = [
            ("Great food and friendly staff. Loved the pizza!", 5),
            ("Service was slow, but the burger tasted fine.", 3),
            ("Horrible experience. Dirty tables and cold fries.", 1),
            ("Amazing pasta, cozy atmosphere. Will come again.", 5),
            ("Average coffee. Price is okay.", 3),
            ("Terrible service. Manager was rude.", 1),
            ("Nice patio seating and fresh salad.", 4),
            ("Waited too long. Food arrived cold.", 2),
            ("Delicious tacos! Highly recommend.", 5),
            ("Café au lait was great, the crêpes even better.", 4),
            ("Good takeout experience, fast pickup.", 4),
            ("Mediocre taste, decent price. Can't complain.", 3),
        ]
        return [Document(text=t, covariates={'stars': float(s)}) for t, s in samples]


def main():
    docs = load_yelp_reviews(n_docs=400)
    bag = Bag.from_texts(d.text for d in docs)
    print(f'{len(docs)} documents: {bag.count()} words, {bag.len()} distinct')
    print(frequency_frame(bag).head(15).to_string(index=False))

    corpus = build_corpus(docs, max_vocab=500, min_df=2)
    dtm = build_doc_term_matrix(corpus.dtm, len(corpus.vocab))
    print(f'vocabulary size: {len(corpus.vocab)}, doc-term matrix: {dtm.shape}')

    path = plot_top_words(bag, picname='demo', output_dir=OUTPUT_DIR, title='Review Words')
    print('Artifacts saved:', path)


if __name__ == '__main__':
    main()
