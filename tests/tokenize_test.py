from bbow.tokenize import iter_chunks, trim, iter_candidates, is_word, has_uppercase, normalize, tokenize


def test_chunks_split_on_unicode_whitespace():
    # no-break space, ideographic space, line separator
    text = "a\u00a0b\u3000c\u2028d  \t e"
    assert list(iter_chunks(text)) == ['a', 'b', 'c', 'd', 'e']
    assert list(iter_chunks("   ")) == []


def test_trim_edges_only():
    assert trim("...hello!!") == 'hello'
    assert trim("(b-banana)") == 'b-banana'
    assert trim("Can't") == "Can't"
    assert trim("1984") == ''
    assert trim("«日本語»") == '日本語'


def test_candidates_keep_empty_spans():
    assert list(iter_candidates("hi -- there")) == ['hi', '', 'there']


def test_is_word():
    assert is_word("hello")
    assert is_word("café")
    assert is_word("مرحبًا")
    assert not is_word("")
    assert not is_word("can't")
    assert not is_word("b-banana")
    assert not is_word("abc1")
    assert not is_word("two words")


def test_uppercase_and_normalize():
    assert has_uppercase("Hello")
    assert has_uppercase("ÉCOLE")
    assert not has_uppercase("hello")
    assert not has_uppercase("日本語")
    assert normalize("ÉCOLE") == 'école'
    assert normalize("tESt") == 'test'
    w = "unchanged"
    assert normalize(w) is w


def test_tokenize_order():
    assert tokenize("It ain't over untïl it ain't, over.") == ['it', 'over', 'untïl', 'it', 'over']


def test_titlecase_is_not_uppercase():
    assert has_uppercase("ǅ") is False
    assert normalize("ǅ") == 'ǅ'


def test_decomposed_accent_is_not_alphabetic():
    # U+0301 COMBINING ACUTE ACCENT is a mark outside Other_Alphabetic
    assert not is_word("cafe\u0301")
    assert trim("cafe\u0301") == 'cafe'
    assert tokenize("cafe\u0301s") == []


def test_next_line_splits_chunks():
    assert list(iter_chunks("one\u0085two")) == ['one', 'two']
    # U+001F is a separator for str.split() but not White_Space
    assert list(iter_chunks("one\u001ftwo")) == ['one\u001ftwo']


def test_final_sigma_folding():
    assert normalize("ΣΑΣ") == 'σας'


if __name__ == '__main__':
    for name, fn in list(globals().items()):
        if name.startswith('test_'):
            fn()
    print('tokenize tests passed')
