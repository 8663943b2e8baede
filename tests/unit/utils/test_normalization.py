from lfm.utils.normalization import (
    fold_char,
    fold_text,
    split_terms,
    is_word_boundary,
)


def test_split_terms_drops_empty_tokens():
    assert split_terms("  open\tsettings \n dialog ") == ["open", "settings", "dialog"]
    assert split_terms("") == []
    assert split_terms("   ") == []


def test_fold_char_units():
    assert fold_char("A") == "a"
    assert fold_char("É") == "é"
    assert fold_char("Σ") == fold_char("ς") == "σ"
    assert fold_char("ß") == "ss"
    assert fold_char("ﬁ") == "fi"
    assert fold_char("ı") == fold_char("I") == "i"
    assert fold_char("İ") == "i\u0307"


def test_fold_text_matches_uppercase_form():
    for text in ("Straße", "ﬁle", "ıi", "İstanbul"):
        assert fold_text(text) == fold_text(text.upper())


def test_word_boundary_start_and_separators():
    text = "git-commit now"
    assert is_word_boundary(text, 0)
    assert is_word_boundary(text, 4)   # 'c' after '-'
    assert is_word_boundary(text, 11)  # 'n' after ' '
    assert not is_word_boundary(text, 1)
    assert not is_word_boundary(text, 3)  # the separator itself


def test_word_boundary_camel_case():
    assert is_word_boundary("openFile", 4)
    assert not is_word_boundary("OPENFILE", 4)
    assert not is_word_boundary("Openfile", 4)


def test_word_boundary_letter_digit_transitions():
    """Letter/digit transitions start a new word in both directions."""
    assert is_word_boundary("win10", 3)
    assert not is_word_boundary("win10", 4)
    assert is_word_boundary("3mf", 1)
    assert is_word_boundary("mp3Player", 2)

