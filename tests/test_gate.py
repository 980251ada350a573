from lingotag_core.gate import count_alphabetic, passes


def test_count_ignores_digits_punctuation_and_whitespace():
    assert count_alphabetic("a1 b2, c3!") == 3
    assert count_alphabetic("   \t123 ...") == 0


def test_count_includes_non_latin_letters():
    assert count_alphabetic("läuft") == 5
    assert count_alphabetic("Привет, мир") == 9
    assert count_alphabetic("日本語") == 3


def test_no_minimum_always_passes():
    assert passes("", None)
    assert passes("123", None)


def test_boundary_is_inclusive():
    assert passes("abc", 3)
    assert not passes("ab", 3)
    assert not passes("ab 12", 3)


def test_zero_minimum_passes_empty_text():
    assert passes("", 0)
