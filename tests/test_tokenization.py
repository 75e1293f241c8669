from sentence_rhythm.tokenization import count_words, iter_words


def test_count_words_handles_contractions_and_elisions():
    assert count_words("It's O'Malley's rock'n'roll band.") == 4


def test_count_words_counts_space_separated_tokens():
    assert count_words("one two three four five") == 5
    assert count_words("  spaced   out\twords\n") == 3


def test_count_words_counts_each_cjk_character():
    assert count_words("我爱自然语言处理") == 8
    assert count_words("こんにちは") == 5
    assert count_words("안녕하세요") == 5
    assert count_words("ｱｲｳ") == 3


def test_count_words_mixed_scripts():
    """Latin runs count once, CJK characters count individually."""
    assert count_words("Python是最好的 language") == 6


def test_count_words_ignores_punctuation_and_whitespace():
    assert count_words("") == 0
    assert count_words("   \n\t") == 0
    assert count_words("... ?! — “” 。") == 0


def test_count_words_accented_latin():
    assert count_words("Café déjà vu, naïve Łódź") == 5


def test_count_words_skips_latin1_math_signs():
    assert count_words("3 × 4 ÷ 2") == 3
    assert count_words("× ÷") == 0


def test_iter_words_returns_offsets():
    text = "Hello, it’s me."
    words = list(iter_words(text))

    assert [word.text for word in words] == ["Hello", "it’s", "me"]
    assert words[1].start_char == 7
    assert text[words[-1].start_char : words[-1].end_char] == "me"
