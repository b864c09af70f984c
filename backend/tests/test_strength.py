import pytest

from app.services.strength import Strength, classify, score_password


def test_short_password_is_weak():
    report = score_password("ab-cd")
    assert report.total_chars == 5
    assert report.unique_chars == 5
    assert report.strength == Strength.WEAK


def test_twenty_chars_with_ten_unique_is_very_strong():
    report = score_password("abcdefghij-abcdefghi")
    assert report.total_chars == 20
    assert report.unique_chars == 11
    assert report.strength == Strength.VERY_STRONG


def test_fifteen_chars_with_eight_unique_is_strong():
    report = score_password("abcdefga-abcdef")
    assert report.total_chars == 15
    assert report.unique_chars == 8
    assert report.strength == Strength.STRONG


def test_ten_chars_with_six_unique_is_medium():
    report = score_password("abcde-abcd")
    assert report.total_chars == 10
    assert report.unique_chars == 6
    assert report.strength == Strength.MEDIUM


def test_long_password_with_few_unique_chars_falls_through():
    # 24 chars but only 7 distinct: misses VERY_STRONG and STRONG
    report = score_password("abcabc-defdef-abcabc-def")
    assert report.total_chars == 24
    assert report.unique_chars == 7
    assert report.strength == Strength.MEDIUM


def test_unique_chars_are_case_insensitive():
    report = score_password("ABCDEabcde")
    assert report.unique_chars == 5
    assert report.strength == Strength.WEAK


@pytest.mark.parametrize(
    "total,unique,expected",
    [
        (20, 10, Strength.VERY_STRONG),
        (19, 10, Strength.STRONG),
        (20, 9, Strength.STRONG),
        (15, 8, Strength.STRONG),
        (14, 8, Strength.MEDIUM),
        (15, 7, Strength.MEDIUM),
        (10, 6, Strength.MEDIUM),
        (9, 6, Strength.WEAK),
        (10, 5, Strength.WEAK),
        (0, 0, Strength.WEAK),
    ],
)
def test_classify_threshold_boundaries(total, unique, expected):
    assert classify(total, unique) == expected


def test_digits_and_symbols_do_not_change_classification():
    letters = score_password("abcdefghij-abcdefghi")
    mixed = score_password("abcdefg123!abcdefghi")
    assert mixed.has_numbers is True
    assert mixed.has_special_chars is True
    assert letters.has_numbers is False
    assert mixed.total_chars == letters.total_chars
    assert mixed.strength == classify(mixed.total_chars, mixed.unique_chars)


def test_separator_counts_as_special_character():
    assert score_password("river-stone").has_special_chars is True
    assert score_password("riverstone").has_special_chars is False


def test_turkish_letters_and_spaces_are_not_special():
    report = score_password("çiçek güneş ırmak İzmir")
    assert report.has_special_chars is False
    assert report.has_numbers is False


def test_strength_order_and_labels():
    ranks = [s.rank for s in (Strength.WEAK, Strength.MEDIUM, Strength.STRONG, Strength.VERY_STRONG)]
    assert ranks == [0, 1, 2, 3]
    assert Strength.VERY_STRONG.label() == "Very Strong"
    assert Strength.WEAK.label("tr") == "Zayıf"
    assert Strength.STRONG.label("tr") == "Güçlü"
    assert Strength.VERY_STRONG.label("tr") == "Çok Güçlü"
