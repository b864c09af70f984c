import pytest

from app.config import Settings, validate_settings


def make_settings(**overrides) -> Settings:
    values = {
        "WORD_SOURCE": "files",
        "WORD_LIST_DIR": "/srv/word-lists",
        "WORD_LIST_PATTERN": "{length}-harfli-kelimeler.txt",
        "STRENGTH_LABEL_LOCALE": "en",
        "LOG_LEVEL": "INFO",
    }
    values.update(overrides)
    return Settings(**values)


def test_validate_settings_accepts_valid_values():
    validate_settings(make_settings())


def test_validate_settings_accepts_bip39_without_directory():
    validate_settings(make_settings(WORD_SOURCE="bip39", WORD_LIST_DIR=""))


def test_validate_settings_rejects_unknown_word_source():
    with pytest.raises(ValueError) as exc:
        validate_settings(make_settings(WORD_SOURCE="database"))

    assert "WORD_SOURCE" in str(exc.value)


def test_validate_settings_requires_length_placeholder():
    with pytest.raises(ValueError) as exc:
        validate_settings(make_settings(WORD_LIST_PATTERN="words.txt"))

    assert "WORD_LIST_PATTERN" in str(exc.value)


def test_validate_settings_rejects_unknown_locale():
    with pytest.raises(ValueError) as exc:
        validate_settings(make_settings(STRENGTH_LABEL_LOCALE="de"))

    assert "STRENGTH_LABEL_LOCALE" in str(exc.value)


def test_validate_settings_accepts_lowercase_log_level():
    validate_settings(make_settings(LOG_LEVEL="debug"))


def test_validate_settings_reports_every_problem():
    settings = make_settings(WORD_LIST_PATTERN="words.txt", STRENGTH_LABEL_LOCALE="de", LOG_LEVEL="LOUD")

    with pytest.raises(ValueError) as exc:
        validate_settings(settings)

    message = str(exc.value)
    assert "WORD_LIST_PATTERN" in message
    assert "STRENGTH_LABEL_LOCALE" in message
    assert "LOG_LEVEL" in message
