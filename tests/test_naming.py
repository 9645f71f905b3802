import pytest

from envbind.naming import derive_key, split_words


@pytest.mark.parametrize(
    "name, words",
    [
        ("MyISCSIVolume", ["My", "ISCSI", "Volume"]),
        ("MultiWordVarWithAutoSplit", ["Multi", "Word", "Var", "With", "Auto", "Split"]),
        ("HTTPServer", ["HTTP", "Server"]),
        ("MixedCASE", ["Mixed", "CASE"]),
        ("ID", ["ID"]),
        ("port", ["port"]),
        ("snake_case_name", ["snake_case_name"]),
    ],
)
def test_split_words(name, words):
    assert split_words(name) == words


def test_derive_key_splits_acronym_then_word():
    assert derive_key("MyISCSIVolume", split=True) == "MY_ISCSI_VOLUME"


def test_derive_key_without_split_only_upper_cases():
    assert derive_key("MyISCSIVolume") == "MYISCSIVOLUME"


def test_derive_key_prefix():
    assert derive_key("port", prefix="APP") == "APP_PORT"
    assert derive_key("port", prefix="app") == "APP_PORT"


def test_derive_key_alt_replaces_name():
    key = derive_key("manual_override", prefix="env_config", alt="MANUAL_OVERRIDE_1")
    assert key == "ENV_CONFIG_MANUAL_OVERRIDE_1"


def test_derive_key_alt_wins_over_split():
    assert derive_key("AutoSplit", alt="custom", split=True) == "CUSTOM"
