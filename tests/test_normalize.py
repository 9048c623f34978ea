import pytest

from simple_hashtag.core.configuration import TagConfiguration
from simple_hashtag.domain.normalize import is_blank, normalize_tags, parameterize
from simple_hashtag.domain.tags import TagList


@pytest.fixture
def lowercase_config():
    return TagConfiguration(force_lowercase=True)

@pytest.fixture
def parameterize_config():
    return TagConfiguration(force_parameterize=True)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Crème Brûlée!", "creme-brulee"),
        ("  Hello   World  ", "hello-world"),
        ("already-a-slug", "already-a-slug"),
        ("snake_case Tag", "snake_case-tag"),
        ("C++ / Rust", "c-rust"),
        ("--trim--", "trim"),
        ("東京", ""),
    ],
)
def test_parameterize(raw, expected):
    assert parameterize(raw) == expected

def test_is_blank():
    assert is_blank(None)
    assert is_blank("")
    assert is_blank(" \t\n")
    assert not is_blank(" a ")

def test_passes_are_off_by_default():
    tags = TagList("Fun", "fun", "Crème Brûlée")
    assert tags == ["Fun", "fun", "Crème Brûlée"]

def test_force_lowercase_folds_and_dedupes(lowercase_config):
    tags = TagList("Fun", "FUN", "Ünïcode", config=lowercase_config)
    assert tags == ["fun", "ünïcode"]

def test_force_lowercase_applies_to_remove(lowercase_config):
    tags = TagList("Fun", "Happy", config=lowercase_config)
    tags.remove("FUN")
    assert tags == ["happy"]

def test_force_parameterize_slugs_and_dedupes(parameterize_config):
    tags = TagList("Hello World", "hello-world", "Crème Brûlée", config=parameterize_config)
    assert tags == ["hello-world", "creme-brulee"]

def test_force_parameterize_drops_tags_that_slug_to_nothing(parameterize_config):
    assert TagList("!!!", "東京", "ok", config=parameterize_config) == ["ok"]

def test_force_parameterize_applies_to_remove(parameterize_config):
    tags = TagList("Hello World", "Other", config=parameterize_config)
    tags.remove("HELLO world")
    assert tags == ["other"]

def test_passes_are_independent():
    both = TagConfiguration(force_lowercase=True, force_parameterize=True)
    assert normalize_tags(["Hello World"], both) == ["hello-world"]
    lowercase_only = TagConfiguration(force_lowercase=True)
    assert normalize_tags(["Hello World"], lowercase_only) == ["hello world"]

def test_normalize_coerces_to_str():
    class Named:
        def __str__(self):
            return " named "

    assert normalize_tags([Named(), None, "named"], TagConfiguration()) == ["named"]
