"""Tests for binding options."""

import pytest
from pydantic import ValidationError

from envbind import Options


def test_defaults_are_off():
    options = Options()
    assert not options.split_words
    assert not options.required
    assert not options.parallel


def test_options_are_immutable():
    options = Options(parallel=True)
    with pytest.raises(ValidationError):
        options.parallel = False
    assert options.parallel


def test_model_copy_overrides():
    options = Options(split_words=True).model_copy(update={"required": True})
    assert options.split_words
    assert options.required
    assert not options.parallel
