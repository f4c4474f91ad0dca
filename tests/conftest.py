"""Shared test fixtures and configuration for textseq tests."""

import pytest

from textseq import DynamicSequence


@pytest.fixture
def languages():
    """The five-language list used by the demo."""
    return ["Java", "Python", "C", "C++", "Fortran"]


@pytest.fixture
def language_sequence(languages):
    """Container adopting the language list."""
    return DynamicSequence.from_slice(languages)


@pytest.fixture
def half_full():
    """Default-capacity container holding two values."""
    seq = DynamicSequence(4)
    seq.insert("alpha")
    seq.insert("beta")
    return seq
