# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

from __future__ import annotations

import doctest

import pytest

import fluentkit
import fluentkit.api as api_module
from fluentkit import FluentMap, FluentSequence, FluentText, fluent_list, fluent_map, fluent_text

pytestmark = pytest.mark.unit


def test_fluent_list_wraps_sequence() -> None:
    seq = fluent_list([1, 2, 3, 4])
    assert isinstance(seq, FluentSequence)
    assert seq.filter(lambda value: value % 2 == 0).to_raw() == [2, 4]


def test_fluent_map_returns_map_wrapper() -> None:
    fmap = fluent_map({"a": 1, "b": 2})
    assert isinstance(fmap, FluentMap)
    assert fmap.find(1) == "a"


def test_fluent_text_wraps_string() -> None:
    text = fluent_text("hello world")
    assert isinstance(text, FluentText)
    assert text.substring(0, 5) == "hello"


def test_cross_wrapper_chain() -> None:
    result = (
        fluent_map({"b": "x,y", "a": "z"})
        .ksort()
        .values()
        .map(lambda value: fluent_text(value).explode(","))
        .flat()
        .join("|")
    )
    assert result == "z|x|y"


def test_api_docstring_examples() -> None:
    failures, _ = doctest.testmod(api_module)
    assert failures == 0


def test_public_exports() -> None:
    for name in fluentkit.__all__:
        assert hasattr(fluentkit, name)
    assert fluentkit.__version__ == "0.1.0"
