"""Tests for the content hash."""
import hashlib

import pytest

from mobile_schema.services.compilation.content_hash import (
    canonical_json,
    generate_content_hash,
    rolling_hash32,
)


@pytest.mark.parametrize("text, expected", [
    ("", "00000000"),
    ("a", "00000061"),
    ("ab", "00000c21"),
    ("hello", "05e918d2"),
])
def test_rolling_hash_known_values(text, expected):
    assert rolling_hash32(text) == expected


def test_rolling_hash_iterates_utf16_code_units():
    # U+1F600 is the surrogate pair D83D DE00
    assert rolling_hash32("\U0001F600") == "001b0d63"


def test_rolling_hash_is_always_eight_hex_digits():
    digest = rolling_hash32("x" * 10_000)

    assert len(digest) == 8
    int(digest, 16)


def test_canonical_json_is_compact_and_keeps_unicode():
    assert canonical_json({"name": "Café", "n": [1, 2]}) == '{"name":"Café","n":[1,2]}'


def test_canonical_json_preserves_key_order():
    assert canonical_json({"b": 1, "a": 2}) == '{"b":1,"a":2}'


def test_generate_hash_rolling32():
    assert generate_content_hash({"a": 1}, algorithm="rolling32") == rolling_hash32('{"a":1}')


def test_generate_hash_sha256():
    expected = hashlib.sha256('{"a":1}'.encode("utf-8")).hexdigest()

    assert generate_content_hash({"a": 1}, algorithm="sha256") == expected


def test_generate_hash_is_sensitive_to_content():
    assert generate_content_hash({"title": "Home"}) != generate_content_hash({"title": "Home 2"})


def test_unknown_algorithm_rejected():
    with pytest.raises(ValueError):
        generate_content_hash({}, algorithm="md5")


def test_rolling_hash_accepts_lone_surrogate():
    assert rolling_hash32("\ud83d") == "0000d83d"


@pytest.mark.parametrize("algorithm, length", [("rolling32", 8), ("sha256", 64)])
def test_generate_hash_with_truncated_surrogate_pair(algorithm, length):
    digest = generate_content_hash({"title": "Bad \ud83d title"}, algorithm=algorithm)

    assert len(digest) == length
    int(digest, 16)
