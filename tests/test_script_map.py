"""
Script Map Test Suite

This module contains tests for Traditional/Simplified conversion:
- Character classes (Han, Traditional-only)
- Forward and reverse lookups with identity fallback
- Codepoint-wise string conversion
- Dictionary merging and reverse index maintenance
"""

import pytest

from sinoscript import MalformedEntryError
from sinoscript.services import ScriptMap

from conftest import CHINESE_LINES

HAN_TEST_CASES = [
    ("中", True),
    ("\u4e00", True),  # start of the range
    ("\u9fa5", True),  # end of the range
    ("\u9fa6", False),
    ("〇", True),
    ("a", False),
    ("。", False),
    ("\U00020000", False),  # Extension B is outside the range
    ("", False),
    ("中国", False),
]


def test_is_han(config):
    script_map = ScriptMap(config, {})
    failed = [(char, expected) for char, expected in HAN_TEST_CASES if script_map.is_han(char) != expected]

    assert not failed, f"Han detection failures: {failed}"


def test_contains_han(tables):
    script_map = tables.script_map

    assert script_map.contains_han("abc中def")
    assert script_map.contains_han("〇")
    assert not script_map.contains_han("abc")
    assert not script_map.contains_han("")


def test_is_traditional_only(tables):
    assert tables.script_map.is_traditional_only("國")
    assert not tables.script_map.is_traditional_only("国")
    assert not tables.script_map.is_traditional_only("a")


def test_to_simplified(tables):
    script_map = tables.script_map

    assert script_map.to_simplified("國") == "国"
    assert script_map.to_simplified("国") == "国"
    assert script_map.to_simplified("x") == "x"
    assert script_map.to_simplified_string("漢語abc") == "汉语abc"


def test_to_traditional_returns_first_key(tables):
    script_map = tables.script_map

    assert script_map.to_traditional("国") == "國"
    assert script_map.to_traditional("发") == "發"  # 發 and 髮 both simplify to 发
    assert script_map.to_traditional("x") == "x"
    assert script_map.to_traditional_string("汉语") == "漢語"


def test_inverse_consistency(tables):
    script_map = tables.script_map
    for line in CHINESE_LINES:
        simplified = line.split("=")[1]
        traditional = script_map.to_traditional(simplified)
        assert script_map.to_simplified(traditional) == simplified


def test_simplification_is_idempotent(tables):
    script_map = tables.script_map
    text = "漢語國髮們 mixed 中文 😀"
    once = script_map.to_simplified_string(text)

    assert script_map.to_simplified_string(once) == once


def test_strings_are_converted_by_codepoint(tables):
    text = "𠀀國😀語"

    assert tables.script_map.to_simplified_string(text) == "𠀀国😀语"
    assert tables.script_map.to_traditional_string("𠀀国😀语") == text


def test_merge_adds_and_overwrites(tables):
    script_map = tables.script_map
    script_map.merge_dictionary(["門=门", "國=囯"])

    assert script_map.to_simplified("門") == "门"
    assert script_map.to_traditional("门") == "門"
    # 國 no longer simplifies to 国, so the reverse index drops it
    assert script_map.to_simplified("國") == "囯"
    assert script_map.to_traditional("国") == "国"
    assert script_map.to_traditional("囯") == "國"


def test_merge_overwrite_keeps_remaining_reverse_keys(tables):
    script_map = tables.script_map
    script_map.merge_dictionary(["發=發"])

    assert script_map.to_traditional("发") == "髮"


def test_merge_rejects_multi_character_entries(tables):
    with pytest.raises(MalformedEntryError):
        tables.script_map.merge_dictionary(["門=门", "國家=国家"])

    # Nothing from the failed merge is applied
    assert tables.script_map.to_simplified("門") == "門"


CHAIN_TEST_CASES = [
    # (lines, expected simplified form of 甲)
    (["甲=乙", "乙=丙"], "丙"),
    (["乙=丙", "甲=乙"], "丙"),
    (["甲=乙", "乙=甲"], "乙"),
]


@pytest.mark.parametrize("lines, expected", CHAIN_TEST_CASES)
def test_merge_resolves_chains(config, lines, expected):
    script_map = ScriptMap(config, {})
    script_map.merge_dictionary(lines)
    once = script_map.to_simplified_string("甲乙丙")

    assert script_map.to_simplified("甲") == expected
    assert script_map.to_simplified_string(once) == once


def test_merge_chain_through_existing_entries(tables):
    script_map = tables.script_map
    script_map.merge_dictionary(["国=囯"])

    assert script_map.to_simplified("國") == "囯"
    assert script_map.to_traditional("囯") == "国"
    assert not script_map.is_traditional_only("囯")
