"""
Phrase Override Table Test Suite

This module contains tests for greedy longest-match phrase lookups.
"""

import pytest

from sinoscript import MalformedEntryError, ToneFormat
from sinoscript.services import PhraseOverrideTable


def test_longest_phrase_wins(tables):
    match = tables.phrase_table.longest_match("中国人民银行", 0, ToneFormat.WITHOUT_TONE, " ")

    assert match.word == "中国人民"
    assert match.pinyin == "zhong guo ren min"


def test_match_at_offset(tables):
    match = tables.phrase_table.longest_match("中国人民银行", 4, ToneFormat.WITH_TONE_NUMBER, ",")

    assert match.word == "银行"
    assert match.pinyin == "yin2,hang2"


def test_shorter_phrase_when_longer_is_absent(tables):
    match = tables.phrase_table.longest_match("中国人", 0, ToneFormat.WITH_TONE_MARK, "")

    assert match.word == "中国"
    assert match.pinyin == "zhōngguó"


@pytest.mark.parametrize(
    ("text", "start"),
    [
        ("中", 0),  # shorter than a phrase
        ("中国", 1),  # one character left
        ("中国", 2),  # nothing left
        ("你好", 0),  # no entry
        ("", 0),
    ],
)
def test_no_match(tables, text, start):
    assert tables.phrase_table.longest_match(text, start) is None


def test_first_formatted_candidate_is_used(config):
    phrases = PhraseOverrideTable(config, {"长长": "cháng,zhǎng"})

    assert phrases.longest_match("长长").pinyin == "chang,zhang"


def test_max_phrase_length(config):
    phrases = PhraseOverrideTable(config, {"中国": "zhōng,guó", "中国人民": "zhōng,guó,rén,mín"})

    assert phrases.max_phrase_length == 4
    phrases.merge_dictionary(["中华人民共和国=zhōng,huá,rén,mín,gòng,hé,guó"])
    assert phrases.max_phrase_length == 7
    assert len(phrases) == 3


def test_empty_table(config):
    phrases = PhraseOverrideTable(config, {})

    assert phrases.max_phrase_length == 0
    assert phrases.longest_match("中国") is None


def test_merge_is_visible_immediately(tables):
    tables.phrase_table.merge_dictionary(["长发=cháng,fà"])

    assert tables.phrase_table.longest_match("长发").pinyin == "chang,fa"


@pytest.mark.parametrize("line", ["中=zhōng", "中国=zhōng", "中国=zhōng,guó,rén", "中国"])
def test_merge_rejects_invalid_phrases(tables, line):
    with pytest.raises(MalformedEntryError):
        tables.phrase_table.merge_dictionary([line])
