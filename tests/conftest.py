"""
Shared fixtures for the sinoscript test suite.

Most tests run against a small hand-written dictionary so that expected
output does not depend on the contents of the built-in data packages.
"""

import sys
from pathlib import Path

import pytest

# Add the parent directory to path to import sinoscript
sys.path.insert(0, str(Path(__file__).parent.parent))

from sinoscript import TransliterationConfig, Transliterator
from sinoscript.services import DictionaryInitializationService, ToneFormattingService

CHINESE_LINES = [
    "國=国",
    "語=语",
    "長=长",
    "發=发",
    "髮=发",
    "們=们",
    "銀=银",
    "慶=庆",
    "漢=汉",
]

PINYIN_LINES = [
    "你=nǐ",
    "好=hǎo,hào",
    "中=zhōng,zhòng",
    "国=guó",
    "成=chéng",
    "都=dōu,dū",
    "重=zhòng,chóng",
    "庆=qìng",
    "长=cháng,zhǎng",
    "发=fā,fà",
    "语=yǔ",
    "汉=hàn",
    "女=nǚ",
    "绿=lǜ,lù",
    "了=le,liǎo",
    "们=men",
    "人=rén",
    "民=mín",
    "行=xíng,háng",
    "银=yín",
    "〇=líng",
]

MULTI_PINYIN_LINES = [
    "重庆=chóng,qìng",
    "银行=yín,háng",
    "成都=chéng,dū",
    "中国=zhōng,guó",
    "中国人民=zhōng,guó,rén,mín",
]


@pytest.fixture
def config():
    return TransliterationConfig.create_default()


@pytest.fixture
def formatter(config):
    return ToneFormattingService(config)


@pytest.fixture
def tables(config):
    return DictionaryInitializationService(config).tables_from_lines(CHINESE_LINES, PINYIN_LINES, MULTI_PINYIN_LINES)


@pytest.fixture
def transliterator(config, tables):
    return Transliterator(config, tables)


@pytest.fixture(scope="session")
def default_transliterator():
    """Transliterator over the built-in pypinyin and OpenCC data."""
    return Transliterator()
