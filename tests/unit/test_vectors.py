"""Known-answer tests from RFC 3492 section 7.1 and common IDNs."""

from __future__ import annotations

import pytest

from punycoder import decode, encode

# (name, unicode, punycode)
RFC3492_SAMPLES = [
    (
        "A-arabic",
        "ليهمابتكلموشعربي؟",
        "egbpdaj6bu4bxfgehfvwxn",
    ),
    (
        "B-chinese-simplified",
        "他们为什么不说中文",
        "ihqwcrb4cv8a8dqg056pqjye",
    ),
    (
        "C-chinese-traditional",
        "他們爲什麽不說中文",
        "ihqwctvzc91f659drss3x8bo0yb",
    ),
    (
        "D-czech",
        "Pročprostěnemluvíčesky",
        "Proprostnemluvesky-uyb24dma41a",
    ),
    (
        "E-hebrew",
        "למההםפשוטלאמדבריםעברית",
        "4dbcagdahymbxekheh6e0a7fei0b",
    ),
    (
        "L-3nenb-gumi",
        "3年B組金八先生",
        "3B-ww4c5e180e575a65lsy2b",
    ),
    (
        "M-super-monkeys",
        "安室奈美恵-with-SUPER-MONKEYS",
        "-with-SUPER-MONKEYS-pc58ag80a8qai00g7n9n",
    ),
    (
        "N-hello-another-way",
        "Hello-Another-Way-それぞれの場所",
        "Hello-Another-Way--fc4qua05auwb3674vfr0b",
    ),
    (
        "O-hitotsu-yane",
        "ひとつ屋根の下2",
        "2-u9tlzr9756bt3uc0v",
    ),
    (
        "P-maji-de-koi",
        "MajiでKoiする5秒前",
        "MajiKoi5-783gue6qz075azm5e",
    ),
    (
        "Q-pafii-de-runba",
        "パフィーdeルンバ",
        "de-jg4avhby1noc0d",
    ),
    (
        "R-sono-supiido-de",
        "そのスピードで",
        "d9juau41awczczp",
    ),
    (
        "S-ascii-only",
        "-> $1.00 <-",
        "-> $1.00 <--",
    ),
]

COMMON_LABELS = [
    ("bücher", "bcher-kva"),
    ("münchen", "mnchen-3ya"),
    ("中国", "fiqs8s"),
    ("日本", "wgv71a"),
    ("テスト", "zckzah"),
    ("こんにちは", "28j2a3ar1p"),
]

ALL_SAMPLES = [(u, p) for _, u, p in RFC3492_SAMPLES] + COMMON_LABELS
SAMPLE_IDS = [name for name, _, _ in RFC3492_SAMPLES] + [p for _, p in COMMON_LABELS]


class TestKnownVectors:
    """Test encoder and decoder against published vectors."""

    @pytest.mark.parametrize(("unicode_text", "punycode"), ALL_SAMPLES, ids=SAMPLE_IDS)
    def test_encode(self, unicode_text: str, punycode: str) -> None:
        """Test encoding produces the published Punycode."""
        assert encode(unicode_text) == punycode

    @pytest.mark.parametrize(("unicode_text", "punycode"), ALL_SAMPLES, ids=SAMPLE_IDS)
    def test_decode(self, unicode_text: str, punycode: str) -> None:
        """Test decoding restores the original text."""
        assert decode(punycode) == unicode_text

    @pytest.mark.parametrize(("unicode_text", "punycode"), ALL_SAMPLES, ids=SAMPLE_IDS)
    def test_decode_uppercase_digits(self, unicode_text: str, punycode: str) -> None:
        """Test the extended segment is read case-insensitively."""
        basic, delimiter, extended = punycode.rpartition("-")
        assert decode(basic + delimiter + extended.upper()) == unicode_text
