"""Japanese kana and common kanji romaji map, and particle stop words.

Katakana entries are derived from the hiragana table: both syllabaries sit at
a fixed 0x60 offset from each other.
"""

from __future__ import annotations

_KATAKANA_OFFSET = 0x60

_HIRAGANA = {
    "あ": "a", "い": "i", "う": "u", "え": "e", "お": "o",
    "か": "ka", "き": "ki", "く": "ku", "け": "ke", "こ": "ko",
    "が": "ga", "ぎ": "gi", "ぐ": "gu", "げ": "ge", "ご": "go",
    "さ": "sa", "し": "shi", "す": "su", "せ": "se", "そ": "so",
    "ざ": "za", "じ": "ji", "ず": "zu", "ぜ": "ze", "ぞ": "zo",
    "た": "ta", "ち": "chi", "つ": "tsu", "て": "te", "と": "to",
    "だ": "da", "ぢ": "ji", "づ": "zu", "で": "de", "ど": "do",
    "な": "na", "に": "ni", "ぬ": "nu", "ね": "ne", "の": "no",
    "は": "ha", "ひ": "hi", "ふ": "fu", "へ": "he", "ほ": "ho",
    "ば": "ba", "び": "bi", "ぶ": "bu", "べ": "be", "ぼ": "bo",
    "ぱ": "pa", "ぴ": "pi", "ぷ": "pu", "ぺ": "pe", "ぽ": "po",
    "ま": "ma", "み": "mi", "む": "mu", "め": "me", "も": "mo",
    "や": "ya", "ゆ": "yu", "よ": "yo",
    "ら": "ra", "り": "ri", "る": "ru", "れ": "re", "ろ": "ro",
    "わ": "wa", "ゐ": "wi", "ゑ": "we", "を": "wo", "ん": "n",
    "ぁ": "a", "ぃ": "i", "ぅ": "u", "ぇ": "e", "ぉ": "o",
    "ゃ": "ya", "ゅ": "yu", "ょ": "yo", "っ": "",
    "ゔ": "vu",
    # Contracted syllables.
    "きゃ": "kya", "きゅ": "kyu", "きょ": "kyo",
    "しゃ": "sha", "しゅ": "shu", "しょ": "sho",
    "ちゃ": "cha", "ちゅ": "chu", "ちょ": "cho",
    "にゃ": "nya", "にゅ": "nyu", "にょ": "nyo",
    "ひゃ": "hya", "ひゅ": "hyu", "ひょ": "hyo",
    "みゃ": "mya", "みゅ": "myu", "みょ": "myo",
    "りゃ": "rya", "りゅ": "ryu", "りょ": "ryo",
    "ぎゃ": "gya", "ぎゅ": "gyu", "ぎょ": "gyo",
    "じゃ": "ja", "じゅ": "ju", "じょ": "jo",
    "びゃ": "bya", "びゅ": "byu", "びょ": "byo",
    "ぴゃ": "pya", "ぴゅ": "pyu", "ぴょ": "pyo",
}

_KANJI = {
    "日": "nichi", "本": "hon", "人": "jin", "大": "dai", "中": "chuu",
    "小": "shou", "上": "ue", "下": "shita", "左": "hidari", "右": "migi",
    "月": "tsuki", "火": "hi", "水": "mizu", "木": "ki", "金": "kin",
    "土": "tsuchi", "山": "yama", "川": "kawa", "田": "ta", "空": "sora",
    "海": "umi", "花": "hana", "雨": "ame", "雪": "yuki", "風": "kaze",
    "時": "toki", "間": "kan", "年": "nen", "今": "ima", "新": "shin",
    "古": "furu", "東": "higashi", "西": "nishi", "南": "minami", "北": "kita",
    "日本": "nihon", "東京": "toukyou",
}


def _to_katakana(kana: str) -> str:
    """Shift every hiragana character of `kana` into the katakana block."""

    return "".join(chr(ord(character) + _KATAKANA_OFFSET) for character in kana)


CHARMAP = {
    **_HIRAGANA,
    **{_to_katakana(kana): romaji for kana, romaji in _HIRAGANA.items()},
    "ー": "-",
    "・": " ",
    **_KANJI,
}

STOP_WORDS = frozenset(
    {
        "の", "に", "は", "を", "た", "が", "で", "て", "と", "し",
        "れ", "さ", "ある", "いる", "も", "する", "から", "な", "こと", "として",
        "い", "や", "など", "なっ", "ない", "この", "ため", "その", "あっ", "よう",
        "また", "もの", "という", "あり", "まで", "られ", "なる", "へ", "か", "だ",
        "これ", "によって", "により", "おり", "より", "による", "ず", "なり", "られる", "において",
        "ば", "なかっ", "なく", "しかし", "について", "せ", "だっ", "その後", "できる", "それ",
        "う", "ので", "なお", "のみ", "でき", "き", "つ", "における", "および", "いう",
    }
)
