"""Thai romanization map."""

from __future__ import annotations

CHARMAP = {
    "ก": "k", "ข": "kh", "ค": "kh", "ฆ": "kh", "ง": "ng",
    "จ": "ch", "ฉ": "ch", "ช": "ch", "ซ": "s", "ฌ": "ch",
    "ญ": "y", "ฎ": "d", "ฏ": "t", "ฐ": "th", "ฑ": "th",
    "ฒ": "th", "ณ": "n", "ด": "d", "ต": "t", "ถ": "th",
    "ท": "th", "ธ": "th", "น": "n", "บ": "b", "ป": "p",
    "ผ": "ph", "ฝ": "f", "พ": "ph", "ฟ": "f", "ภ": "ph",
    "ม": "m", "ย": "y", "ร": "r", "ล": "l", "ว": "w",
    "ศ": "s", "ษ": "s", "ส": "s", "ห": "h", "ฬ": "l",
    "อ": "o", "ฮ": "h",
    "ะ": "a", "ั": "a", "า": "a", "ำ": "am", "ิ": "i", "ี": "i",
    "ึ": "ue", "ื": "ue", "ุ": "u", "ู": "u", "เ": "e",
    "แ": "ae", "โ": "o", "ใ": "ai", "ไ": "ai",
    # Tone marks and the silencer carry no Latin letters.
    "่": "", "้": "", "๊": "", "๋": "", "์": "", "็": "",
    "ๆ": "", "ฯ": "",
    **{chr(0x0E50 + digit): str(digit) for digit in range(10)},
}
