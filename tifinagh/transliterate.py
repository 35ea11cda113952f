"""Latin-to-Tifinagh transliteration."""

from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = ["TranslitRule", "RULES", "transliterate"]


@dataclass(frozen=True)
class TranslitRule:
    """A Latin sequence and the Tifinagh text that replaces it."""

    src: str
    dst: str


# Order matters: earlier rules win, so multi-character sequences come
# before the plain letters they start with.
RULES: tuple[TranslitRule, ...] = (
    # Spirants (fricatives): letters with a line below.
    TranslitRule("\u1e6f", "\u2d5d"),  # ṯ -> ⵝ
    TranslitRule("\u1e0f", "\u2d38"),  # ḏ -> ⴸ
    TranslitRule("\u1e35", "\u2d3f"),  # ḵ -> ⴿ
    TranslitRule("\u1e07", "\u2d32"),  # ḇ -> ⴲ
    TranslitRule("g\u0331", "\u2d34"),  # g̱ -> ⴴ
    # Labialized consonants: letter followed by a degree sign.
    TranslitRule("g\u00b0", "\u2d33\u2d6f"),  # g° -> ⴳⵯ
    TranslitRule("k\u00b0", "\u2d3d\u2d6f"),  # k° -> ⴽⵯ
    # Affricates and specific glyphs.
    TranslitRule("\u010d", "\u2d5e"),  # č -> ⵞ
    TranslitRule("\u011f", "\u2d35"),  # ğ -> ⴵ
    TranslitRule("\u0263", "\u2d56"),  # ɣ -> ⵖ
    TranslitRule("\u03b5", "\u2d44"),  # ε -> ⵄ
    # Emphatic (dotted) consonants.
    TranslitRule("\u1e0d", "\u2d39"),  # ḍ -> ⴹ
    TranslitRule("\u1e6d", "\u2d5f"),  # ṭ -> ⵟ
    TranslitRule("\u1e63", "\u2d5a"),  # ṣ -> ⵚ
    TranslitRule("\u1e93", "\u2d65"),  # ẓ -> ⵥ
    TranslitRule("\u1e5b", "\u2d55"),  # ṛ -> ⵕ
    TranslitRule("\u1e25", "\u2d43"),  # ḥ -> ⵃ
    # Base alphabet.
    TranslitRule("a", "\u2d30"),
    TranslitRule("b", "\u2d31"),
    TranslitRule("c", "\u2d5b"),
    TranslitRule("d", "\u2d37"),
    TranslitRule("e", "\u2d3b"),
    TranslitRule("f", "\u2d3c"),
    TranslitRule("g", "\u2d33"),
    TranslitRule("h", "\u2d40"),
    TranslitRule("i", "\u2d49"),
    TranslitRule("j", "\u2d4a"),
    TranslitRule("k", "\u2d3d"),
    TranslitRule("l", "\u2d4d"),
    TranslitRule("m", "\u2d4e"),
    TranslitRule("n", "\u2d4f"),
    TranslitRule("q", "\u2d47"),
    TranslitRule("r", "\u2d54"),
    TranslitRule("s", "\u2d59"),
    TranslitRule("t", "\u2d5c"),
    TranslitRule("u", "\u2d53"),
    TranslitRule("v", "\u2d60"),
    TranslitRule("w", "\u2d61"),
    TranslitRule("x", "\u2d45"),
    TranslitRule("y", "\u2d62"),
    TranslitRule("z", "\u2d63"),
)

_REPLACEMENTS = {rule.src: rule.dst for rule in RULES}
# Regex alternation tries branches left to right, so the first rule in
# table order that matches at a position is the one applied.
_PATTERN = re.compile("|".join(re.escape(rule.src) for rule in RULES))


def transliterate(text: str | None) -> str | None:
    """Transliterate Latin-based text to Tifinagh.

    Text is scanned left to right; at each position the first rule whose
    source matches is applied. Anything no rule matches is kept as is.
    Returns None when given None.
    """
    if text is None:
        return None
    return _PATTERN.sub(lambda match: _REPLACEMENTS[match.group()], text)