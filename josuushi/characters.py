"""
Kana character handling for josuushi.

Provides the character class tables, hiragana/katakana conversion,
rendaku (sequential voicing) and gemination used when numerals and
counters are joined.
"""

import unicodedata
from typing import Dict

# ============================================================================
# Kana Character Tables
# ============================================================================

# Sokuon (gemination marker)
SOKUON_CHARACTERS = {"sokuon": "っッ"}

# Small kana modifiers and long vowel marker
MODIFIER_CHARACTERS = {
    "+a": "ぁァ", "+i": "ぃィ", "+u": "ぅゥ", "+e": "ぇェ", "+o": "ぉォ",
    "+ya": "ゃャ", "+yu": "ゅュ", "+yo": "ょョ", "+wa": "ゎヮ",
}

# Main kana table, hiragana first and katakana last
KANA_CHARACTERS = {
    "a": "あア",     "i": "いイ",     "u": "うウ",     "e": "えエ",     "o": "おオ",
    "ka": "かカ",    "ki": "きキ",    "ku": "くク",    "ke": "けケ",    "ko": "こコ",
    "sa": "さサ",    "shi": "しシ",   "su": "すス",    "se": "せセ",    "so": "そソ",
    "ta": "たタ",    "chi": "ちチ",   "tsu": "つツ",   "te": "てテ",    "to": "とト",
    "na": "なナ",    "ni": "にニ",    "nu": "ぬヌ",    "ne": "ねネ",    "no": "のノ",
    "ha": "はハ",    "hi": "ひヒ",    "fu": "ふフ",    "he": "へヘ",    "ho": "ほホ",
    "ma": "まマ",    "mi": "みミ",    "mu": "むム",    "me": "めメ",    "mo": "もモ",
    "ya": "やヤ",                     "yu": "ゆユ",                     "yo": "よヨ",
    "ra": "らラ",    "ri": "りリ",    "ru": "るル",    "re": "れレ",    "ro": "ろロ",
    "wa": "わワ",    "wi": "ゐヰ",                     "we": "ゑヱ",    "wo": "をヲ",
    "n": "んン",
    # Voiced consonants (dakuten)
    "ga": "がガ",    "gi": "ぎギ",    "gu": "ぐグ",    "ge": "げゲ",    "go": "ごゴ",
    "za": "ざザ",    "ji": "じジ",    "zu": "ずズ",    "ze": "ぜゼ",    "zo": "ぞゾ",
    "da": "だダ",    "dji": "ぢヂ",   "dzu": "づヅ",   "de": "でデ",    "do": "どド",
    "ba": "ばバ",    "bi": "びビ",    "bu": "ぶブ",    "be": "べベ",    "bo": "ぼボ",
    "pa": "ぱパ",    "pi": "ぴピ",    "pu": "ぷプ",    "pe": "ぺペ",    "po": "ぽポ",
    "vu": "ゔヴ",
}

ALL_CHARACTERS = {
    **SOKUON_CHARACTERS,
    **MODIFIER_CHARACTERS,
    **KANA_CHARACTERS,
}

# Build character -> class mapping
CHAR_CLASS_HASH: Dict[str, str] = {}
for char_class, chars in ALL_CHARACTERS.items():
    for char in chars:
        CHAR_CLASS_HASH[char] = char_class


KATAKANA_CHARACTERS = frozenset(chars[-1] for chars in ALL_CHARACTERS.values())


def is_katakana(word: str) -> bool:
    """Check if every character of the word is katakana."""
    return bool(word) and all(c in KATAKANA_CHARACTERS or c == 'ー' for c in word)


# ============================================================================
# Dakuten (Voicing) Tables
# ============================================================================

# Unvoiced -> voiced mappings
DAKUTEN_HASH = {
    "ka": "ga", "ki": "gi", "ku": "gu", "ke": "ge", "ko": "go",
    "sa": "za", "shi": "ji", "su": "zu", "se": "ze", "so": "zo",
    "ta": "da", "chi": "dji", "tsu": "dzu", "te": "de", "to": "do",
    "ha": "ba", "hi": "bi", "fu": "bu", "he": "be", "ho": "bo",
}

# Unvoiced -> semi-voiced (handakuten) mappings
HANDAKUTEN_HASH = {
    "ha": "pa", "hi": "pi", "fu": "pu", "he": "pe", "ho": "po",
}


# ============================================================================
# Kana Conversion
# ============================================================================

def _convert_script(text: str, index: int) -> str:
    result = []
    for char in text:
        char_class = CHAR_CLASS_HASH.get(char)
        if char_class:
            result.append(ALL_CHARACTERS[char_class][index])
        else:
            result.append(char)
    return ''.join(result)


def as_hiragana(text: str) -> str:
    """
    Convert katakana to hiragana.

    Characters outside the kana tables (kanji, digits, the long vowel
    mark) are kept as they are.
    """
    return _convert_script(text, 0)


def as_katakana(text: str) -> str:
    """Convert hiragana to katakana."""
    return _convert_script(text, -1)


def normalize_kana(text: str) -> str:
    """
    Normalize kana input typed by a learner.

    - NFKC folds half-width katakana and combining dakuten
    - whitespace (including the ideographic space) is dropped
    - katakana is folded to hiragana
    """
    text = unicodedata.normalize('NFKC', text)
    text = ''.join(text.split())
    return as_hiragana(text)


# ============================================================================
# Rendaku (Sequential Voicing) and Gemination
# ============================================================================

def rendaku(text: str, handakuten: bool = False) -> str:
    """
    Apply rendaku (sequential voicing) to the first character.

    Rendaku converts unvoiced consonants to voiced (e.g., ほ→ぼ).

    Args:
        text: Text to modify.
        handakuten: If True, apply handakuten (semi-voicing, ほ→ぽ) instead.

    Returns:
        Text with rendaku applied, or the text unchanged when the first
        character has no voiced form.
    """
    if not text:
        return text

    first_char = text[0]
    cc = CHAR_CLASS_HASH.get(first_char)

    if not cc:
        return text

    use_hash = HANDAKUTEN_HASH if handakuten else DAKUTEN_HASH
    voiced = use_hash.get(cc)

    if not voiced:
        return text

    # Keep the script of the original character
    orig_chars = KANA_CHARACTERS[cc]
    pos = orig_chars.find(first_char)
    return KANA_CHARACTERS[voiced][pos] + text[1:]


def geminate(text: str) -> str:
    """
    Apply gemination (sokuon) to the last character.

    Replaces the last character with っ/ッ, e.g. "いち" -> "いっ",
    "ひゃく" -> "ひゃっ".
    """
    if not text:
        return text

    if is_katakana(text[-1]):
        return text[:-1] + "ッ"
    return text[:-1] + "っ"
