"""Profanity detection and censoring for user-submitted reviews.

Two independent strategies are combined:

* the exact matcher looks up every lexicon word, as a whole word, in the
  normalized text;
* the obfuscation matcher runs one tolerant pattern per lexicon word
  (``f*ck``, ``sh!t``, ``a$$``) over both the normalized and the raw text.

All patterns are compiled once when a :class:`ProfanityFilter` is built and
never change afterwards, so one instance can be shared between threads.
"""
import argparse
import logging
import re
from typing import Dict, Iterable, List, Optional, Set

from profanity_words import LexiconStore, default_lexicon
from text_normalizer import normalize_text, trace_normalization

logger = logging.getLogger(__name__)

# ==================== CONSTANTS ====================
OBFUSCATION_CLASSES = {
    'a': '[a@4]',
    'e': '[e3€]',
    'i': '[i1!|]',
    'o': '[o0]',
    's': '[s$5]',
    't': '[t7+]',
    'l': '[l1|]',
    'c': '[c¢]',
    'u': '[uv]',
}

# At most one of these may sit between two letters of an obfuscated word
SEPARATOR_SLOT = r'[*_\-.]?'

CENSOR_CHAR = '*'


# ==================== ERRORS ====================
class ProfanityException(Exception):
    """Raised when submitted text contains inappropriate language.

    The message is the same whatever was found, so it is safe to show to the
    end user as is.
    """

    DEFAULT_MESSAGE = (
        "Your review contains inappropriate language. "
        "Please remove offensive words and try again."
    )
    status_code = 400

    def __init__(self, message: str = DEFAULT_MESSAGE):
        super().__init__(message)
        self.message = message


# ==================== PATTERN COMPILER ====================
def compile_exact_pattern(word: str) -> re.Pattern:
    return re.compile(rf'\b{re.escape(word)}\b', re.IGNORECASE)


def compile_obfuscation_pattern(word: str) -> re.Pattern:
    """Build a pattern that tolerates common substitutions and separators.

    ``fuck`` -> ``\\b[fF][*_\\-.]?[uv][*_\\-.]?[c¢][*_\\-.]?[kK]\\b``
    """
    pattern_parts = []
    for char in word:
        lowered = char.lower()
        char_class = OBFUSCATION_CLASSES.get(lowered)
        if char_class is None:
            char_class = f'[{re.escape(lowered)}{re.escape(char.upper())}]'
        pattern_parts.append(char_class)

    base_pattern = SEPARATOR_SLOT.join(pattern_parts)
    return re.compile(rf'\b{base_pattern}\b', re.IGNORECASE)


# ==================== MATCHERS ====================
class ExactMatcher:
    """Whole-word, case-insensitive lookup of lexicon words."""

    def __init__(self, lexicon: Iterable[str]):
        self._patterns: Dict[str, re.Pattern] = {
            word: compile_exact_pattern(word) for word in lexicon
        }
        # Longest first so phrases are masked before the words inside them
        self._censor_order = sorted(self._patterns, key=lambda w: (-len(w), w))

    def first_match(self, text: str) -> Optional[str]:
        for word, pattern in self._patterns.items():
            if pattern.search(text):
                return word
        return None

    def matches(self, text: str) -> Set[str]:
        return {word for word, pattern in self._patterns.items() if pattern.search(text)}

    def censor(self, text: str) -> str:
        """Mask every occurrence with asterisks, one per character of the word"""
        for word in self._censor_order:
            text = self._patterns[word].sub(CENSOR_CHAR * len(word), text)
        return text

    def __len__(self) -> int:
        return len(self._patterns)


class ObfuscationMatcher:
    """Tolerant per-word patterns. Only reports whether something matched."""

    def __init__(self, lexicon: Iterable[str]):
        self._patterns: List[re.Pattern] = [compile_obfuscation_pattern(word) for word in lexicon]

    def matches(self, text: str) -> bool:
        return any(pattern.search(text) for pattern in self._patterns)

    def __len__(self) -> int:
        return len(self._patterns)


# ==================== MAIN FILTER CLASS ====================
class ProfanityFilter:
    def __init__(self, lexicon: Optional[LexiconStore] = None, log_matches: bool = True):
        self.lexicon = lexicon if lexicon is not None else default_lexicon()
        self.log_matches = log_matches
        self.exact_matcher = ExactMatcher(self.lexicon)
        self.obfuscation_matcher = ObfuscationMatcher(self.lexicon)

    def contains_profanity(self, text: Optional[str]) -> bool:
        """Check if the given text contains profanity"""
        if text is None or not text.strip():
            return False

        normalized = normalize_text(text)

        word = self.exact_matcher.first_match(normalized)
        if word is not None:
            logger.warning("Profanity detected: %s", word if self.log_matches else "<redacted>")
            return True

        # Substitutions and separators only survive in the raw text
        if self.obfuscation_matcher.matches(normalized) or self.obfuscation_matcher.matches(text):
            logger.warning("Obfuscated profanity detected")
            return True

        return False

    def find_profanity(self, text: Optional[str]) -> List[str]:
        """Lexicon words found in the normalized text.

        Obfuscation-only hits are not reported, so this can be empty for text
        where ``contains_profanity`` is true.
        """
        if text is None or not text.strip():
            return []

        return sorted(self.exact_matcher.matches(normalize_text(text)))

    def censor_profanity(self, text: Optional[str]) -> Optional[str]:
        """Replace lexicon words found in the original text with asterisks.

        Matching runs on the text as written, not on its normalized form, so
        obfuscated or accent-stripped variants are left as they are.
        """
        if text is None or not text.strip():
            return text

        return self.exact_matcher.censor(text)

    def validate_text(self, text: Optional[str]) -> None:
        """Raise ProfanityException if the text contains profanity"""
        if self.contains_profanity(text):
            logger.info("Rejected text containing inappropriate language")
            raise ProfanityException()

    def check_many(self, texts: Iterable[str]) -> Dict[str, bool]:
        """Check a batch of texts, e.g. a list of known bypass attempts"""
        return {text: self.contains_profanity(text) for text in texts}


# ==================== DEMO ====================
SAMPLE_TEXTS = [
    "Great service, very professional!",
    "This service is shit", "SHIT", "sh1t happens", "shiiiit",
    "f*ck this", "f-u-c-k you", "s.h.i.t service",
    "Ce service est merde", "C'est enculé!", "fdpppppp",
    "I need an assessment", "Classic music is great",
]


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run texts through the review profanity filter.")
    parser.add_argument("texts", nargs="*", help="texts to check (defaults to a built-in sample)")
    parser.add_argument("--explain", action="store_true", help="show the normalization steps")
    args = parser.parse_args(argv)

    pf = ProfanityFilter()
    for text, blocked in pf.check_many(args.texts or SAMPLE_TEXTS).items():
        print(f"{text:35} => {'🚫 BLOCKED' if blocked else '✅ ALLOWED'}")
        if blocked:
            print(f"{'':35}    found: {pf.find_profanity(text)}  censored: {pf.censor_profanity(text)!r}")
        if args.explain:
            for step, output in trace_normalization(text):
                print(f"{'':35}    {step:>10}: {output!r}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
