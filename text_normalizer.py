"""Canonicalize user text before it is matched against the lexicon.

The pipeline runs in a fixed order and the order matters:

1. leetspeak substitution  (``sh1t`` -> ``shit``)
2. separator collapse      (``f-u-c-k`` -> ``f u c k``)
3. accent stripping        (``enculé`` -> ``encule``)
4. case folding
5. repeated-character squash (``shiiiit`` -> ``shit``)

Squashing runs last so that ``SHIiiT`` and ``sh111t`` both reduce to ``shit``.
"""
import re
from typing import Callable, List, Optional, Tuple

# ==================== CONSTANTS ====================
LEET_SUBSTITUTIONS = {
    '0': 'o', '1': 'i', '3': 'e', '4': 'a', '5': 's',
    '7': 't', '8': 'b', '@': 'a', '$': 's', '!': 'i', '+': 't',
}

ACCENT_SUBSTITUTIONS = {
    # Lowercase
    'é': 'e', 'è': 'e', 'ê': 'e', 'ë': 'e',
    'à': 'a', 'â': 'a', 'ä': 'a',
    'ù': 'u', 'û': 'u', 'ü': 'u',
    'ï': 'i', 'î': 'i',
    'ô': 'o', 'ö': 'o',
    'ç': 'c',
    # Uppercase
    'É': 'E', 'È': 'E', 'Ê': 'E', 'Ë': 'E',
    'À': 'A', 'Â': 'A', 'Ä': 'A',
    'Ù': 'U', 'Û': 'U', 'Ü': 'U',
    'Ï': 'I', 'Î': 'I',
    'Ô': 'O', 'Ö': 'O',
    'Ç': 'C',
}

_LEET_TABLE = str.maketrans(LEET_SUBSTITUTIONS)
_ACCENT_TABLE = str.maketrans(ACCENT_SUBSTITUTIONS)

SEPARATOR_PATTERN = re.compile(r'[_\-*.\s]+')
REPEAT_PATTERN = re.compile(r'(.)\1+')


# ==================== PIPELINE STEPS ====================
def substitute_leetspeak(text: str) -> str:
    """Replace digits/symbols with the letters they imitate (0 -> o, $ -> s, ...)"""
    return text.translate(_LEET_TABLE)


def collapse_separators(text: str) -> str:
    """Turn any run of _ - * . or whitespace into a single space"""
    return SEPARATOR_PATTERN.sub(' ', text)


def strip_accents(text: str) -> str:
    return text.translate(_ACCENT_TABLE)


def fold_case(text: str) -> str:
    return text.lower()


def squash_repeats(text: str) -> str:
    """Reduce repeated characters to 1 (aaa -> a)"""
    return REPEAT_PATTERN.sub(r'\1', text)


PIPELINE: Tuple[Tuple[str, Callable[[str], str]], ...] = (
    ('leetspeak', substitute_leetspeak),
    ('separators', collapse_separators),
    ('accents', strip_accents),
    ('case', fold_case),
    ('repeats', squash_repeats),
)


# ==================== PUBLIC API ====================
def normalize_text(text: Optional[str]) -> str:
    """Run the full pipeline. None or empty input gives an empty string."""
    if not text:
        return ""

    for _name, step in PIPELINE:
        text = step(text)
    return text.strip()


def trace_normalization(text: Optional[str]) -> List[Tuple[str, str]]:
    """Debug helper: show the text after each pipeline step.

    Returns ``(step_name, output)`` pairs in pipeline order, ending with the
    trimmed result under ``'trim'``.
    """
    current = text or ""
    steps = []
    for name, step in PIPELINE:
        current = step(current)
        steps.append((name, current))
    steps.append(('trim', current.strip()))
    return steps
