from __future__ import annotations

import logging
import re
from concurrent.futures import ThreadPoolExecutor

import pytest

from profanity_filter import (
    ExactMatcher,
    ObfuscationMatcher,
    ProfanityException,
    ProfanityFilter,
    compile_obfuscation_pattern,
    main,
)
from profanity_words import LexiconStore


# ---------- pattern compiler ----------

def test_obfuscation_pattern_shape() -> None:
    pattern = compile_obfuscation_pattern("fuck")
    assert pattern.pattern == r"\b[fF][*_\-.]?[uv][*_\-.]?[c¢][*_\-.]?[kK]\b"
    assert pattern.flags & re.IGNORECASE


@pytest.mark.parametrize("text", ["fuck", "FUCK", "fvck", "f.u.c.k", "f-u_c*k", "fu¢k"])
def test_obfuscation_pattern_matches_variants(text: str) -> None:
    assert compile_obfuscation_pattern("fuck").search(text)


@pytest.mark.parametrize("text", ["f--uck", "fuckery", "f u c k"])
def test_obfuscation_pattern_rejects(text: str) -> None:
    assert compile_obfuscation_pattern("fuck").search(text) is None


def test_obfuscation_pattern_leet_classes() -> None:
    pattern = compile_obfuscation_pattern("shit")
    assert pattern.search("sh!t")
    assert pattern.search("5h1t")
    assert pattern.search("sh|t")


def test_obfuscation_pattern_escapes_punctuation_in_phrases() -> None:
    assert compile_obfuscation_pattern("casse-couilles").search("quel casse-couilles")
    assert compile_obfuscation_pattern("je t'emmerde").search("Je t'emmerde")
    assert compile_obfuscation_pattern("a$$").pattern.startswith(r"\b[a@4]")


# ---------- matchers ----------

def test_exact_matcher_respects_word_boundaries() -> None:
    matcher = ExactMatcher(["ass", "bitch", "son of a bitch"])
    assert matcher.matches("classic assessment") == set()
    assert matcher.matches("what an ASS") == {"ass"}
    assert matcher.matches("son of a bitch") == {"bitch", "son of a bitch"}
    assert matcher.first_match("nothing here") is None
    assert len(matcher) == 3


def test_exact_matcher_censors_phrases_before_words() -> None:
    matcher = ExactMatcher(["bitch", "son of a bitch"])
    assert matcher.censor("You son of a bitch") == "You **************"


def test_obfuscation_matcher_only_sees_listed_separators() -> None:
    matcher = ObfuscationMatcher(["fuck"])
    assert matcher.matches("f*u*c*k off")
    assert matcher.matches("fvck")
    assert not matcher.matches("f u c k")
    assert len(matcher) == 1


# ---------- contains_profanity ----------

def test_case_insensitive(profanity_filter: ProfanityFilter) -> None:
    assert profanity_filter.contains_profanity("SHIT")
    assert profanity_filter.contains_profanity("shit")
    assert profanity_filter.contains_profanity("This is SHIT and ShIt")


@pytest.mark.parametrize(
    "text",
    [
        "I need an assessment",
        "I need an assessment of this service",
        "Classic music is great",
        "Analytics dashboard",
        "Association meeting",
        "Great service, very professional!",
        "balloon",
        "bookkeeper",
        "successful",
        "Mississippi",
    ],
)
def test_clean_text_is_not_flagged(profanity_filter: ProfanityFilter, text: str) -> None:
    assert not profanity_filter.contains_profanity(text)


@pytest.mark.parametrize("text", [None, "", "   ", "\n\t"])
def test_blank_text_is_clean(profanity_filter: ProfanityFilter, text) -> None:
    assert not profanity_filter.contains_profanity(text)


@pytest.mark.parametrize(
    "text",
    [
        "This service is shit",
        "Ce service est merde",
        "This is merde and shit",
        "enculé",
        "C'est enculé!",
        "This is fucking great",
        "You're a mofo",
        "What a douchebag",
        "you faggot",
    ],
)
def test_plain_profanity_in_both_languages(profanity_filter: ProfanityFilter, text: str) -> None:
    assert profanity_filter.contains_profanity(text)


@pytest.mark.parametrize(
    "text",
    [
        "fdp ce service", "ntm", "va tg",
        "fils de pute", "nique ta mere", "ta gueule",
        "va te faire foutre", "ferme ta gueule", "nique ta mere la pute",
        "quel bouffon", "sale boloss", "espèce de baltringue",
        "wtf is this", "stfu now", "gtfo here",
    ],
)
def test_french_slang_and_abbreviations(profanity_filter: ProfanityFilter, text: str) -> None:
    assert profanity_filter.contains_profanity(text)


@pytest.mark.parametrize(
    "text",
    ["fdpppppp", "shiiiit", "shiiiiit", "fuuuuuck", "biiiitch", "meeerrrde", "connnnard", "ntmmmmm"],
)
def test_repeated_characters(profanity_filter: ProfanityFilter, text: str) -> None:
    assert profanity_filter.contains_profanity(text)


@pytest.mark.parametrize("text", ["sh1t happens", "b1tch please", "sh111t", "b1111tch"])
def test_leetspeak(profanity_filter: ProfanityFilter, text: str) -> None:
    assert profanity_filter.contains_profanity(text)


@pytest.mark.parametrize(
    "text",
    ["f*ck this", "This is f*ck!ng terrible", "f-u-c-k you", "s.h.i.t service", "d_i_c_k head"],
)
def test_obfuscated_with_separators(profanity_filter: ProfanityFilter, text: str) -> None:
    assert profanity_filter.contains_profanity(text)


def test_detection_is_logged(profanity_filter: ProfanityFilter, caplog) -> None:
    caplog.set_level(logging.WARNING, logger="profanity_filter")
    profanity_filter.contains_profanity("This shit is bad")
    assert "Profanity detected: shit" in caplog.text

    caplog.clear()
    profanity_filter.contains_profanity("f*ck this")
    assert "Obfuscated profanity detected" in caplog.text


def test_detected_word_can_be_kept_out_of_logs(caplog) -> None:
    pf = ProfanityFilter(LexiconStore(["shit"]), log_matches=False)
    caplog.set_level(logging.WARNING, logger="profanity_filter")
    assert pf.contains_profanity("This shit is bad")
    assert "<redacted>" in caplog.text
    assert "shit" not in caplog.text


def test_custom_lexicon() -> None:
    pf = ProfanityFilter(LexiconStore(["zut"]))
    assert pf.contains_profanity("Zut alors")
    assert pf.contains_profanity("zuuuut")
    assert not pf.contains_profanity("shit")


# ---------- find_profanity ----------

def test_find_profanity_lists_exact_hits(profanity_filter: ProfanityFilter) -> None:
    assert "shit" in profanity_filter.find_profanity("This shit is terrible")
    found = profanity_filter.find_profanity("This shit is fucking terrible")
    assert {"shit", "fucking"} <= set(found)
    assert found == sorted(found)
    assert "encule" in profanity_filter.find_profanity("C'est enculé")


@pytest.mark.parametrize("text", [None, "", "  ", "Great service!"])
def test_find_profanity_empty_for_clean_text(profanity_filter: ProfanityFilter, text) -> None:
    assert profanity_filter.find_profanity(text) == []


def test_obfuscated_hit_is_detected_but_not_listed(profanity_filter: ProfanityFilter) -> None:
    assert profanity_filter.contains_profanity("f*ck this")
    assert profanity_filter.find_profanity("f*ck this") == []


# ---------- censor_profanity ----------

def test_censor_masks_plain_words(profanity_filter: ProfanityFilter) -> None:
    censored = profanity_filter.censor_profanity("This shit is bad")
    assert censored == "This **** is bad"
    assert "shit" not in censored.lower()
    assert "*" in censored


def test_censor_is_case_insensitive_and_keeps_length(profanity_filter: ProfanityFilter) -> None:
    assert profanity_filter.censor_profanity("What the FUCK") == "What the ****"


def test_censor_masks_whole_phrase(profanity_filter: ProfanityFilter) -> None:
    assert profanity_filter.censor_profanity("You son of a bitch") == "You **************"


@pytest.mark.parametrize("text", ["Great service!", "", "   "])
def test_censor_leaves_clean_text_unchanged(profanity_filter: ProfanityFilter, text: str) -> None:
    assert profanity_filter.censor_profanity(text) == text


def test_censor_none_returns_none(profanity_filter: ProfanityFilter) -> None:
    assert profanity_filter.censor_profanity(None) is None


def test_censor_works_on_original_text_only(profanity_filter: ProfanityFilter) -> None:
    # Detected after normalization, but the written form is not a lexicon word
    assert profanity_filter.contains_profanity("shiiiit happens")
    assert profanity_filter.censor_profanity("shiiiit happens") == "shiiiit happens"


# ---------- validate_text ----------

def test_validate_accepts_clean_text(profanity_filter: ProfanityFilter) -> None:
    profanity_filter.validate_text("Great service, very professional!")
    profanity_filter.validate_text(None)
    profanity_filter.validate_text("   ")


def test_validate_rejects_profanity(profanity_filter: ProfanityFilter) -> None:
    with pytest.raises(ProfanityException, match="inappropriate language") as exc_info:
        profanity_filter.validate_text("This shit is terrible")
    assert exc_info.value.status_code == 400


def test_validate_message_does_not_depend_on_words(profanity_filter: ProfanityFilter) -> None:
    messages = set()
    for text in ("This shit is terrible", "f*ck this", "fils de pute"):
        with pytest.raises(ProfanityException) as exc_info:
            profanity_filter.validate_text(text)
        messages.add(exc_info.value.message)
    assert messages == {ProfanityException.DEFAULT_MESSAGE}


# ---------- batch / concurrency / demo ----------

def test_check_many(profanity_filter: ProfanityFilter) -> None:
    assert profanity_filter.check_many(["shit", "Great service!"]) == {"shit": True, "Great service!": False}


def test_shared_filter_across_threads(profanity_filter: ProfanityFilter) -> None:
    texts = ["This shit is bad", "Great service!", "f*ck this", "Classic music is great"] * 25
    expected = [profanity_filter.contains_profanity(text) for text in texts]
    with ThreadPoolExecutor(max_workers=8) as pool:
        assert list(pool.map(profanity_filter.contains_profanity, texts)) == expected


def test_demo_runner(capsys) -> None:
    assert main(["shit", "hello there"]) == 0
    out = capsys.readouterr().out
    assert "BLOCKED" in out
    assert "ALLOWED" in out


def test_demo_runner_explain(capsys) -> None:
    main(["--explain", "Sh1t"])
    out = capsys.readouterr().out
    assert "leetspeak" in out
    assert "'shit'" in out
