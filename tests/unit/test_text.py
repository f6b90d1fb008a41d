from workflow_agent.core.text import (
    extract_sentences,
    first_raw_sentence,
    format_minutes,
    sanitize_brief,
    sentence_case,
    strip_first_number,
    text_length,
    title_case,
)


def test_sanitize_collapses_whitespace():
    assert sanitize_brief("  Route   tickets\n\tto\r\nsupport  ") == "Route tickets to support"
    assert sanitize_brief("") == ""


def test_extract_sentences_splits_on_punctuation_runs_and_drops_short_fragments():
    brief = "Collect intake forms!!! Ok. Score each lead?? Yes... Sync the results to the CRM"
    assert extract_sentences(brief) == [
        "Collect intake forms",
        "Score each lead",
        "Sync the results to the CRM",
    ]


def test_extract_sentences_length_boundary():
    # exactly 6 chars is dropped, 7 is kept
    assert extract_sentences("abcdef. abcdefg.") == ["abcdefg"]


def test_first_raw_sentence_is_untrimmed():
    assert first_raw_sentence("Ship it. Then celebrate.") == "Ship it"
    assert first_raw_sentence("No punctuation at all") == "No punctuation at all"


def test_title_case_lowercases_rest_of_word_and_keeps_empty_words():
    assert title_case("send a WELCOME email") == "Send A Welcome Email"
    assert title_case("ship  boxes") == "Ship  Boxes"


def test_sentence_case():
    assert sentence_case("  notify owners") == "Notify owners"
    assert sentence_case("") == ""


def test_strip_first_number_only_removes_first_standalone_number():
    assert strip_first_number("Ship 3 boxes in 2 days") == "Ship  boxes in 2 days"
    assert strip_first_number("Use v2 api") == "Use v2 api"
    assert strip_first_number("Ship ٣ boxes in 2 days") == "Ship ٣ boxes in  days"


def test_format_minutes():
    assert format_minutes(10.0) == "10 min"
    assert format_minutes(7.5) == "7.5 min"
    assert format_minutes(5 / 1.5) == "3.3333333333333335 min"


def test_sentence_length_counts_utf16_code_units():
    assert text_length("🚀🚀🚀") == 6
    assert extract_sentences("🚀🚀🚀. 🚀🚀🚀🚀") == ["🚀🚀🚀🚀"]
