import pytest

from config import HIGH_PRIORITY_KEYWORDS, MEDIUM_PRIORITY_KEYWORDS
from priority import Priority, classify, detect_priority, matched_keyword


@pytest.mark.parametrize("text, expected", [
    ("The app is broken and urgent", "high"),
    ("I need help with a question", "medium"),
    ("What are your business hours?", "low"),
    ("", "low"),
    ("CRITICAL: system down", "high"),
])
def test_example_table(text, expected):
    assert classify(text) == expected


@pytest.mark.parametrize("keyword", HIGH_PRIORITY_KEYWORDS)
def test_every_high_keyword(keyword):
    assert classify(f"Hello, {keyword} here") is Priority.HIGH


@pytest.mark.parametrize("keyword", MEDIUM_PRIORITY_KEYWORDS)
def test_every_medium_keyword(keyword):
    assert classify(f"Hello, {keyword} here") is Priority.MEDIUM


def test_high_beats_medium():
    assert classify("Please help, this is an emergency") is Priority.HIGH
    assert classify("Support ticket: the login page shows an error") is Priority.HIGH


def test_case_insensitive():
    assert classify("URGENT issue") == classify("urgent issue") == Priority.HIGH
    assert classify("HeLp") is Priority.MEDIUM


def test_substring_not_whole_word():
    # "issue" inside "reissued"
    assert classify("The system reissued the ticket") is Priority.MEDIUM
    # "down" inside "download"
    assert classify("Where can I download the invoice?") is Priority.HIGH


def test_punctuation_and_newlines_kept():
    assert classify("error!") is Priority.HIGH
    assert classify("first line\nnot working\nthird line") is Priority.HIGH
    # whitespace is not collapsed, so the phrase no longer matches
    assert classify("it is not  working") is Priority.LOW


def test_idempotent():
    text = "I have a problem with my order"
    assert classify(text) is classify(text) is Priority.MEDIUM


def test_labels_are_plain_strings():
    assert classify("urgent") == "high"
    assert str(Priority.MEDIUM) == "medium"
    assert [p.value for p in Priority] == ["high", "medium", "low"]


def test_rank_orders_by_severity():
    assert Priority.HIGH.rank < Priority.MEDIUM.rank < Priority.LOW.rank


def test_matched_keyword_reports_first_in_declared_order():
    assert matched_keyword("crash and urgent") == (Priority.HIGH, "urgent")
    assert matched_keyword("trouble with support") == (Priority.MEDIUM, "trouble")
    assert matched_keyword("Thanks!") == (Priority.LOW, None)


def test_detect_priority_alias():
    assert detect_priority("asap please") is Priority.HIGH


def test_keyword_lists_are_immutable():
    assert isinstance(HIGH_PRIORITY_KEYWORDS, tuple)
    assert isinstance(MEDIUM_PRIORITY_KEYWORDS, tuple)
    assert all(kw == kw.lower() for kw in HIGH_PRIORITY_KEYWORDS + MEDIUM_PRIORITY_KEYWORDS)
