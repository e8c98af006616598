"""Tests for the extractor — patterns, cleaning, masking, pipeline."""

import re
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from dataclasses import FrozenInstanceError
from datetime import datetime, timezone

import pytest

from pii_extractor import Category, Extractor, ExtractorConfig, extract
from pii_extractor.cleaning import is_safe, normalize
from pii_extractor.masking import mask, mask_card, mask_email
from pii_extractor.patterns import PATTERNS, pattern_for, scan
from pii_extractor.report import NOTES, build_report

NOW = datetime(2026, 10, 17, 9, 30, tzinfo=timezone.utc)

SAMPLE = (
    "Contact me at john.doe@example.com or visit https://example.com. "
    "Call 123-456-7890. Card: 4111-1111-1111-1111. Meeting at 10:30 AM. #hello"
)
HOSTILE = "Email me at bad<script>@evil.com or admin@test.com; DROP TABLE users;"

DENIED = ("<script", "<iframe", "javascript:", "drop table", "delete from")


# ── Patterns ─────────────────────────────────────────────────────────

def test_every_category_has_a_pattern():
    assert set(PATTERNS) == set(Category)
    for c in Category:
        assert pattern_for(c) is PATTERNS[c]


def test_email_scan():
    assert list(scan(Category.EMAIL, "Contact me at alice@example.com please")) == [
        "alice@example.com"
    ]


def test_url_stops_at_paren_and_whitespace():
    assert extract("(see https://x.io/a) and http://y.org/b c", Category.URL) == [
        "https://x.io/a", "http://y.org/b",
    ]


def test_phone_formats():
    assert extract("Call 123-456-7890.", Category.PHONE) == ["123-456-7890"]
    assert extract("Call +1 (555) 123-4567 now", Category.PHONE) == ["+1 (555) 123-4567"]


def test_phone_over_matches_plain_digit_runs():
    # Known imprecision: any 10-digit run reads as a phone number
    assert extract("Invoice 5551234567", Category.PHONE) == ["5551234567"]


def test_card_separators():
    text = "a 4111-1111-1111-1111, b 5500 0000 0000 0004 c 4012888888881881"
    assert extract(text, Category.CARD) == [
        "4111-1111-1111-1111", "5500 0000 0000 0004", "4012888888881881",
    ]


def test_time_formats():
    text = "Meeting at 10:30 AM. Lunch 9:05pm, call at 23:59 not 24:00"
    assert extract(text, Category.TIME) == ["10:30 AM", "9:05pm", "23:59"]


def test_hashtags():
    assert extract("#hello #world_2 # nope", Category.HASHTAG) == ["#hello", "#world_2"]


# ── Normalizer ───────────────────────────────────────────────────────

def test_normalize_strips_trailing_punctuation():
    assert normalize("https://example.com.") == "https://example.com"
    assert normalize("  a!?;  ") == "a"
    assert normalize("a.b") == "a.b"
    assert normalize("") == ""
    assert normalize("...") == ""


@pytest.mark.parametrize("value", [
    "abc", "abc.", "abc. .", " x ,", "...", "a.b.", "  ", "10:30 AM.", "#tag!?",
])
def test_normalize_is_idempotent(value):
    once = normalize(value)
    assert normalize(once) == once


# ── Safety filter ────────────────────────────────────────────────────

@pytest.mark.parametrize("value", [
    "<script>", "< SCRIPT src=x", "<iframe src=x", "JavaScript:alert(1)",
    "img onerror=alert(1)", "x onload = go", "Drop  Table users", "delete from t",
])
def test_unsafe_values_rejected(value):
    assert not is_safe(value)


@pytest.mark.parametrize("value", [
    "hello@example.com", "https://example.com/path?id=3", "#script", "10:30 AM",
])
def test_ordinary_values_pass(value):
    assert is_safe(value)


def test_unsafe_urls_dropped():
    text = "https://evil.com/?q=<script>alert(1) https://x.com/a?x=1&onload=go https://ok.com"
    assert extract(text, Category.URL) == ["https://ok.com"]


# ── Masking ──────────────────────────────────────────────────────────

def test_mask_email():
    assert mask_email("john.doe@example.com") == "j***@example.com"
    assert mask_email("a@b@c.com") == "a***@b@c.com"


def test_mask_card():
    assert mask_card("4111-1111-1111-1111") == "4111 **** **** 1111"
    assert mask_card("5500 0000 0000 0004") == "5500 **** **** 0004"


def test_mask_identity_for_other_categories():
    assert mask(Category.URL, "https://a.io") == "https://a.io"
    assert mask(Category.HASHTAG, "#x") == "#x"
    assert mask(Category.EMAIL, "bob@x.io") == "b***@x.io"


# ── Category ─────────────────────────────────────────────────────────

def test_category_from_name():
    assert Category.from_name("card") is Category.CARD
    assert Category.from_name("credit_cards") is Category.CARD
    assert Category.from_name(" Hashtags ") is Category.HASHTAG
    with pytest.raises(ValueError):
        Category.from_name("ssn")


# ── Report ───────────────────────────────────────────────────────────

def test_build_report_fills_missing_categories():
    out = build_report({Category.EMAIL: ["a***@b.io"]}, NOW).to_dict()
    assert list(out) == ["metadata", "data", "counts"]
    assert list(out["data"]) == [
        "emails", "urls", "phones", "credit_cards", "times", "hashtags",
    ]
    assert out["data"]["emails"] == ["a***@b.io"]
    assert out["counts"] == {
        "emails": 1, "urls": 0, "phones": 0, "credit_cards": 0, "times": 0, "hashtags": 0,
    }
    assert out["metadata"] == {"extractedAt": "2026-10-17T09:30:00.000Z", "notes": NOTES}


def test_naive_timestamp_taken_as_utc():
    report = build_report({}, datetime(2026, 1, 2, 3, 4, 5, 600000))
    assert report.extracted_at == "2026-01-02T03:04:05.600Z"


def test_report_is_immutable():
    report = build_report({}, NOW)
    with pytest.raises(FrozenInstanceError):
        report.notes = "changed"
    with pytest.raises(TypeError):
        report.data[Category.EMAIL] = ("x",)


# ── Pipeline ─────────────────────────────────────────────────────────

def test_sample_text():
    out = Extractor().run(SAMPLE, now=NOW).to_dict()
    assert out["data"] == {
        "emails": ["j***@example.com"],
        "urls": ["https://example.com"],
        "phones": ["123-456-7890"],
        "credit_cards": ["4111 **** **** 1111"],
        "times": ["10:30 AM"],
        "hashtags": ["#hello"],
    }
    assert set(out["counts"].values()) == {1}


def test_injection_rejected():
    out = Extractor().run(HOSTILE).to_dict()
    assert out["data"]["emails"] == ["a***@test.com"]
    for values in out["data"].values():
        for v in values:
            assert not any(d in v.lower() for d in DENIED)


def test_empty_input():
    out = Extractor().run("").to_dict()
    assert all(v == [] for v in out["data"].values())
    assert all(n == 0 for n in out["counts"].values())


@pytest.mark.parametrize("text", ["", SAMPLE, HOSTILE, "x" * 50])
def test_counts_match_data(text):
    out = Extractor().run(text).to_dict()
    assert set(out["data"]) == set(out["counts"]) == {c.key for c in Category}
    for key, values in out["data"].items():
        assert out["counts"][key] == len(values)


def test_masked_shapes():
    text = (
        "x@a.io, yy.zz@mail.example.org and 1234 5678 9012 3456 / "
        "9999-8888-7777-6666 plus 1111222233334444"
    )
    out = Extractor().run(text).to_dict()
    assert len(out["data"]["emails"]) == 2
    assert len(out["data"]["credit_cards"]) == 3
    for e in out["data"]["emails"]:
        assert re.fullmatch(r".\*\*\*@.+", e)
    for c in out["data"]["credit_cards"]:
        assert re.fullmatch(r"\d{4} \*\*\*\* \*\*\*\* \d{4}", c)


def test_duplicates_kept_in_order():
    out = Extractor().run("b@x.io a@x.io b@x.io").to_dict()
    assert out["data"]["emails"] == ["b***@x.io", "a***@x.io", "b***@x.io"]


def test_same_text_reported_in_several_categories():
    out = Extractor().run("see https://shop.example.com/u/bob@mail.com").to_dict()
    assert out["data"]["urls"] == ["https://shop.example.com/u/bob@mail.com"]
    assert out["data"]["emails"] == ["b***@mail.com"]


def test_skip_categories():
    ex = Extractor(ExtractorConfig(skip_categories={Category.HASHTAG}))
    out = ex.run("#a x@y.io").to_dict()
    assert out["data"]["hashtags"] == []
    assert out["counts"]["hashtags"] == 0
    assert out["counts"]["emails"] == 1


def test_allow_list_not_masked():
    ex = Extractor(ExtractorConfig(allow_list={"help@corp.io"}))
    out = ex.run("help@corp.io or jane@corp.io").to_dict()
    assert out["data"]["emails"] == ["help@corp.io", "j***@corp.io"]


def test_mask_disabled():
    ex = Extractor(ExtractorConfig(mask=False))
    out = ex.run("Card 4111 1111 1111 1111 for a@b.io").to_dict()
    assert out["data"]["credit_cards"] == ["4111 1111 1111 1111"]
    assert out["data"]["emails"] == ["a@b.io"]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
