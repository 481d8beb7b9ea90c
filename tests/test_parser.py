from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from parser import Command, get_current_month, parse_command, parse_transaction


# ---- Commands ------------------------------------------------------------------


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("今月", Command.MONTHLY_SUMMARY),
        ("固定一覧", Command.FIXED_LIST),
        ("残高", Command.BALANCE),
        ("  今月\n", Command.MONTHLY_SUMMARY),
    ],
)
def test_parse_command_exact_triggers(text, expected):
    assert parse_command(text) is expected


@pytest.mark.parametrize("text", ["ランチ 1200", "今月の集計", "固定", "", "残高 100"])
def test_parse_command_rejects_other_text(text):
    assert parse_command(text) is None


def test_command_tags_are_stable_strings():
    assert Command.MONTHLY_SUMMARY.value == "monthly_summary"
    assert Command.FIXED_LIST.value == "fixed_list"
    assert Command.BALANCE.value == "balance"


# ---- Transactions --------------------------------------------------------------


def test_description_and_amount_only():
    draft = parse_transaction("ランチ 1200")
    assert draft is not None
    assert draft.description == "ランチ"
    assert draft.amount == 1200
    assert draft.category is None
    assert draft.is_fixed is False


def test_user_category():
    draft = parse_transaction("スーパー 4500 食費")
    assert draft.description == "スーパー"
    assert draft.amount == 4500
    assert draft.category == "食費"
    assert draft.is_fixed is False


def test_fixed_marker_without_category():
    draft = parse_transaction("家賃 70000 固定")
    assert draft.amount == 70000
    assert draft.is_fixed is True
    assert draft.category is None


def test_category_and_fixed_marker():
    draft = parse_transaction("電気 8000 光熱費 固定")
    assert draft.category == "光熱費"
    assert draft.is_fixed is True


def test_fixed_marker_before_category():
    draft = parse_transaction("ネット 5000 固定 通信費")
    assert draft.category == "通信費"
    assert draft.is_fixed is True


def test_first_extra_token_wins_rest_discarded():
    # Only the first non-固定 token becomes the category; later ones are ignored.
    draft = parse_transaction("ランチ 1200 食費 会社 同僚")
    assert draft.category == "食費"
    assert draft.is_fixed is False


def test_fullwidth_digits_and_space():
    draft = parse_transaction("ランチ　１２００")
    assert draft.description == "ランチ"
    assert draft.amount == 1200


def test_comma_grouped_amount():
    assert parse_transaction("給料 250,000").amount == 250000


def test_fullwidth_comma_grouped_amount():
    assert parse_transaction("給料 ２５０,０００").amount == 250000


def test_leading_integer_is_used():
    assert parse_transaction("ランチ 1200円").amount == 1200


def test_surrounding_whitespace_and_runs():
    draft = parse_transaction("  ランチ    1200   食費  ")
    assert (draft.description, draft.amount, draft.category) == ("ランチ", 1200, "食費")


@pytest.mark.parametrize(
    "text",
    ["こんにちは", "hello", "ランチ abc", "lunch abc", "ランチ 0", "ランチ -500", "", "   "],
)
def test_unrecognized_input_returns_none(text):
    assert parse_transaction(text) is None


def test_amount_above_integer_range_is_rejected():
    assert parse_transaction("ランチ 99999999999999999999") is None
    assert parse_transaction(f"ランチ {2**63}") is None
    assert parse_transaction(f"ランチ {2**63 - 1}").amount == 2**63 - 1


def test_non_ascii_digits_are_rejected():
    # Arabic-Indic and other Unicode digits are not amounts
    assert parse_transaction("ランチ ١٢٠٠") is None
    assert parse_transaction("ランチ ১২০০") is None


def test_english_examples():
    assert parse_transaction("lunch 1200").amount == 1200
    assert parse_transaction("supermarket 4500 food").category == "food"
    assert parse_transaction("hello") is None


# ---- Month -----------------------------------------------------------------------


def test_current_month_in_japan_time():
    jst = timezone(timedelta(hours=9))
    assert get_current_month(datetime(2026, 2, 13, 18, 0, tzinfo=jst)) == "2026-02"


def test_month_rolls_over_before_utc_does():
    # 2026-01-31 15:30 UTC is already February 1st in Japan.
    assert get_current_month(datetime(2026, 1, 31, 15, 30, tzinfo=timezone.utc)) == "2026-02"
    assert get_current_month(datetime(2026, 1, 31, 14, 59, tzinfo=timezone.utc)) == "2026-01"


def test_naive_datetime_is_treated_as_utc():
    assert get_current_month(datetime(2025, 12, 31, 16, 0)) == "2026-01"


def test_other_timezones_are_converted():
    pst = timezone(timedelta(hours=-8))
    # 2026-03-31 08:00 PST == 2026-03-31 16:00 UTC == 2026-04-01 01:00 JST
    assert get_current_month(datetime(2026, 3, 31, 8, 0, tzinfo=pst)) == "2026-04"
