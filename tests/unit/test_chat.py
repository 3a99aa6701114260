"""Unit tests for keyword chat replies"""

import pytest
from gameplan_gateway.domain.chat import reply_to, FALLBACK_REPLY


@pytest.mark.parametrize(
    "message, expected_start",
    [
        ("Can I get a loan?", "A loan is"),
        ("What is this site?", "A loan is"),
        ("Tell me about INTEREST", "Interest is"),
        ("help", "I can help"),
    ],
)
def test_reply_to_keywords(message: str, expected_start: str):
    assert reply_to(message).startswith(expected_start)


def test_reply_to_rule_order():
    """Loan rule wins when several keywords match"""
    assert reply_to("what is interest").startswith("A loan is")
    assert reply_to("interest help").startswith("Interest is")


def test_reply_to_fallback():
    assert reply_to("hello there") == FALLBACK_REPLY
    assert reply_to("") == FALLBACK_REPLY
