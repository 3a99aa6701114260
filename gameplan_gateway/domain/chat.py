"""Keyword-based replies for the help chat"""

from typing import Tuple

FALLBACK_REPLY = "I'm not sure how to respond to that. Try asking about 'loan,' 'interest,' or 'help.'"

# First rule whose keywords appear in the message wins
REPLY_RULES: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (
        ("loan", "what is"),
        "A loan is a sum of money borrowed from a lender, which you must repay, "
        "usually with interest, over a set period.",
    ),
    (
        ("interest",),
        "Interest is the cost of borrowing money, calculated as a percentage of the loan amount.",
    ),
    (
        ("help",),
        "I can help you calculate loan payments. Please use the loan calculator on this site to get started.",
    ),
)


def reply_to(message: str) -> str:
    """Return the canned reply for the first matching keyword rule"""
    text = message.lower()
    for keywords, reply in REPLY_RULES:
        if any(keyword in text for keyword in keywords):
            return reply
    return FALLBACK_REPLY
