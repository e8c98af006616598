"""Partial redaction for the two sensitive categories."""

from __future__ import annotations
import re
from types import MappingProxyType
from typing import Callable, Mapping

from .types import Category

_CARD_SEPARATORS = re.compile(r"[\-\s]")


def mask_email(email: str) -> str:
    """``john.doe@example.com`` → ``j***@example.com``.

    Assumes a non-empty local part, which the email pattern guarantees.
    """
    local, domain = email.split("@", 1)
    return local[0] + "***@" + domain


def mask_card(card: str) -> str:
    """``4111-1111-1111-1111`` → ``4111 **** **** 1111``.  Middle digits are dropped."""
    digits = _CARD_SEPARATORS.sub("", card)
    return digits[:4] + " **** **** " + digits[-4:]


MASKERS: Mapping[Category, Callable[[str], str]] = MappingProxyType({
    Category.EMAIL: mask_email,
    Category.CARD: mask_card,
})


def mask(category: Category, value: str) -> str:
    masker = MASKERS.get(category)
    return masker(value) if masker else value
