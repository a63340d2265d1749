"""Reusable field checks shared by the transfer schemas."""

from datetime import date


def not_blank(v: str) -> str:
    if not v or not v.strip():
        raise ValueError("must not be blank")
    return v


def in_the_past(v: date) -> date:
    if v >= date.today():
        raise ValueError("must be in the past")
    return v


def past_or_present(v: date) -> date:
    if v > date.today():
        raise ValueError("must be in the past or present")
    return v
