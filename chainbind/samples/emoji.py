"""Sequence transforms: each one fans a string out into several."""

from __future__ import annotations


def fruits(s: str) -> list[str]:
    return [s + " 🍎", s + " 🍏"]


def faces(s: str) -> list[str]:
    return [s + " 😄", s + " 😍", s + " 😛"]


def flags(s: str) -> list[str]:
    return [s + " 🇹🇷", s + " 🇺🇸", s + " 🇩🇪"]


__all__ = ("fruits", "faces", "flags")
