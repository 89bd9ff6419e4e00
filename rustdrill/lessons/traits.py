"""Trait lessons: appending "Bar" and shared licensing information."""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch

LICENSING_INFO = "Some information"


@singledispatch
def append_bar(value):
    """Append "Bar" to a string, or a "Bar" element to a list of strings."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _(value: list) -> list:
    value.append("Bar")
    return value


class Licensed:
    """Mixin giving every software the same licensing information."""

    def licensing_info(self) -> str:
        return LICENSING_INFO


@dataclass
class SomeSoftware(Licensed):
    version_number: int = 0


@dataclass
class OtherSoftware(Licensed):
    version_number: str = ""


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """True when both pieces of software carry the same licensing information."""
    return software.licensing_info() == software_two.licensing_info()