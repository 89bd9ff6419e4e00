"""Struct lesson: packages with shipping fees."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Package:
    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __post_init__(self) -> None:
        if self.weight_in_grams <= 0:
            raise ValueError("Can not ship a weightless package.")

    def is_international(self) -> bool:
        return self.recipient_country != self.sender_country

    def get_fees(self, cents_per_gram: int) -> int:
        return cents_per_gram * self.weight_in_grams