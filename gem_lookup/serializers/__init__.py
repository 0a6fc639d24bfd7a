"""Output serializers and the factory selecting one."""

from __future__ import annotations

from ..config import LookupConfig
from .base import BaseSerializer
from .emoji import EmojiSerializer, convert_date
from .raw_json import JsonSerializer

SERIALIZERS = ("emoji", "json")


def build_serializer(output_format: str, config: LookupConfig | None = None) -> BaseSerializer:
    if output_format == "emoji":
        return EmojiSerializer(config)
    if output_format == "json":
        return JsonSerializer()
    raise ValueError(f"Unknown output format: {output_format!r} (expected one of {SERIALIZERS})")


__all__ = [
    "BaseSerializer",
    "EmojiSerializer",
    "JsonSerializer",
    "SERIALIZERS",
    "build_serializer",
    "convert_date",
]
