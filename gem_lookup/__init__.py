"""Rate-limited RubyGems.org lookups rendered as status lines."""

NAME = "gem_lookup"
VERSION = "1.0.0"

__all__ = ["NAME", "VERSION"]
