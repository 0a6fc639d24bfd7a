from __future__ import annotations

from gem_lookup import help as help_text
from gem_lookup.rate_limit import RATE_LIMIT_DOCUMENTATION_URL


def test_usage_names_command_and_example() -> None:
    usage = help_text.usage()
    assert usage.splitlines()[0] == "Usage: gems GEMS"
    assert "Example: gems rails rspec" in usage


def test_options_are_aligned() -> None:
    lines = help_text.options().splitlines()
    assert lines[0] == "Output Options:"
    assert lines[1] == "  -h --help" + " " * 12 + "Display the help screen."
    for line in lines[1:]:
        assert line[2 + help_text.OUTPUT_OPTION_SPACING] != " "


def test_content_includes_rate_limit_link() -> None:
    content = help_text.content()
    assert content.startswith(help_text.usage())
    assert content.endswith(f"Rate limit documentation: {RATE_LIMIT_DOCUMENTATION_URL}")
    assert "Batch\nmode" in content


def test_version_line() -> None:
    assert help_text.version() == "gem_lookup 1.0.0"
