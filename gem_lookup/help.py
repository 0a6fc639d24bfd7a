"""Usage, help and version text for the ``gems`` command."""

from __future__ import annotations

from . import NAME, VERSION
from .rate_limit import MAX_REQUESTS_PER_SECOND, RATE_LIMIT_DOCUMENTATION_URL

COMMAND = "gems"

OPTIONS = (
    ("-h --help", "Display the help screen."),
    ("-j --json", "Display the raw JSON."),
    ("-v --version", "Display version information."),
)
OUTPUT_OPTION_SPACING = 21


def usage() -> str:
    return (
        f"Usage: {COMMAND} GEMS\n"
        "\n"
        "  Retrieves gem-related information from https://rubygems.org\n"
        "\n"
        f"Example: {COMMAND} rails rspec"
    )


def description() -> str:
    return (
        "This application's purpose is to make working with RubyGems.org easier. 💖\n"
        "It uses the RubyGems public API to perform lookups, and parses the JSON response\n"
        "body to provide details about the most recent version, as well as links to\n"
        "the home page, source code, and changelog.\n"
        "\n"
        "Feel free to pass in as many gems that you like, as it makes requests in\n"
        f"parallel. There is a rate limit, {MAX_REQUESTS_PER_SECOND}/sec. If it detects the amount of gems it\n"
        "has been passed is more than the rate limit, the application will run in Batch\n"
        "mode, and introduce a one second delay between batch lookups."
    )


def options() -> str:
    lines = ["Output Options:"]
    for flags, text in OPTIONS:
        lines.append(f"  {flags.ljust(OUTPUT_OPTION_SPACING)}{text}")
    return "\n".join(lines)


def content() -> str:
    return "\n\n".join(
        [
            usage(),
            description(),
            options(),
            f"Rate limit documentation: {RATE_LIMIT_DOCUMENTATION_URL}",
        ]
    )


def version() -> str:
    return f"{NAME} {VERSION}"


__all__ = ["COMMAND", "OUTPUT_OPTION_SPACING", "content", "description", "options", "usage", "version"]
