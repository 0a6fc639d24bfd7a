"""RubyGems.org API rate limit constants."""

# Requests allowed per second; also the ceiling for a batch size.
MAX_REQUESTS_PER_SECOND = 10

RATE_LIMIT_DOCUMENTATION_URL = "https://guides.rubygems.org/rubygems-org-rate-limits/"

__all__ = ["MAX_REQUESTS_PER_SECOND", "RATE_LIMIT_DOCUMENTATION_URL"]
