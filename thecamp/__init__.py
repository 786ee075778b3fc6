"""Client for the thecamp.or.kr letter service.

This package provides:
- A session transport that keeps the login cookie across calls
- Decoding of the portal's (often double-encoded) JSON envelopes
- Group, trainee and letter operations, plus a paginated letters iterator

Note: there is no interactive UI here; see scripts/ for small demos.
"""

__all__ = ["auth", "cli", "client", "envelope", "errors", "iterator", "models", "transport"]
