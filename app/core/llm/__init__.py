"""LLM integration layer.

This package is intentionally small and conservative:
- No prompt/output logging (may contain PHI).
- The API key comes from settings; without one, callers run in mock mode.
- Treated as a pure/stateless function by callers.
"""
