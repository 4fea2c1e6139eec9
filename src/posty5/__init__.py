"""
Posty5 support package.

- config/: pydantic-settings configuration (POSTY5_* environment variables)
- observability/: structured JSON logging
"""
