"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API paths, JSON fetch helper
    └── {feature}.py      # Fetch functions (one per endpoint/concept)

Fetch functions return pydantic models from ``schemas.py`` and raise the
typed errors from ``errors.py``; they never print or swallow failures.
"""
