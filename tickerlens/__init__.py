"""
TickerLens — free-text to financial symbol resolution.

Package root. Laid out as a small hexagonal monolith:

Layers:
    - domain: Pure symbol logic (aliases, extraction, classification).
    - application: Use cases and DTOs that orchestrate the domain.
    - interfaces: Command-line caller and Pydantic output schemas.
    - core: Configuration.
    - shared: Cross-cutting concerns (logging).
"""
