"""
Application layer package.

Contains use cases that orchestrate domain services.
Use cases accept DTOs, call domain services and return DTOs.
No framework imports, no direct IO.
"""
