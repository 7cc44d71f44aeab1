"""
Interfaces layer package.

Callers of the application layer: the command-line entry point and the
Pydantic schemas it emits. No business logic belongs here.
"""
