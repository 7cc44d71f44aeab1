"""
Domain-specific errors for the symbols bounded context.

The public lookup functions never raise: an unresolved message is a
normal ``None`` result. These errors are raised by application use
cases for caller input that cannot be a symbol at all, and are mapped
to exit codes at the interface layer.
"""


class SymbolResolutionError(Exception):
    """Base error for all symbol resolution errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class InvalidSymbolError(SymbolResolutionError):
    """Raised when a caller-supplied symbol is blank."""

    def __init__(self, symbol: str) -> None:
        super().__init__(f"Invalid symbol: {symbol!r}")
        self.symbol = symbol
