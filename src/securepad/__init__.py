"""Password-gated terminal note editor with periodic autosave."""

__all__ = [
    "adapters",
    "actions",
    "auth",
    "buffer",
    "dispatch",
    "keymaps",
    "render",
    "runtime",
    "storage",
]

__version__ = "0.1.0"
