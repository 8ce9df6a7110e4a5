"""Interface adapters (user-facing front ends)."""

__all__: list[str] = []
