"""minibash package: a small re-implementation of the Unix ``ls`` utility.

This package exposes submodules directly; keep __all__ empty to avoid static checks
that expect module-level symbols.
"""

__all__: list[str] = []
