"""
shell_models package.

Entry point and logging setup for the shell list models. The models and
their handlers live in `core`, the payload helpers and entry records in
`shared`.
"""

__all__ = [
    "logger",
    "main",
]
