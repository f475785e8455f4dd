"""A small interactive command shell with cd, pwd and exit builtins, plus string helpers."""

__version__ = "0.1.0"

__all__ = ["builtins", "charutil", "lexer", "shell", "strutil"]