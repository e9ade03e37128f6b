"""Fuzzy matching of text against patterns with skim and clangd-style scoring."""

__version__ = "0.3.7"
__all__ = ["base", "util", "skim_roles", "clangd", "skim_v1", "skim", "cli"]