"""Core domain package for minigrep.

Core holds the line matching and the search run without any file or
terminal-specific code, keeping the matching logic pure and portable.
"""
