"""Compile, test and track progress through small Rust exercises, with worked solutions."""

__version__ = "0.1.0"