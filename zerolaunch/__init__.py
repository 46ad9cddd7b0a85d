"""Launcher building blocks: settings and their persistence, pinyin conversion and file discovery."""

__version__ = "0.1.0"