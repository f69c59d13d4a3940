"""Presentation layer: command line interface."""

from class2greylist.presentation.cli import build_parser, main

__all__ = ["build_parser", "main"]
