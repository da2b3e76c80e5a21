"""Genealogy Filename - sub-template formatting for genealogy record filenames."""

from ._version import __version__
from .cli import main

__all__ = ['main', '__version__']
