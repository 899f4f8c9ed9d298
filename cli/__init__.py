"""CLI package for Book Network"""
from .main import cli

__all__ = ['cli']
