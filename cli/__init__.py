"""CLI package for Smart Shelves"""
from .main import cli

__all__ = ['cli']
