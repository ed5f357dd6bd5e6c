"""
Arena module for running tournaments between computer players.
"""
from .arena import Arena, ELORatingSystem

__all__ = ['Arena', 'ELORatingSystem']
