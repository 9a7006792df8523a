"""
Utility modules.
"""

from .logging import setup_logging, log_section

__all__ = ['setup_logging', 'log_section']
