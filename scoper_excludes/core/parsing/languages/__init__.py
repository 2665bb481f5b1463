"""
Language configurations for declaration extraction.

Supported languages:
- php.py: PHP (.php, .inc, .phtml)
"""

from .php import PHP_CONFIG

__all__ = [
    'PHP_CONFIG',
]
