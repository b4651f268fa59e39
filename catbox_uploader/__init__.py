#!/usr/bin/env python3
"""
Catbox Uploader package.
"""

__version__ = "1.0.0"
