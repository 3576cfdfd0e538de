# -*- coding: utf-8 -*-
"""
Package information.
"""

__title__ = "py_sdl"
__description__ = "Parse and canonically print GraphQL schema definition documents."
__version__ = "0.1.0"
__license__ = "MIT"
