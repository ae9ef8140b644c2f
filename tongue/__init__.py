"""
tongue - a command line vocabulary manager storing word pairs in JSON
"""

__version__ = "0.1.0"
__description__ = "Command line vocabulary manager with a JSON collection file"

from .core.factory import create_vocabulary_manager

__all__ = ["create_vocabulary_manager"]
