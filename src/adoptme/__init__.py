"""
AdoptMe backend: users and pets over MongoDB
"""

__version__ = "1.0.0"
