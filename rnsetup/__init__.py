"""
rn-setup — React Native development environment installer.
"""

__version__ = "0.1.0"
