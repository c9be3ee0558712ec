"""
fincalc - financial formula library with an HTTP calculation API.
"""

__version__ = "0.1.0"
