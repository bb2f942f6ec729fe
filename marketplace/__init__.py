"""
Marketplace contracts, jobs and escrow service.
"""

__version__ = "0.1.0"
