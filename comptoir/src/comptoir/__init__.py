"""
Comptoir - staking, lending, governance and trading ledger API.
"""

__version__ = "0.1.0"
