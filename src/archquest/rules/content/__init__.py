"""
Content rules - inspect what is declared inside individual blocks.
"""

from archquest.rules.content.dto_purity import DtoPurityRule
from archquest.rules.content.fat_service import NoFatServiceRule

__all__ = [
    "DtoPurityRule",
    "NoFatServiceRule",
]
