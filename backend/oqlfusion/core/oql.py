"""
OQL vocabulary for structural variant (fusion) alterations.

The external OQL parser tags fusion alterations on a single-gene query with one
of two alteration types, and may name a placeholder instead of a partner gene.
"""

from enum import Enum
from typing import Optional

OQL_GENE_DELIMITER = "::"

STRUCTVAR_ANY_GENE = "*"
STRUCTVAR_NULL_GENE = "-"

STRUCTVAR_DOWNSTREAM_FUSION = "DOWNSTREAM_FUSION"
STRUCTVAR_UPSTREAM_FUSION = "UPSTREAM_FUSION"


class FusionDirection(str, Enum):
    """Position of the partner gene relative to the anchor gene."""
    DOWNSTREAM = STRUCTVAR_DOWNSTREAM_FUSION  # anchor is 5', partner is 3'
    UPSTREAM = STRUCTVAR_UPSTREAM_FUSION  # partner is 5', anchor is 3'

    @classmethod
    def from_alteration_type(cls, alteration_type: Optional[str]) -> Optional["FusionDirection"]:
        """Return the direction for a fusion alteration type, None for anything else."""
        try:
            return cls(alteration_type)
        except ValueError:
            return None
