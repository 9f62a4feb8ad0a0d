from oqlfusion.schemas.structvar import (
    GeneQuery,
    StructVarFilterOptions,
    StructVarFilterQuery,
    AlterationEntry,
    SingleGeneQuery,
    StructVarGenePair,
    FilterQueryRequest,
    GenePairFilterQueriesRequest
)

__all__ = [
    "GeneQuery",
    "StructVarFilterOptions",
    "StructVarFilterQuery",
    "AlterationEntry",
    "SingleGeneQuery",
    "StructVarGenePair",
    "FilterQueryRequest",
    "GenePairFilterQueriesRequest"
]
