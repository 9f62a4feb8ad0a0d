from fastapi import APIRouter, HTTPException
from typing import List
from oqlfusion.core.filter_query import FilterQueryBuilder, MalformedFilterQuery
from oqlfusion.core.gene_pairs import GenePairExtractor
from oqlfusion.schemas.structvar import (
    FilterQueryRequest,
    GenePairFilterQueriesRequest,
    SingleGeneQuery,
    StructVarFilterQuery,
    StructVarGenePair,
)
import logging

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/filter-query", response_model=StructVarFilterQuery)
async def build_filter_query(request: FilterQueryRequest):
    """Translate GENE1::GENE2 OQL into a structural variant filter query."""
    try:
        return FilterQueryBuilder().build(request.oql, request.options)
    except MalformedFilterQuery as e:
        logger.warning(f"Rejected structural variant OQL: {e}")
        raise HTTPException(400, str(e))


@router.post("/gene-pairs", response_model=List[StructVarGenePair])
async def extract_gene_pairs(query: SingleGeneQuery):
    """Extract directed fusion gene pairs from a parsed single-gene query."""
    pairs = GenePairExtractor().extract(query)
    logger.info(f"Extracted {len(pairs)} gene pairs for {query.gene}")
    return pairs


@router.post("/gene-pairs/filter-queries", response_model=List[StructVarFilterQuery])
async def gene_pair_filter_queries(request: GenePairFilterQueriesRequest):
    """Build a filter query for every fusion gene pair in a single-gene query."""
    return GenePairExtractor().to_filter_queries(request.query, request.options)
