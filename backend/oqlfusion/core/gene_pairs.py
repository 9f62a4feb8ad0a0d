import logging
from typing import List, Optional
from oqlfusion.core.oql import FusionDirection
from oqlfusion.core.filter_query import FilterQueryBuilder
from oqlfusion.schemas.structvar import (
    SingleGeneQuery,
    StructVarFilterOptions,
    StructVarFilterQuery,
    StructVarGenePair,
)

logger = logging.getLogger(__name__)


class GenePairExtractor:
    """Extracts directed fusion gene pairs from a parsed single-gene OQL query."""

    def extract(self, query: SingleGeneQuery) -> List[StructVarGenePair]:
        """
        Emit one pair per fusion alteration that names a partner gene.

        Non-fusion alterations and fusions without a partner are skipped, so a
        query mixing mutation and fusion alterations is fine. Placeholder
        partners ("*", "-") are kept as-is. Output follows alteration order.
        """
        pairs = []

        for alteration in query.alterations:
            direction = FusionDirection.from_alteration_type(alteration.alteration_type)
            if direction is None:
                continue

            if alteration.gene is None:
                logger.debug(f"Skipping {direction.value} on {query.gene}: no partner gene")
                continue

            pairs.append(self._orient(query.gene, alteration.gene, direction))

        return pairs

    def to_filter_queries(
        self,
        query: SingleGeneQuery,
        options: Optional[StructVarFilterOptions] = None
    ) -> List[StructVarFilterQuery]:
        """Build one filter query per extracted gene pair."""
        builder = FilterQueryBuilder()
        return [builder.from_gene_pair(pair, options) for pair in self.extract(query)]

    @staticmethod
    def _orient(anchor: str, partner: str, direction: FusionDirection) -> StructVarGenePair:
        if direction is FusionDirection.DOWNSTREAM:
            upstream_gene, downstream_gene = anchor, partner
        else:
            upstream_gene, downstream_gene = partner, anchor

        return StructVarGenePair(
            gene1_hugo_symbol_or_oql=upstream_gene,
            gene2_hugo_symbol_or_oql=downstream_gene
        )


def oql_query_to_struct_var_gene_pairs(query: SingleGeneQuery) -> List[StructVarGenePair]:
    return GenePairExtractor().extract(query)
