import logging
from typing import Optional
from oqlfusion.core.oql import OQL_GENE_DELIMITER
from oqlfusion.schemas.structvar import (
    GeneQuery,
    StructVarFilterOptions,
    StructVarFilterQuery,
    StructVarGenePair,
)

logger = logging.getLogger(__name__)


class MalformedFilterQuery(ValueError):
    """Raised when OQL text cannot be read as a GENE1::GENE2 pair."""

    def __init__(self, oql: str, reason: str):
        self.oql = oql
        super().__init__(f"Cannot parse structural variant OQL '{oql}': {reason}")


class FilterQueryBuilder:
    """Builds structural variant filter queries from GENE1::GENE2 OQL."""

    def build(
        self,
        oql: str,
        options: Optional[StructVarFilterOptions] = None
    ) -> StructVarFilterQuery:
        """
        Parse a gene pair and apply the filter options.

        Only the first delimiter splits the text; anything after it belongs to
        gene 2. One side may be empty (e.g. "ALK::"), both may not.
        """
        gene1, delimiter, gene2 = oql.partition(OQL_GENE_DELIMITER)
        if not delimiter:
            raise MalformedFilterQuery(oql, f"missing '{OQL_GENE_DELIMITER}' delimiter")

        gene1 = gene1.strip()
        gene2 = gene2.strip()
        if not gene1 and not gene2:
            raise MalformedFilterQuery(oql, "both genes are empty")

        query = self._create_query(gene1, gene2, options)
        logger.debug(f"Built structural variant filter query for {gene1}{OQL_GENE_DELIMITER}{gene2}")
        return query

    def from_gene_pair(
        self,
        pair: StructVarGenePair,
        options: Optional[StructVarFilterOptions] = None
    ) -> StructVarFilterQuery:
        """Build a filter query for an already directed gene pair."""
        return self._create_query(
            pair.gene1_hugo_symbol_or_oql,
            pair.gene2_hugo_symbol_or_oql,
            options
        )

    @staticmethod
    def to_oql(query: StructVarFilterQuery) -> str:
        """Render a filter query back to GENE1::GENE2 text."""
        return (
            f"{query.gene1_query.hugo_symbol_or_oql}"
            f"{OQL_GENE_DELIMITER}"
            f"{query.gene2_query.hugo_symbol_or_oql}"
        )

    @staticmethod
    def _create_query(
        gene1: str,
        gene2: str,
        options: Optional[StructVarFilterOptions]
    ) -> StructVarFilterQuery:
        options = options or StructVarFilterOptions()

        # Unset flags default to True, independently per field
        def flag(value: Optional[bool]) -> bool:
            return True if value is None else value

        tiers = options.tiers_boolean_map
        return StructVarFilterQuery(
            gene1_query=GeneQuery(hugo_symbol_or_oql=gene1),
            gene2_query=GeneQuery(hugo_symbol_or_oql=gene2),
            include_driver=flag(options.include_driver),
            include_vus=flag(options.include_vus),
            include_unknown_oncogenicity=flag(options.include_unknown_oncogenicity),
            tiers_boolean_map=dict(tiers) if tiers is not None else {},
            include_unknown_tier=flag(options.include_unknown_tier),
            include_germline=flag(options.include_germline),
            include_somatic=flag(options.include_somatic),
            include_unknown_status=flag(options.include_unknown_status),
        )


def structvar_filter_query_from_oql(
    oql: str,
    options: Optional[StructVarFilterOptions] = None
) -> StructVarFilterQuery:
    return FilterQueryBuilder().build(oql, options)
