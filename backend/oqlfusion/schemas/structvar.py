from pydantic import BaseModel, Field
from typing import Optional, List, Dict, Any
from oqlfusion.core.oql import STRUCTVAR_ANY_GENE, STRUCTVAR_NULL_GENE


class GeneQuery(BaseModel):
    """One side of a structural variant query: a gene symbol or raw OQL fragment."""
    hugo_symbol_or_oql: str = Field(..., alias="hugoSymbolOrOql")

    @property
    def is_any_gene(self) -> bool:
        return self.hugo_symbol_or_oql == STRUCTVAR_ANY_GENE

    @property
    def is_null_gene(self) -> bool:
        return self.hugo_symbol_or_oql == STRUCTVAR_NULL_GENE

    class Config:
        populate_by_name = True
        frozen = True


class StructVarFilterOptions(BaseModel):
    """
    Optional filter flags for a structural variant query.

    A field left as None is treated as not supplied: booleans resolve to True
    and the tier map resolves to an empty mapping.
    """
    include_driver: Optional[bool] = Field(default=None, alias="includeDriver")
    include_vus: Optional[bool] = Field(default=None, alias="includeVUS")
    include_unknown_oncogenicity: Optional[bool] = Field(default=None, alias="includeUnknownOncogenicity")
    tiers_boolean_map: Optional[Dict[str, bool]] = Field(default=None, alias="tiersBooleanMap")
    include_unknown_tier: Optional[bool] = Field(default=None, alias="includeUnknownTier")
    include_germline: Optional[bool] = Field(default=None, alias="includeGermline")
    include_somatic: Optional[bool] = Field(default=None, alias="includeSomatic")
    include_unknown_status: Optional[bool] = Field(default=None, alias="includeUnknownStatus")

    class Config:
        populate_by_name = True


class StructVarFilterQuery(BaseModel):
    """
    Filter query for structural variant records.

    The record is frozen; tiers_boolean_map is a copy owned by this record,
    never the mapping the caller passed in.
    """
    gene1_query: GeneQuery = Field(..., alias="gene1Query")
    gene2_query: GeneQuery = Field(..., alias="gene2Query")
    include_driver: bool = Field(default=True, alias="includeDriver")
    include_vus: bool = Field(default=True, alias="includeVUS")
    include_unknown_oncogenicity: bool = Field(default=True, alias="includeUnknownOncogenicity")
    tiers_boolean_map: Dict[str, bool] = Field(default_factory=dict, alias="tiersBooleanMap")
    include_unknown_tier: bool = Field(default=True, alias="includeUnknownTier")
    include_germline: bool = Field(default=True, alias="includeGermline")
    include_somatic: bool = Field(default=True, alias="includeSomatic")
    include_unknown_status: bool = Field(default=True, alias="includeUnknownStatus")

    class Config:
        populate_by_name = True
        frozen = True


class AlterationEntry(BaseModel):
    """Alteration produced by the OQL parser for a single gene."""
    gene: Optional[str] = None  # Fusion partner, if the alteration names one
    alteration_type: Optional[str] = None  # Entries without a type are never fusions
    modifiers: List[Any] = []

    class Config:
        extra = "allow"


class SingleGeneQuery(BaseModel):
    gene: str  # Anchor gene
    alterations: List[AlterationEntry] = []

    class Config:
        extra = "allow"


class StructVarGenePair(BaseModel):
    """Directed gene pair: gene1 is the 5' (upstream) partner, gene2 the 3' partner."""
    gene1_hugo_symbol_or_oql: str = Field(..., alias="gene1HugoSymbolOrOql")
    gene2_hugo_symbol_or_oql: str = Field(..., alias="gene2HugoSymbolOrOql")

    class Config:
        populate_by_name = True
        frozen = True


class FilterQueryRequest(BaseModel):
    oql: str = Field(..., description="Gene pair in format GENE1::GENE2 (e.g., EML4::ALK)")
    options: Optional[StructVarFilterOptions] = None


class GenePairFilterQueriesRequest(BaseModel):
    query: SingleGeneQuery
    options: Optional[StructVarFilterOptions] = None
