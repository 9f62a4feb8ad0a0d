import pytest
from pydantic import ValidationError
from oqlfusion.core.filter_query import (
    FilterQueryBuilder,
    MalformedFilterQuery,
    structvar_filter_query_from_oql,
)
from oqlfusion.schemas.structvar import (
    GeneQuery,
    StructVarFilterOptions,
    StructVarGenePair,
)

BOOLEAN_FIELDS = [
    "include_driver",
    "include_vus",
    "include_unknown_oncogenicity",
    "include_unknown_tier",
    "include_germline",
    "include_somatic",
    "include_unknown_status",
]


class TestFilterQueryBuilder:
    def test_missing_delimiter(self):
        with pytest.raises(MalformedFilterQuery):
            FilterQueryBuilder().build("BRCA1")

    @pytest.mark.parametrize("oql", ["::", " :: ", ""])
    def test_empty_genes(self, oql):
        with pytest.raises(MalformedFilterQuery):
            FilterQueryBuilder().build(oql)

    def test_error_is_value_error(self):
        with pytest.raises(ValueError) as exc_info:
            FilterQueryBuilder().build("EML4-ALK")
        assert exc_info.value.oql == "EML4-ALK"

    def test_parse_genes(self):
        query = FilterQueryBuilder().build("ALK::EML4")

        assert query.gene1_query == GeneQuery(hugo_symbol_or_oql="ALK")
        assert query.gene2_query == GeneQuery(hugo_symbol_or_oql="EML4")

    def test_defaults(self):
        query = FilterQueryBuilder().build("ALK::EML4")

        for field in BOOLEAN_FIELDS:
            assert getattr(query, field) is True
        assert query.tiers_boolean_map == {}

    def test_explicit_false_overrides_defaults(self):
        options = StructVarFilterOptions(
            include_driver=False,
            include_vus=False,
            include_unknown_oncogenicity=False,
            include_unknown_tier=False,
            include_germline=False,
            include_somatic=False,
            include_unknown_status=False
        )

        query = FilterQueryBuilder().build("ALK::EML4", options)

        for field in BOOLEAN_FIELDS:
            assert getattr(query, field) is False
        assert query.tiers_boolean_map == {}

    def test_partial_override(self):
        options = StructVarFilterOptions(include_germline=False)

        query = FilterQueryBuilder().build("ALK::EML4", options)

        assert query.include_germline is False
        assert query.include_somatic is True
        assert query.include_driver is True

    def test_tiers_boolean_map(self):
        tiers = {"tier1": True, "tier2": False}
        options = StructVarFilterOptions(tiers_boolean_map=tiers)

        query = FilterQueryBuilder().build("ALK::EML4", options)

        assert query.tiers_boolean_map == tiers
        for field in BOOLEAN_FIELDS:
            assert getattr(query, field) is True

    def test_tiers_boolean_map_not_shared(self):
        tiers = {"tier1": True}
        options = StructVarFilterOptions(tiers_boolean_map=tiers)

        query = FilterQueryBuilder().build("ALK::EML4", options)
        tiers["tier2"] = False

        assert query.tiers_boolean_map == {"tier1": True}
        assert query.tiers_boolean_map is not options.tiers_boolean_map

    def test_frozen(self):
        query = FilterQueryBuilder().build("ALK::EML4")

        with pytest.raises(ValidationError):
            query.include_driver = False

    def test_options_by_alias(self):
        options = StructVarFilterOptions.model_validate({"includeVUS": False})

        query = FilterQueryBuilder().build("ALK::EML4", options)

        assert query.include_vus is False

    def test_one_empty_side(self):
        query = FilterQueryBuilder().build("ALK::")

        assert query.gene1_query.hugo_symbol_or_oql == "ALK"
        assert query.gene2_query.hugo_symbol_or_oql == ""

    def test_whitespace_trimmed(self):
        query = FilterQueryBuilder().build(" EML4 :: ALK ")

        assert query.gene1_query.hugo_symbol_or_oql == "EML4"
        assert query.gene2_query.hugo_symbol_or_oql == "ALK"

    def test_split_on_first_delimiter(self):
        query = FilterQueryBuilder().build("A::B::C")

        assert query.gene1_query.hugo_symbol_or_oql == "A"
        assert query.gene2_query.hugo_symbol_or_oql == "B::C"

    def test_placeholders_pass_through(self):
        query = FilterQueryBuilder().build("ALK::*")

        assert query.gene2_query.hugo_symbol_or_oql == "*"
        assert query.gene2_query.is_any_gene
        assert not query.gene2_query.is_null_gene
        assert not query.gene1_query.is_any_gene

    def test_camel_case_serialization(self):
        query = FilterQueryBuilder().build("ALK::EML4")
        data = query.model_dump(by_alias=True)

        assert data["gene1Query"] == {"hugoSymbolOrOql": "ALK"}
        assert data["includeVUS"] is True
        assert data["tiersBooleanMap"] == {}

    def test_module_function(self):
        query = structvar_filter_query_from_oql("BCR::ABL1")
        assert query.gene1_query.hugo_symbol_or_oql == "BCR"


class TestFilterQueryHelpers:
    def test_to_oql(self):
        builder = FilterQueryBuilder()
        query = builder.build("BCR::ABL1")

        assert builder.to_oql(query) == "BCR::ABL1"

    def test_from_gene_pair(self):
        pair = StructVarGenePair(
            gene1_hugo_symbol_or_oql="EML4",
            gene2_hugo_symbol_or_oql="-"
        )

        query = FilterQueryBuilder().from_gene_pair(
            pair, StructVarFilterOptions(include_vus=False)
        )

        assert query.gene1_query.hugo_symbol_or_oql == "EML4"
        assert query.gene2_query.is_null_gene
        assert query.include_vus is False
        assert query.include_driver is True
