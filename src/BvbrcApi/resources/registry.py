"""Core registry for BV-BRC resource collections.

Each core declares the field used by ``get_by_id`` plus two alias tables that
map human-friendly method names to stored field names. Names absent from the
alias tables are used as field names directly, so ``get_by_species`` queries
``species`` on any core.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True, slots=True)
class CoreSpec:
    """Static description of one queryable core.

    Attributes:
        name: Core name as used in the URL path.
        id_field: Field matched by ``get_by_id``.
        eq_aliases: ``get_by_<alias>`` name -> field name.
        range_aliases: ``get_by_<alias>_range`` name -> (lower field, upper field).
    """

    name: str
    id_field: str = "id"
    eq_aliases: Mapping[str, str] = field(default_factory=dict)
    range_aliases: Mapping[str, tuple[str, str]] = field(default_factory=dict)

    def eq_field(self, name: str) -> str:
        return self.eq_aliases.get(name, name)

    def range_fields(self, name: str) -> tuple[str, str]:
        return self.range_aliases.get(name, (name, name))


_PUBLIC = {"public_status": "public"}
_VERSION = {"version": "_version_"}
_TAXON_LINEAGE = {
    "taxon_lineage_id": "taxon_lineage_ids",
    "taxon_lineage_name": "taxon_lineage_names",
}
_DATES = {
    "date": ("date_inserted", "date_inserted"),
    "modified_date": ("date_modified", "date_modified"),
}
_POSITION = {"position": ("start", "end")}


def _spec(
    name: str,
    id_field: str = "id",
    *,
    eq: Mapping[str, str] | None = None,
    ranges: Mapping[str, tuple[str, str]] | None = None,
) -> CoreSpec:
    return CoreSpec(
        name=name,
        id_field=id_field,
        eq_aliases=MappingProxyType(dict(eq or {})),
        range_aliases=MappingProxyType({**_DATES, **(ranges or {})}),
    )


_CORES: tuple[CoreSpec, ...] = (
    _spec(
        "antibiotics",
        "pubchem_cid",
        eq={"pharmacological_class": "pharmacological_classes", "synonym": "synonyms"},
    ),
    _spec("bioset", "bioset_id"),
    _spec("bioset_result", eq={"other_id": "other_ids", **_VERSION}),
    _spec("enzyme_class_ref", "ec_number", eq={"go_term": "go", **_VERSION}),
    _spec(
        "epitope",
        "epitope_id",
        eq={"comment": "comments", "assay_result": "assay_results", **_TAXON_LINEAGE},
        ranges=_POSITION,
    ),
    _spec("epitope_assay", "assay_id", eq=_TAXON_LINEAGE, ranges=_POSITION),
    _spec("experiment", "exp_id"),
    _spec("gene_ontology_ref", "go_id"),
    _spec(
        "genome",
        "genome_id",
        eq={"temperature_range": "temperature_range", **_PUBLIC},
        ranges={"cds_count": ("cds", "cds"), "contig_count": ("contigs", "contigs")},
    ),
    _spec("genome_amr", eq=_PUBLIC),
    _spec(
        "genome_feature",
        "feature_id",
        eq={"uniprot_accession": "uniprotkb_accession", "go_term": "go", **_PUBLIC},
        ranges={
            "location": ("start", "end"),
            "sequence_length": ("na_length", "na_length"),
            "protein_length": ("aa_length", "aa_length"),
        },
    ),
    _spec("genome_sequence", "sequence_id", eq=_PUBLIC),
    _spec("id_ref"),
    _spec("misc_niaid_sgc", "target_id", eq={"gene_symbol": "gene_symbol_collection"}),
    _spec("pathway", eq={**_PUBLIC, **_VERSION}),
    _spec("pathway_ref"),
    _spec("ppi"),
    _spec("protein_family_ref", "family_id"),
    _spec("protein_feature", eq={"comment": "comments", "segment": "segments"}, ranges=_POSITION),
    _spec(
        "protein_structure",
        "pdb_id",
        eq={"author": "authors", "alignment": "alignments", **_TAXON_LINEAGE},
    ),
    _spec("sequence_feature", ranges=_POSITION),
    _spec("sequence_feature_vt", eq={"sfvt_genome_id": "sfvt_genome_ids", "comment": "comments"}),
    _spec("serology", eq={"taxon_lineage_id": "taxon_lineage_ids"}),
    _spec("sp_gene", eq={"antibiotic": "antibiotics", **_PUBLIC}),
    _spec("sp_gene_ref"),
    _spec("spike_lineage"),
    _spec("spike_variant", eq={"sequence_feature": "sequence_features"}),
    _spec("strain"),
    _spec("structured_assertion", eq={**_PUBLIC, **_VERSION}),
    _spec("subsystem", eq=_PUBLIC),
    _spec("subsystem_ref"),
    _spec("surveillance", eq={"taxon_lineage_id": "taxon_lineage_ids"}),
    _spec("taxonomy", "taxon_id"),
)

CORES: Mapping[str, CoreSpec] = MappingProxyType({spec.name: spec for spec in _CORES})


def get_core(name: str) -> CoreSpec:
    """Return the CoreSpec registered under ``name``.

    Raises:
        ValueError: If the core is not registered.
    """
    spec = CORES.get(name)
    if spec is None:
        raise ValueError(f"Unknown BV-BRC core: {name}")
    return spec


def supported_core_names() -> tuple[str, ...]:
    """Return all registered core names in registry order."""
    return tuple(CORES.keys())
