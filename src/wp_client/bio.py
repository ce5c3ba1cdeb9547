"""wp_client.bio

Organism names and database systems used when talking to WikiPathways.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

__all__ = ["Organism", "DataSource", "Xref"]


class Organism(Enum):
    """Species hosted on WikiPathways, as (latin name, short code)."""

    ANOPHELES_GAMBIAE = ("Anopheles gambiae", "Ag")
    ARABIDOPSIS_THALIANA = ("Arabidopsis thaliana", "At")
    BOS_TAURUS = ("Bos taurus", "Bt")
    CAENORHABDITIS_ELEGANS = ("Caenorhabditis elegans", "Ce")
    CANIS_FAMILIARIS = ("Canis familiaris", "Cf")
    DANIO_RERIO = ("Danio rerio", "Dr")
    DROSOPHILA_MELANOGASTER = ("Drosophila melanogaster", "Dm")
    ESCHERICHIA_COLI = ("Escherichia coli", "Ec")
    GALLUS_GALLUS = ("Gallus gallus", "Gg")
    HOMO_SAPIENS = ("Homo sapiens", "Hs")
    MUS_MUSCULUS = ("Mus musculus", "Mm")
    ORYZA_SATIVA = ("Oryza sativa", "Oj")
    PAN_TROGLODYTES = ("Pan troglodytes", "Pt")
    RATTUS_NORVEGICUS = ("Rattus norvegicus", "Rn")
    SACCHAROMYCES_CEREVISIAE = ("Saccharomyces cerevisiae", "Sc")
    SUS_SCROFA = ("Sus scrofa", "Ss")
    XENOPUS_TROPICALIS = ("Xenopus tropicalis", "Xt")

    @property
    def latin_name(self) -> str:
        return self.value[0]

    @property
    def code(self) -> str:
        return self.value[1]

    @classmethod
    def from_latin_name(cls, name: str) -> "Organism":
        key = " ".join(name.split()).lower()
        for org in cls:
            if org.latin_name.lower() == key:
                return org
        raise ValueError(f"unknown organism: {name!r}")

    @classmethod
    def from_code(cls, code: str) -> "Organism":
        for org in cls:
            if org.code == code:
                return org
        raise ValueError(f"unknown organism code: {code!r}")


_BY_CODE: Dict[str, "DataSource"] = {}
_BY_NAME: Dict[str, "DataSource"] = {}


@dataclass(frozen=True)
class DataSource:
    """A database system, e.g. Entrez Gene (system code ``L``).

    Registered sources can be looked up by code or by the full name GPML
    stores in its ``Xref/@Database`` attribute.
    """

    full_name: str
    system_code: Optional[str] = None

    @classmethod
    def register(cls, full_name: str, system_code: str) -> "DataSource":
        ds = cls(full_name, system_code)
        _BY_CODE[system_code] = ds
        _BY_NAME[full_name.lower()] = ds
        return ds

    @classmethod
    def get_by_code(cls, system_code: str) -> "DataSource":
        try:
            return _BY_CODE[system_code]
        except KeyError:
            raise ValueError(f"unknown system code: {system_code!r}") from None

    @classmethod
    def get_by_full_name(cls, full_name: str) -> "DataSource":
        """Registered source with that name, or an unregistered one without a code."""
        return _BY_NAME.get(full_name.lower(), cls(full_name))

    def __str__(self) -> str:
        return self.full_name


for _name, _code in [
    ("Affy", "X"),
    ("CAS", "Ca"),
    ("ChEBI", "Ce"),
    ("ChemSpider", "Cs"),
    ("EC Number", "E"),
    ("Ensembl", "En"),
    ("Entrez Gene", "L"),
    ("FlyBase", "F"),
    ("HGNC", "H"),
    ("HMDB", "Ch"),
    ("KEGG Compound", "Ck"),
    ("KEGG Genes", "Kg"),
    ("MGI", "M"),
    ("miRBase", "Mb"),
    ("PubChem-compound", "Cpc"),
    ("Reactome", "Re"),
    ("RefSeq", "Q"),
    ("RGD", "R"),
    ("Rhea", "Rh"),
    ("SGD", "D"),
    ("TAIR", "A"),
    ("Uniprot-TrEMBL", "S"),
    ("Wikidata", "Wd"),
    ("WormBase", "W"),
    ("ZFIN", "Z"),
]:
    DataSource.register(_name, _code)


@dataclass(frozen=True)
class Xref:
    """An identifier paired with the database it belongs to."""

    id: str
    data_source: Optional[DataSource] = None

    @property
    def system_code(self) -> Optional[str]:
        return self.data_source.system_code if self.data_source else None

    @classmethod
    def parse(cls, token: str) -> "Xref":
        """Parse ``ID`` or ``ID:CODE`` (e.g. ``1234:L``).

        A suffix that is not a registered system code stays part of the id,
        so ``CHEBI:15377`` parses as a bare identifier.
        """
        xid, sep, code = token.rpartition(":")
        if sep and xid and code in _BY_CODE:
            return cls(xid, _BY_CODE[code])
        return cls(token)
