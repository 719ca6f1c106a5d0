"""Well-known namespaces and the predicates entity kinds map to.

Loaded once at import and exposed read-only; nothing mutates these tables.
"""

from types import MappingProxyType

from rdflib import Namespace
from rdflib.namespace import FOAF, PROV, RDF, RDFS, SDO, XSD

BIO = Namespace("http://purl.org/vocab/bio/0.1/")
CWRC = Namespace("http://sparql.cwrc.ca/ontologies/cwrc#")
SCHEMA = SDO

PREFIXES: MappingProxyType[str, str] = MappingProxyType(
    {
        "rdf": str(RDF),
        "rdfs": str(RDFS),
        "xsd": str(XSD),
        "schema": str(SCHEMA),
        "foaf": str(FOAF),
        "bio": str(BIO),
        "prov": str(PROV),
        "cwrc": str(CWRC),
    }
)
"""Prefix -> namespace IRI for every vocabulary the built-in kinds use."""

# Turtle shorthand for rdf:type
A = RDF.type
RESOURCE_TYPE = RDFS.Resource
LANG_STRING = RDF.langString
STRING = XSD.string

__all__ = [
    "A",
    "BIO",
    "CWRC",
    "FOAF",
    "LANG_STRING",
    "PREFIXES",
    "PROV",
    "RDF",
    "RDFS",
    "RESOURCE_TYPE",
    "SCHEMA",
    "STRING",
    "XSD",
]
