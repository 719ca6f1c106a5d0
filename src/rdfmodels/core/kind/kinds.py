"""Built-in entity kinds."""

from rdfmodels.core.kind.codecs import (
    decode_language_tagged,
    decode_localized,
    decode_mailbox,
    decode_text,
    encode_localized,
    encode_mailbox,
    encode_text,
)
from rdfmodels.core.kind.models import AttributeSpec, EntityKind
from rdfmodels.core.vocabulary import BIO, CWRC, FOAF, PROV, RESOURCE_TYPE, SCHEMA

RESOURCE = EntityKind.define(
    "resource",
    default_types=(RESOURCE_TYPE,),
)
"""Generic kind: matches any type, has no attributes."""

PERSON = EntityKind.define(
    "person",
    types=(FOAF.Person, SCHEMA.Person, CWRC.NaturalPerson, PROV.Agent),
    attributes=(
        AttributeSpec("names", FOAF.name, decode_localized, encode_localized),
        AttributeSpec("one_line_bios", BIO.olb, decode_language_tagged, encode_localized),
        AttributeSpec("emails", FOAF.mbox, decode_mailbox, encode_mailbox),
    ),
)

PRODUCT = EntityKind.define(
    "product",
    types=(SCHEMA.Product,),
    attributes=(
        AttributeSpec("product_ids", SCHEMA.productID, decode_text, encode_text),
        AttributeSpec("names", SCHEMA.name, decode_localized, encode_localized),
        AttributeSpec("descriptions", SCHEMA.description, decode_localized, encode_localized),
    ),
)

BUILTIN_KINDS = (PERSON, PRODUCT, RESOURCE)
