from rdflib import Dataset

from rdfmodels import (
    PERSON,
    LocalGraphStore,
    LocalizedString,
    RdflibGraphStore,
    configure_logging,
    read_from,
)

CATALOGUE = """
@prefix foaf: <http://xmlns.com/foaf/0.1/> .
@prefix bio: <http://purl.org/vocab/bio/0.1/> .

<https://example.org/people> {
    <https://example.org/ada> a foaf:Person ;
        foaf:name "Ada Lovelace"@en ;
        bio:olb "Mathematician and writer."@en ;
        foaf:mbox <mailto:ada@example.org> .

    <https://example.org/charles> a foaf:Person ;
        foaf:name "Charles Babbage"@en .
}
"""


def load_people() -> RdflibGraphStore:
    """Parse the catalogue into an rdflib-backed store."""
    dataset = Dataset()
    dataset.parse(data=CATALOGUE, format="trig")
    return RdflibGraphStore(dataset)


def main() -> None:
    configure_logging()
    source = load_people()
    target = LocalGraphStore()

    for person in read_from(source, kind=PERSON):
        names = ", ".join(sorted(str(n) for n in person.get("names")))
        print(f"{person.id}: {names} {sorted(person.get('emails'))}")

        # Translate names into a second store, leaving the source untouched
        copy = PERSON.create(person.id)
        for name in person.get("names"):
            copy.buffer("names").add(LocalizedString(name.text, "fr"))
        copy.buffer("emails").update(person.get("emails"))
        copy.write_to(target)

    print(f"Source quads: {source.size}, target quads: {target.size}")
    for person in read_from(target, kind=PERSON):
        print(person)


if __name__ == "__main__":
    main()
