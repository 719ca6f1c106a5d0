"""End-to-end journeys: discover, read, buffer, write, rediscover."""

import pytest
from rdflib import Dataset, Literal, Namespace, URIRef

from rdfmodels import (
    PERSON,
    PRODUCT,
    Entity,
    LocalGraphStore,
    LocalizedString,
    Quad,
    RdflibGraphStore,
    read_from,
    read_from_async,
    read_one_async,
    write_to,
    write_to_async,
)
from rdfmodels.core.vocabulary import A, FOAF, SCHEMA

EX = Namespace("https://ex/")


@pytest.fixture(params=["local", "rdflib"])
def empty_store(request):
    if request.param == "local":
        return LocalGraphStore()
    return RdflibGraphStore(Dataset())


def test_scenario(alice_store):
    """Persons in the Alice dataset: one entity with her name and mailbox."""
    people = read_from(alice_store, kind=PERSON)

    assert len(people) == 1
    (alice,) = people
    assert str(alice.id) == "https://ex/alice"
    assert alice.get("names") == {LocalizedString("Alice", "en")}
    assert alice.get("emails") == {"alice@example.org"}
    assert alice.get("one_line_bios") == set()


def test_round_trip(empty_store):
    alice = PERSON.create("https://ex/alice")
    alice.buffer("names").add(LocalizedString("Alice", "en"))
    alice.buffer("emails").add("alice@example.org")

    assert alice.write_to(empty_store) is True

    (found,) = read_from(empty_store, kind=PERSON)
    (name,) = found.get("names")
    assert name.text == "Alice"
    assert name.base_language == "en"
    assert found.get("emails") == {"alice@example.org"}
    assert found.datasets == (empty_store,)


def test_round_trip_through_named_graph(empty_store):
    widget = PRODUCT.create("https://ex/widget")
    widget.buffer("product_ids").add("W-1")
    widget.buffer("descriptions").add(LocalizedString("A widget", "en-GB"))

    assert write_to(widget, empty_store, EX.catalog) is True

    (found,) = read_from(empty_store)
    assert found.kind is PRODUCT
    assert found.get("product_ids") == {"W-1"}
    assert found.get("descriptions") == {LocalizedString("A widget", "en-gb")}


def test_copy_between_stores(alice_store, empty_store):
    """Read live values from one store, buffer them, write them to another."""
    (alice,) = read_from(alice_store, kind=PERSON)
    copy = Entity(alice.id, kind=PERSON, types=alice.types)
    for name, values in alice.iter_attributes():
        copy.buffer(name).update(values)

    assert write_to(copy, empty_store) is True

    (found,) = read_from(empty_store, kind=PERSON)
    assert found == alice
    assert dict(found.iter_attributes()) == dict(alice.iter_attributes())


def test_rdflib_dataset_parsed_from_trig():
    dataset = Dataset()
    dataset.parse(
        data="""
        @prefix foaf: <http://xmlns.com/foaf/0.1/> .
        @prefix schema: <https://schema.org/> .

        <https://ex/people> {
            <https://ex/alice> a foaf:Person ;
                foaf:name "Alice"@en, "Alicia"@es ;
                foaf:mbox <mailto:alice@example.org> .
        }

        <https://ex/bob> a schema:Person ;
            foaf:name "Bob" .
        """,
        format="trig",
    )
    store = RdflibGraphStore(dataset)

    people = {str(p.id): p for p in read_from(store, kind=PERSON)}

    assert set(people) == {"https://ex/alice", "https://ex/bob"}
    assert people["https://ex/alice"].get("names") == {
        LocalizedString("Alice", "en"),
        LocalizedString("Alicia", "es"),
    }
    assert people["https://ex/bob"].get("names") == {LocalizedString("Bob")}


def test_same_subject_across_store_implementations():
    local = LocalGraphStore(
        [
            Quad(EX.alice, A, FOAF.Person),
            Quad(EX.alice, FOAF.name, Literal("Alice", lang="en")),
        ]
    )
    remote = RdflibGraphStore()
    remote.add(Quad(EX.alice, A, SCHEMA.Person))
    remote.add(Quad(EX.alice, FOAF.mbox, URIRef("mailto:alice@example.org")))

    (alice,) = read_from([local, remote], kind=PERSON)

    assert alice.datasets == (local, remote)
    assert alice.types == frozenset({FOAF.Person, SCHEMA.Person})
    assert alice.get("names") == {LocalizedString("Alice", "en")}
    assert alice.get("emails") == {"alice@example.org"}


@pytest.mark.asyncio
async def test_async_round_trip(empty_store):
    alice = PERSON.create("https://ex/alice")
    alice.buffer("names").add(LocalizedString("Alice", "en"))

    assert await write_to_async(alice, empty_store) is True

    people = await read_from_async(empty_store, kind=PERSON)
    first = await read_one_async(empty_store, kind=PERSON)

    assert people == [alice]
    assert first == alice
    assert first.get("names") == {LocalizedString("Alice", "en")}


@pytest.mark.asyncio
async def test_async_read_one_on_empty_store(empty_store):
    assert await read_one_async(empty_store) is None
