from typedset import Collectable, CollectionInterface, TypedSet


class Ticket(Collectable):
    pass


def test_typed_set_satisfies_collection_interface():
    s = TypedSet.of(Ticket)
    assert isinstance(s, CollectionInterface)


def test_plain_set_does_not_satisfy_collection_interface():
    assert not isinstance(set(), CollectionInterface)


def test_typed_sets_combine_through_the_interface():
    tickets = [Ticket() for _ in range(3)]
    a: CollectionInterface = TypedSet.of(Ticket)
    a.add_all(tickets)
    b: CollectionInterface = TypedSet.of(Ticket)
    b.add_all(tickets[1:])

    a.remove_all(b)

    assert a.to_list() == [tickets[0]]
