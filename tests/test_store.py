"""Tests for the in-memory book store."""

from src.core.books.store import BookStore


def test_create_assigns_numeric_id(store):
    """Test created books get a numeric id and only the supplied fields."""
    book = store.create_book({"title": "Dune", "author": "Herbert"})
    assert book.id.isdigit()
    assert book.title == "Dune"
    assert book.author == "Herbert"
    assert book.model_fields_set == {"id", "title", "author"}


def test_create_then_get_round_trip(store):
    """Test a created book can be fetched back unchanged."""
    fields = {"title": "Emma", "author": "Austen", "published_date": "1815-12-23", "summary": "Matchmaking."}
    created = store.create_book(fields)

    fetched = store.get_book(created.id)
    assert fetched is not None
    assert fetched.model_dump(exclude={"id"}) == fields


def test_ids_follow_the_clock():
    """Test ids are the clock reading in milliseconds."""
    store = BookStore(clock=lambda: 1700000000000)
    assert store.create_book({}).id == "1700000000000"


def test_ids_stay_unique_within_one_millisecond():
    """Test books created in the same millisecond get distinct ids."""
    store = BookStore(clock=lambda: 1700000000000)
    ids = [store.create_book({}).id for _ in range(3)]
    assert ids == ["1700000000000", "1700000000001", "1700000000002"]


def test_get_missing_returns_none(store):
    """Test getting an unknown id."""
    store.create_book({"title": "Dune"})
    assert store.get_book("doesnotexist") is None


def test_list_and_get_are_idempotent(store):
    """Test reads do not change what later reads return."""
    book = store.create_book({"title": "Dune"})
    assert store.list_books() == store.list_books()
    assert store.get_book(book.id) == store.get_book(book.id)


def test_list_returns_a_copy(store):
    """Test mutating the listed books does not touch the store."""
    store.create_book({"title": "Dune"})
    store.list_books().clear()
    assert store.count() == 1


def test_update_replaces_every_field(store):
    """Test update clears fields it was not given."""
    book = store.create_book({"title": "Dune", "author": "Herbert", "summary": "Spice."})

    updated = store.update_book(book.id, {"title": "Dune Messiah"})

    assert updated.id == book.id
    assert updated.title == "Dune Messiah"
    assert updated.model_fields_set == {"id", "title"}
    assert store.get_book(book.id).author is None


def test_update_missing_returns_none(store):
    """Test updating an unknown id."""
    assert store.update_book("missing", {"title": "x"}) is None
    assert store.count() == 0


def test_update_keeps_position(store):
    """Test an updated book keeps its place in the list."""
    first = store.create_book({"title": "A"})
    second = store.create_book({"title": "B"})
    store.update_book(first.id, {"title": "A2"})
    assert [b.id for b in store.list_books()] == [first.id, second.id]


def test_delete_shifts_later_books_left(store):
    """Test deleting keeps the remaining books in order."""
    first = store.create_book({"title": "A"})
    second = store.create_book({"title": "B"})
    third = store.create_book({"title": "C"})

    assert store.delete_book(second.id) is True

    assert [b.id for b in store.list_books()] == [first.id, third.id]
    assert store.get_book(second.id) is None


def test_delete_missing_returns_false(store):
    """Test deleting an unknown id."""
    store.create_book({"title": "A"})
    assert store.delete_book("missing") is False
    assert store.count() == 1


def test_values_are_stored_verbatim(store):
    """Test field values of any type are stored as given."""
    book = store.create_book({"title": 42, "summary": ["a", "b"], "author": None})
    assert book.title == 42
    assert book.summary == ["a", "b"]
    assert "author" in book.model_fields_set

