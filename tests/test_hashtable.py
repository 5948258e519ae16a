import pytest

from dsalab.hashtable import (
    ChainedHashTable,
    TableFullError,
    TelephoneBook,
    ascii_key,
    string_hash,
)


@pytest.mark.parametrize("key", ["apple", "banana", "orange", "", "zz"])
@pytest.mark.parametrize("size", [1, 7, 10, 100])
def test_string_hash_in_range(key, size):
    assert 0 <= string_hash(key, size) < size


def test_string_hash_fixed_values():
    assert string_hash("", 10) == 0
    assert string_hash("banana", 1) == 0


def test_string_hash_rejects_bad_size():
    with pytest.raises(ValueError):
        string_hash("apple", 0)


def test_ascii_key_ignores_order():
    assert ascii_key("abc") == ascii_key("cba")


def test_ascii_key_single_char():
    assert ascii_key("a") == ord("a")


def test_chained_table_source_example():
    table = ChainedHashTable(10)
    table.insert("apple", 5)
    table.insert("banana", 10)
    table.insert("orange", 15)
    assert table.find("apple") == 5
    assert table.find("banana") == 10
    with pytest.raises(KeyError):
        table.find("grape")
    assert table.delete("banana") is True
    with pytest.raises(KeyError):
        table.find("banana")
    assert table.find("orange") == 15


def test_chained_table_overwrites():
    table = ChainedHashTable(10)
    table.insert("apple", 5)
    table.insert("apple", 6)
    assert table.find("apple") == 6
    assert len(table) == 1


def test_chained_table_delete_missing():
    table = ChainedHashTable(10)
    assert table.delete("grape") is False


def test_chained_table_single_bucket_collisions():
    table = ChainedHashTable(1)
    words = ["apple", "banana", "orange", "grape"]
    for value, word in enumerate(words):
        table.insert(word, value)
    for value, word in enumerate(words):
        assert table.find(word) == value
    assert table.delete("banana")
    assert "banana" not in table
    assert "grape" in table


def test_chained_table_rejects_bad_size():
    with pytest.raises(ValueError):
        ChainedHashTable(0)


def test_phone_book_create_and_search():
    book = TelephoneBook()
    book.create("alice", "555-0100")
    assert book.search("alice") == "555-0100"


def test_phone_book_colliding_names_are_distinct():
    book = TelephoneBook()
    book.create("abc", "555-0101")
    book.create("cba", "555-0102")
    assert book.search("abc") == "555-0101"
    assert book.search("cba") == "555-0102"
    book.delete("abc")
    assert book.search("cba") == "555-0102"
    with pytest.raises(KeyError):
        book.search("abc")


def test_phone_book_update():
    book = TelephoneBook()
    book.create("bob", "555-0103")
    book.update("bob", "555-0104")
    assert book.search("bob") == "555-0104"


def test_phone_book_missing_name_errors():
    book = TelephoneBook()
    with pytest.raises(KeyError):
        book.search("nobody")
    with pytest.raises(KeyError):
        book.update("nobody", "555-0105")
    with pytest.raises(KeyError):
        book.delete("nobody")


def test_phone_book_full():
    book = TelephoneBook(2)
    book.create("a", "1")
    book.create("b", "2")
    with pytest.raises(TableFullError):
        book.create("c", "3")


def test_phone_book_records_lists_everything():
    book = TelephoneBook()
    entries = {("alice", "555-0100"), ("bob", "555-0103"), ("abc", "555-0101")}
    for name, phone in entries:
        book.create(name, phone)
    assert set(book.records()) == entries
    assert len(book) == len(entries)