import pytest

from kvstore_lib.storage import MemoryStorageBackend, SQLiteStorageBackend, create_storage
from kvstore_lib.storage.serializer import JSONSerializer


def test_sqlite_basic_operations():
    b = SQLiteStorageBackend()
    assert b.unit_exists('ns') is False

    b.ensure_unit('ns')
    b.ensure_unit('ns')
    assert b.unit_exists('ns') is True

    assert b.upsert('ns', 'a', 'x') == 1
    assert b.upsert('ns', 'a', 'y') == 1
    assert b.lookup('ns', 'a') == 'y'
    assert list(b.list_keys('ns')) == ['a']

    assert b.remove('ns', 'a') == 1
    assert b.remove('ns', 'a') == 0
    with pytest.raises(KeyError):
        b.lookup('ns', 'a')

    b.drop_unit('ns')
    assert b.unit_exists('ns') is False
    with pytest.raises(KeyError):
        b.drop_unit('ns')
    b.close()


def test_sqlite_lookup_missing_unit_raises_key_error():
    b = SQLiteStorageBackend()
    with pytest.raises(KeyError):
        b.lookup('missing', 'a')
    with pytest.raises(KeyError):
        b.list_keys('missing')


def test_sqlite_keys_and_values_are_bound_not_interpolated():
    b = SQLiteStorageBackend()
    b.ensure_unit('ns')
    key = "x'); DROP TABLE ns; --"
    b.upsert('ns', key, "'; DELETE FROM ns; --")
    assert b.unit_exists('ns')
    assert b.lookup('ns', key) == "'; DELETE FROM ns; --"


def test_sqlite_file_database_survives_reopen(tmp_path):
    db = str(tmp_path / "kv.db")
    b = SQLiteStorageBackend(database=db)
    b.ensure_unit('ns')
    b.upsert('ns', 'a', 'kept')
    b.close()

    b2 = SQLiteStorageBackend(database=db)
    assert b2.lookup('ns', 'a') == 'kept'
    assert list(b2.list_units()) == ['ns']
    b2.close()


def test_sqlite_json_serializer_round_trips_structures():
    b = SQLiteStorageBackend(serializer=JSONSerializer())
    b.ensure_unit('ns')
    b.upsert('ns', 'doc', {'a': [1, 2, {'b': None}], 'ok': True})
    assert b.lookup('ns', 'doc') == {'a': [1, 2, {'b': None}], 'ok': True}


def test_sqlite_close_is_idempotent():
    b = SQLiteStorageBackend()
    b.close()
    b.close()


def test_memory_basic_operations():
    m = MemoryStorageBackend()

    m.ensure_unit('ns')
    assert m.unit_exists('ns') is True
    assert m.upsert('ns', 'a', {'x': 1}) == 1
    assert m.lookup('ns', 'a') == {'x': 1}
    assert list(m.list_keys('ns')) == ['a']
    assert list(m.list_units()) == ['ns']

    assert m.remove('ns', 'a') == 1
    assert m.remove('ns', 'a') == 0
    with pytest.raises(KeyError):
        m.lookup('ns', 'a')

    m.drop_unit('ns')
    assert m.unit_exists('ns') is False

    # close is a no-op
    assert m.close() is None


def test_create_storage():
    assert isinstance(create_storage('sqlite'), SQLiteStorageBackend)
    assert isinstance(create_storage('memory'), MemoryStorageBackend)
    s = create_storage('sqlite', serializer='json')
    assert isinstance(s.serializer, JSONSerializer)
    with pytest.raises(ValueError):
        create_storage('redis')
    with pytest.raises(ValueError):
        create_storage('sqlite', serializer='pickle')


def test_sqlite_lists_namespaces_that_start_like_internal_tables():
    b = SQLiteStorageBackend()
    for ns in ('sqliteX', 'SQLite9', 'sqlite1', 'plain'):
        b.ensure_unit(ns)
    assert set(b.list_units()) == {'sqliteX', 'SQLite9', 'sqlite1', 'plain'}


def test_sqlite_rejects_bool_with_raw_serializer():
    b = SQLiteStorageBackend()
    b.ensure_unit('ns')
    with pytest.raises(TypeError):
        b.upsert('ns', 'flag', True)
    # ints are still fine
    assert b.upsert('ns', 'n', 1) == 1
    assert b.lookup('ns', 'n') == 1


def test_memory_values_are_copied():
    m = MemoryStorageBackend()
    m.ensure_unit('ns')
    doc = {'items': [1, 2]}
    m.upsert('ns', 'doc', doc)
    doc['items'].append(3)
    assert m.lookup('ns', 'doc') == {'items': [1, 2]}

    loaded = m.lookup('ns', 'doc')
    loaded['items'].clear()
    assert m.lookup('ns', 'doc') == {'items': [1, 2]}
