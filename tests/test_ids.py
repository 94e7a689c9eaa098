import re

from pastebin.ids import generate_id

URL_SAFE = re.compile(r"^[A-Za-z0-9_-]+$")


def test_ids_are_url_safe_and_sized():
    record_id = generate_id()
    assert len(record_id) == 10
    assert URL_SAFE.match(record_id)
    assert len(generate_id(16)) == 16


def test_successive_ids_differ():
    ids = {generate_id() for _ in range(1000)}
    assert len(ids) == 1000
