from app.mappers.fields import (
    FieldMap,
    domain_to_record,
    foreign_key,
    json_list,
    json_object,
    projection,
    record_to_domain,
)

TABLE = (
    FieldMap("name_c", "name", fallback="Name"),
    FieldMap("city_c", "location.city"),
    FieldMap("created_c", "created", writable=False),
)


def test_foreign_key_bare_and_reference():
    assert foreign_key(5) == 5
    assert foreign_key({"Id": 5, "Name": "Grand Plaza"}) == 5
    assert foreign_key("5") == 5


def test_foreign_key_empty():
    assert foreign_key(None) is None
    assert foreign_key({}) is None
    assert foreign_key("abc") is None


def test_json_object_malformed_degrades():
    assert json_object("{not json") == {}
    assert json_object(None) == {}
    assert json_object("[1, 2]") == {}
    assert json_object('{"adults": 2}') == {"adults": 2}
    assert json_object({"adults": 2}) == {"adults": 2}


def test_json_list_malformed_degrades():
    assert json_list("oops") == []
    assert json_list('{"a": 1}') == []
    assert json_list('["a.jpg"]') == ["a.jpg"]


def test_record_to_domain_nests_dotted_paths():
    result = record_to_domain({"Id": 3, "name_c": "Inn", "city_c": "Lima"}, TABLE)

    assert result == {"Id": 3, "name": "Inn", "location": {"city": "Lima"}, "created": None}


def test_record_to_domain_uses_fallback():
    result = record_to_domain({"Id": 3, "Name": "From Name"}, TABLE)

    assert result["name"] == "From Name"


def test_domain_to_record_skips_absent_keys():
    assert domain_to_record({"location": {"city": "Quito"}}, TABLE) == {"city_c": "Quito"}


def test_domain_to_record_sends_explicit_none():
    assert domain_to_record({"name": None}, TABLE) == {"name_c": None}


def test_domain_to_record_ignores_read_only():
    assert domain_to_record({"created": "2026-01-01"}, TABLE) == {}


def test_projection_includes_id_and_name_once():
    assert projection(TABLE) == ["Id", "Name", "name_c", "city_c", "created_c"]
