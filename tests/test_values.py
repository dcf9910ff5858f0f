from __future__ import annotations

import pytest
from pydantic import ValidationError

from prefs_json.persistence.errors import UnsupportedValueError
from prefs_json.persistence.values import PrefsDocument, StoredValue


def test_from_json_infers_kind():
    assert StoredValue.from_json(0.8) == StoredValue(kind="float", value=0.8)
    assert StoredValue.from_json(3) == StoredValue(kind="int", value=3)
    assert StoredValue.from_json("hi") == StoredValue(kind="string", value="hi")


@pytest.mark.parametrize("raw", [True, None, [1], {"a": 1}])
def test_from_json_rejects_non_scalars(raw):
    with pytest.raises(UnsupportedValueError):
        StoredValue.from_json(raw)


def test_factories_coerce_to_kind():
    assert StoredValue.of_float(2).value == 2.0
    assert isinstance(StoredValue.of_float(2).value, float)
    assert StoredValue.of_int(7).kind == "int"


def test_kind_mismatch_is_rejected():
    with pytest.raises(ValidationError):
        StoredValue(kind="int", value="seven")
    with pytest.raises(ValidationError):
        StoredValue(kind="float", value=1)


def test_document_disk_roundtrip_keeps_kinds():
    doc = PrefsDocument.from_disk_doc({"volume": 0.8, "lives": 3, "name": "ana", "ratio": 1.0})
    assert doc.entries["ratio"].kind == "float"
    assert doc.entries["lives"].kind == "int"
    assert doc.to_disk_doc() == {"volume": 0.8, "lives": 3, "name": "ana", "ratio": 1.0}


def test_document_names_the_bad_key():
    with pytest.raises(UnsupportedValueError, match="nested"):
        PrefsDocument.from_disk_doc({"ok": 1, "nested": {"a": 1}})


@pytest.mark.parametrize(
    "factory, value",
    [
        (StoredValue.of_int, 1.5),
        (StoredValue.of_int, True),
        (StoredValue.of_string, 3),
        (StoredValue.of_float, "0.5"),
        (StoredValue.of_float, False),
    ],
)
def test_factories_do_not_convert_other_types(factory, value):
    with pytest.raises(UnsupportedValueError):
        factory(value)
