from datetime import datetime

import pytest
from bson import ObjectId

from mflix_api.core.errors import InvalidArgumentError
from mflix_api.utils.helpers import parse_object_id, to_jsonable


def test_parse_object_id_accepts_24_hex():
    oid = ObjectId()
    assert parse_object_id(str(oid), "movie") == oid
    assert parse_object_id("573a1390f29313caabcd4135", "movie") == ObjectId("573a1390f29313caabcd4135")

@pytest.mark.parametrize("value", ["", "573a1390f29313caabcd413", "573a1390f29313caabcd41355", "573a1390f29313caabcd413g", "twelve chars"])
def test_parse_object_id_rejects(value):
    with pytest.raises(InvalidArgumentError) as excinfo:
        parse_object_id(value, "theater")
    assert excinfo.value.message == "Invalid theater ID"
    assert excinfo.value.status_code == 400

def test_to_jsonable_nested_bson():
    oid = ObjectId("573a1390f29313caabcd4135")
    doc = {"_id": oid, "movie_id": oid, "date": datetime(2012, 3, 26, 23, 20, 16), "tags": [oid]}

    assert to_jsonable(doc) == {
        "_id": "573a1390f29313caabcd4135",
        "movie_id": "573a1390f29313caabcd4135",
        "date": "2012-03-26T23:20:16",
        "tags": ["573a1390f29313caabcd4135"],
    }
