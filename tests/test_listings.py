from __future__ import annotations

import json

import pytest

from adapters.listings import parse_applications, parse_controllers, parse_models, parse_units
from core.errors import MalformedOutput

STATUS = {
    "model": {"name": "dev"},
    "applications": {
        "postgresql": {
            "charm": "postgresql",
            "units": {"postgresql/0": {"leader": True}, "postgresql/1": {}},
        },
        "ubuntu-advantage": {"charm": "ubuntu-advantage", "subordinate-to": ["postgresql"]},
        "nginx": {"units": {"nginx/3": {}}},
    },
}


def test_controllers_keys_in_backend_order():
    raw = json.dumps({"controllers": {"prod": {}, "lab": {}}, "current-controller": "lab"})

    assert parse_controllers(raw) == ["prod", "lab"]


def test_controllers_null_is_empty():
    assert parse_controllers(json.dumps({"controllers": None})) == []


def test_models_names():
    raw = json.dumps({"models": [{"name": "admin/controller", "type": "iaas"}, {"name": "admin/dev"}]})

    assert parse_models(raw) == ["admin/controller", "admin/dev"]


def test_units_flattened_across_applications():
    assert parse_units(json.dumps(STATUS)) == ["postgresql/0", "postgresql/1", "nginx/3"]


def test_applications_keys():
    assert parse_applications(json.dumps(STATUS)) == ["postgresql", "ubuntu-advantage", "nginx"]


def test_empty_model_has_no_units():
    assert parse_units(json.dumps({"applications": {}})) == []


@pytest.mark.parametrize(
    "parser, raw",
    [
        (parse_controllers, "not json"),
        (parse_controllers, json.dumps({"current-controller": "x"})),
        (parse_models, json.dumps({"models": [{"uuid": "no-name"}]})),
        (parse_models, json.dumps([1, 2, 3])),
        (parse_units, json.dumps({"model": {}})),
        (parse_units, ""),
        (parse_units, "null"),
    ],
)
def test_malformed_output(parser, raw):
    with pytest.raises(MalformedOutput):
        parser(raw)
