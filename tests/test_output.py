import json

from cidrexpand.ranges.models import Membership
from cidrexpand.ranges.output import (
    format_checks,
    format_checks_json,
    format_expansions,
    format_expansions_json,
)


def test_plain_expansion():
    text = format_expansions([("1.1.1.0/31", ["1.1.1.0", "1.1.1.1"]), ("bad/", [])])
    assert text == "1.1.1.0/31: 1.1.1.0 1.1.1.1\n\nbad/: \n\n"


def test_json_expansion():
    text = format_expansions_json([("1.1.1.0/31", ["1.1.1.0", "1.1.1.1"]), ("2.2.2.2", ["2.2.2.2"])])
    assert text == '{\n"1.1.1.0/31": ["1.1.1.0", "1.1.1.1"],\n\n"2.2.2.2": ["2.2.2.2"]\n}'
    assert json.loads(text) == {"1.1.1.0/31": ["1.1.1.0", "1.1.1.1"], "2.2.2.2": ["2.2.2.2"]}


def test_json_expansion_escapes_input():
    assert json.loads(format_expansions_json([('we"ird', [])])) == {'we"ird': []}


def _checks():
    return [
        ("10.0.0.0/31", [Membership("10.0.0.0/31", "10.0.0.1", True), Membership("10.0.0.0/31", "10.0.0.2", False)]),
        ("10.0.0.2/32", [Membership("10.0.0.2/32", "10.0.0.1", False), Membership("10.0.0.2/32", "10.0.0.2", True)]),
    ]


def test_plain_checks():
    assert format_checks(_checks()) == (
        "10.0.0.0/31: 10.0.0.1,true 10.0.0.2,false\n10.0.0.2/32: 10.0.0.1,false 10.0.0.2,true"
    )


def test_json_checks():
    text = format_checks_json(_checks())
    assert text.startswith('{\n"10.0.0.0/31": [{"ip":"10.0.0.1","belongs":true},')
    assert json.loads(text) == {
        "10.0.0.0/31": [{"ip": "10.0.0.1", "belongs": True}, {"ip": "10.0.0.2", "belongs": False}],
        "10.0.0.2/32": [{"ip": "10.0.0.1", "belongs": False}, {"ip": "10.0.0.2", "belongs": True}],
    }
