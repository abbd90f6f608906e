from cidrexpand.ranges.membership import check_all, contains, split_check_tokens
from cidrexpand.ranges.models import Membership


def test_whole_block_belongs_including_broadcast():
    membership = contains("10.10.10.3/30", "10.10.10.0", "10.10.10.1", "10.10.10.2", "10.10.10.3")
    assert len(membership) == 4
    for member in membership:
        assert member.belongs, f"{member.ip} should belong to {member.cidr}"


def test_outsiders_do_not_belong():
    membership = contains("10.10.10.3/30", "10.10.10.4", "10.10.9.255")
    assert membership == [
        Membership(cidr="10.10.10.3/30", ip="10.10.10.4", belongs=False),
        Membership(cidr="10.10.10.3/30", ip="10.10.9.255", belongs=False),
    ]


def test_match_is_by_exact_string():
    membership = contains("10.10.10.0/30", "10.10.10.01", " 10.10.10.1")
    assert [m.belongs for m in membership] == [False, False]


def test_malformed_range_contains_nothing():
    assert [m.belongs for m in contains("10.10.10.0/", "10.10.10.0")] == [False]


def test_check_all_groups_by_range():
    results = check_all(["192.168.10.1/30", "220.10.5.15/28"], ["192.168.10.3", "220.10.5.18"])
    assert [cidr for cidr, _ in results] == ["192.168.10.1/30", "220.10.5.15/28"]
    assert [m.belongs for m in results[0][1]] == [True, False]
    assert [m.belongs for m in results[1][1]] == [False, False]


def test_split_on_first_separator():
    assert split_check_tokens(["a/30", "b/28", "contains", "1.1.1.1", "c", "2.2.2.2"]) == (
        ["a/30", "b/28"],
        ["1.1.1.1", "c", "2.2.2.2"],
    )
    assert split_check_tokens(["a/30", ",", "1.1.1.1"]) == (["a/30"], ["1.1.1.1"])
    assert split_check_tokens(["a/30", "c", "1.1.1.1"]) == (["a/30"], ["1.1.1.1"])
