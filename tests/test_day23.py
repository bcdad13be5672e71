import pytest

from advent2024.day23 import part_one, part_two

TWO_TRIANGLES = "ta-xb\nxb-xc\nxc-ta\nxd-xe\nxe-xf\nxf-xd\n"
K4 = "ta-xb\nta-xc\nta-xd\nxb-xc\nxb-xd\nxc-xd\nxd-ye\n"


def test_only_triangles_with_t_count():
    assert part_one(TWO_TRIANGLES) == 1


def test_renaming_to_t_adds_a_triangle():
    assert part_one(TWO_TRIANGLES.replace("xd", "td")) == 2


def test_no_t_computers_means_no_triangles():
    assert part_one(TWO_TRIANGLES.replace("ta", "xa")) == 0


def test_repeated_connections_do_not_change_count():
    assert part_one(TWO_TRIANGLES + TWO_TRIANGLES) == part_one(TWO_TRIANGLES)


def test_largest_clique_is_the_complete_four():
    assert part_two(K4) == "ta,xb,xc,xd"


def test_password_names_are_sorted_and_distinct():
    names = part_two(K4).split(",")
    assert names == sorted(set(names))


def test_single_connection_is_its_own_clique():
    assert part_two("zz-aa\n") == "aa,zz"


def test_malformed_line_raises():
    with pytest.raises(ValueError):
        part_one("abcd\n")


def test_empty_network_raises():
    with pytest.raises(ValueError):
        part_two("")