from itertools import permutations

import pytest

from objdemos.cube import Cuboid, cuboids_equal, main


def test_unit_cube():
    cube = Cuboid(1, 1, 1)
    assert cube.volume() == 1
    assert cube.surface_area() == 6


@pytest.mark.parametrize("dims", [(2, 3, 4), (10, 20, 30), (5, 5, 7)])
def test_measures_do_not_depend_on_orientation(dims):
    base = Cuboid(*dims)
    for order in permutations(dims):
        turned = Cuboid(*order)
        assert turned.volume() == base.volume()
        assert turned.surface_area() == base.surface_area()


@pytest.mark.parametrize("dims", [(2, 3, 4), (10, 20, 30)])
def test_scaling_dimensions(dims):
    small = Cuboid(*dims)
    big = Cuboid(*(d * 2 for d in dims))
    assert big.volume() == small.volume() * 8
    assert big.surface_area() == small.surface_area() * 4


def test_flat_box_has_no_volume():
    assert Cuboid(3, 4, 0).volume() == 0


def test_equality_both_ways():
    c1 = Cuboid(10, 20, 30)
    c2 = Cuboid(20, 20, 30)
    c3 = Cuboid(10, 20, 30)
    assert cuboids_equal(c1, c2) is False
    assert c1.same_as(c2) is False
    assert cuboids_equal(c1, c3) is True
    assert c3.same_as(c1) is True


def test_main_reports_not_equal_twice(capsys):
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("c1面积:")
    assert lines[1].startswith("c2面积:")
    assert lines[2:] == ["c1和c2不相等!", "c1和c2不相等!"]