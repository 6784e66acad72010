import math

import pytest

from blockworld import primitives
from blockworld.vectors import dot_product, length


def _indices_valid(mesh):
    return (
        len(mesh.indices) % 3 == 0
        and all(0 <= i < len(mesh.vertices) for i in mesh.indices)
    )


def test_cube_counts():
    mesh = primitives.cube()
    assert len(mesh.vertices) == 8
    assert len(mesh.indices) == 36
    assert _indices_valid(mesh)


def test_cube_independent_counts():
    mesh = primitives.cube_independent()
    assert len(mesh.vertices) == 24
    assert len(mesh.indices) == 36
    assert _indices_valid(mesh)


def test_cube_independent_normals_point_outward():
    mesh = primitives.cube_independent()
    mesh.calculate_normals()
    for vertex in mesh.vertices:
        assert dot_product(vertex.normal, vertex.pos) > 0.0
        assert sorted(abs(c) for c in vertex.normal) == [0.0, 0.0, 1.0]


@pytest.mark.parametrize("detail", [2, 3, 5, 8])
def test_sphere_counts_match_reserved_sizes(detail):
    mesh = primitives.sphere(detail)
    assert len(mesh.vertices) == (detail * 2) * (detail - 1) + 2
    assert len(mesh.indices) == (detail * 2) * (detail - 1) * 6
    assert _indices_valid(mesh)


def test_sphere_vertices_on_unit_sphere():
    mesh = primitives.sphere(6)
    for vertex in mesh.vertices:
        assert math.isclose(length(vertex.pos), 1.0, rel_tol=1e-9)


def test_sphere_poles():
    mesh = primitives.sphere(4)
    assert mesh.vertices[0].pos.y == 1.0
    assert mesh.vertices[-1].pos.y == -1.0


@pytest.mark.parametrize("detail", [0, 1])
def test_sphere_rejects_low_detail(detail):
    with pytest.raises(ValueError):
        primitives.sphere(detail)


@pytest.mark.parametrize("sides", [3, 4, 12])
def test_cone_counts(sides):
    mesh = primitives.cone(sides)
    assert len(mesh.vertices) == sides + 1
    assert len(mesh.indices) // 3 == sides + (sides - 2)
    assert _indices_valid(mesh)


def test_cone_base_is_flat():
    mesh = primitives.cone(7)
    assert mesh.vertices[0].pos.y == 1.0
    assert all(v.pos.y == -1.0 for v in mesh.vertices[1:])


def test_cone_rejects_zero_sides():
    with pytest.raises(ValueError):
        primitives.cone(0)


@pytest.mark.parametrize("divisions", [1, 2, 5])
def test_plane_counts(divisions):
    mesh = primitives.plane(divisions)
    assert len(mesh.vertices) == (divisions + 1) ** 2
    assert len(mesh.indices) == divisions * divisions * 6
    assert _indices_valid(mesh)
    assert all(v.pos.y == 0.0 for v in mesh.vertices)


def test_plane_spans_unit_square():
    mesh = primitives.plane(4)
    xs = [v.pos.x for v in mesh.vertices]
    zs = [v.pos.z for v in mesh.vertices]
    assert max(xs) == 0.5 and min(xs) == -0.5
    assert max(zs) == 0.5 and min(zs) == -0.5


@pytest.mark.parametrize("divisions", [1, 3])
def test_plane_independent_counts(divisions):
    mesh = primitives.plane_independent(divisions)
    assert len(mesh.vertices) == divisions * divisions * 4
    assert len(mesh.indices) == divisions * divisions * 6
    assert _indices_valid(mesh)
    assert sorted(set(mesh.indices)) == list(range(len(mesh.vertices)))


@pytest.mark.parametrize("build", [primitives.plane, primitives.plane_independent])
def test_planes_reject_zero_divisions(build):
    with pytest.raises(ValueError):
        build(0)