import logging
import math

import pytest
from pygame.math import Vector3

import colors
from core.attributes import CFrame
from objects import (
    Axes,
    AxesAttributes,
    Cone,
    ConeAttributes,
    Line,
    LineAttributes,
    Vector,
    VectorAttributes,
)


def _xyz(vec):
    return [vec.x, vec.y, vec.z]


def _built(obj):
    obj._construct()
    return obj


# ---------------------------------------------------------------------------
# Primitives
# ---------------------------------------------------------------------------
def test_line_descriptor_mirrors_params_after_construct(make_target):
    target = make_target("root")
    line = _built(
        Line(
            LineAttributes(length=2.5, color=colors.RED_C, cframe=CFrame.at(1, 2, 3)),
            output_target=target,
        )
    )

    native = line.native
    assert native.length == 2.5
    assert native.thickness == LineAttributes().thickness
    assert native.color == colors.RED_C
    assert _xyz(native.cframe.position) == pytest.approx([1, 2, 3])
    assert native.adornee is target


def test_native_cframe_is_not_shared_with_params():
    line = _built(Line(LineAttributes(cframe=CFrame.at(1, 0, 0))))
    line.params.cframe.position.x = 9

    assert line.native.cframe.position.x == 1


def test_tick_resyncs_descriptor_from_params():
    cone = _built(Cone(ConeAttributes(radius=0.5)))

    cone.set_param("radius", 2.0)
    cone.set_param("visible", False)
    cone.tick(0.016)

    assert cone.native.radius == 2.0
    assert cone.native.visible is False


def test_set_native_before_construct_is_noop():
    line = Line(LineAttributes(length=1.0))
    line.set_native("length", 4.0)
    assert line.native is None


def test_set_native_unknown_property_is_ignored(caplog):
    cone = _built(Cone())

    with caplog.at_level(logging.INFO):
        cone.set_native("wobble", 3)

    assert not hasattr(cone.native, "wobble")
    assert "unknown property" in caplog.text


def test_primitive_resolves_ancestor_target(make_probe, make_target):
    target = make_target("root")
    root = make_probe("root", output_target=target)
    cone = Cone()
    root.add_child("cone", cone)

    root._construct()

    assert cone.native.adornee is target


def test_destroying_primitive_releases_descriptor_only(make_probe, make_target):
    target = make_target("root")
    root = make_probe("root", output_target=target)
    line = Line()
    root.add_child("line", line)
    root._construct()
    native = line.native

    root.remove_child("line")

    assert native.destroyed is True
    assert native.adornee is None
    assert target.destroy_calls == 0


# ---------------------------------------------------------------------------
# Vector
# ---------------------------------------------------------------------------
def test_vector_builds_line_and_cone_children():
    vector = _built(Vector(VectorAttributes(cframe=CFrame.at(1, 0, 0))))

    assert vector.get_child("line") is vector.line
    assert vector.get_child("cone") is vector.cone
    assert vector.line.native.length == 0.0


def test_vector_tick_places_shaft_and_head():
    vector = _built(Vector(VectorAttributes(cframe=CFrame.at(3, 4, 0), color=colors.TEAL_C)))

    vector.tick(0.016)

    shaft = vector.line.native
    head = vector.cone.native
    assert shaft.length == pytest.approx(5.0)
    assert _xyz(shaft.cframe.position) == pytest.approx([3, 4, 0])
    assert _xyz(shaft.cframe.rotation) == pytest.approx([-math.pi, 0, 0])
    assert _xyz(head.cframe.position) == pytest.approx([3, 4, 0])
    assert _xyz(head.cframe.rotation) == pytest.approx([0, 0, 0])
    assert shaft.color == head.color == colors.TEAL_C


def test_vector_uses_origin_as_tail():
    vector = _built(
        Vector(VectorAttributes(origin=CFrame.at(1, 1, 1), cframe=CFrame.at(1, 1, 3)))
    )

    vector.tick(0.0)

    assert vector.line.native.length == pytest.approx(2.0)
    assert _xyz(vector.line.native.cframe.position) == pytest.approx([1, 1, 3])


def test_vector_true_midpoint_anchors_shaft_between_ends():
    vector = _built(
        Vector(VectorAttributes(cframe=CFrame.at(3, 4, 0), true_midpoint=True))
    )

    vector.tick(0.0)

    assert _xyz(vector.line.native.cframe.position) == pytest.approx([1.5, 2, 0])
    assert _xyz(vector.cone.native.cframe.position) == pytest.approx([3, 4, 0])


def test_vector_follows_param_changes_on_next_tick():
    vector = _built(Vector(VectorAttributes(cframe=CFrame.at(1, 0, 0))))
    vector.tick(0.0)

    vector.set_param("cframe", CFrame.at(0, 0, 6))
    vector.set_param("visible", False)
    vector.tick(0.0)

    assert vector.line.native.length == pytest.approx(6.0)
    assert vector.line.native.visible is False
    assert vector.cone.native.visible is False


def test_vector_tick_before_construct_is_noop():
    vector = Vector()
    vector.tick(0.0)
    assert vector.line is None and vector.cone is None


def test_vector_with_coincident_ends_has_zero_length():
    vector = _built(Vector(VectorAttributes(cframe=CFrame())))
    vector.tick(0.0)
    assert vector.line.native.length == 0.0


# ---------------------------------------------------------------------------
# Axes
# ---------------------------------------------------------------------------
def test_axes_builds_three_vectors_from_origin():
    axes = _built(
        Axes(
            AxesAttributes(
                sizes=(5, 4, 3),
                colors=(colors.RED_C, colors.GREEN_C, colors.BLUE_C),
                origin=(1, 2, 3),
            )
        )
    )
    axes.tick(0.016)

    expected = {
        "x_axis": ([6, 2, 3], 5.0, colors.RED_C),
        "y_axis": ([1, 6, 3], 4.0, colors.GREEN_C),
        "z_axis": ([1, 2, 6], 3.0, colors.BLUE_C),
    }
    for name, (head, length, color) in expected.items():
        vector = axes.get_child(name)
        assert _xyz(vector.cone.native.cframe.position) == pytest.approx(head)
        assert vector.line.native.length == pytest.approx(length)
        assert vector.cone.native.color == color

    assert axes.x_vector is axes.get_child("x_axis")
    assert axes.z_vector is axes.get_child("z_axis")


def test_axes_origin_defaults_to_world_origin():
    params = AxesAttributes()
    assert isinstance(params.origin, Vector3)
    assert _xyz(params.origin) == [0, 0, 0]


def test_axes_destroy_tears_down_whole_subtree():
    axes = _built(Axes())
    natives = [axes.get_child(n).line.native for n in ("x_axis", "y_axis", "z_axis")]

    assert axes.destroy() is True

    assert all(n.destroyed for n in natives)
    assert axes.x_vector.is_destroyed


def test_axes_heads_are_set_at_construct():
    axes = _built(Axes(AxesAttributes(sizes=(5, 4, 3))))

    heads = [_xyz(v.params.cframe.position) for v in (axes.x_vector, axes.y_vector, axes.z_vector)]

    assert heads == [[5, 0, 0], [0, 4, 0], [0, 0, 3]]


def test_destroyed_line_is_not_resynced_by_parent_tick(make_probe, make_target):
    target = make_target("root")
    root = make_probe("root", output_target=target)
    line = Line(LineAttributes(length=2.0))
    root.add_child("line", line)
    root._construct()

    line.destroy()
    root._tick(0.016)
    line.tick(0.016)
    line.set_native("length", 9.0)

    assert line.native.destroyed is True
    assert line.native.adornee is None
    assert line.native.length == 2.0


def test_destroyed_vector_stops_pushing_geometry():
    vector = _built(Vector(VectorAttributes(cframe=CFrame.at(3, 4, 0))))
    vector.destroy()

    vector.tick(0.016)

    assert vector.line.native.length == 0.0


def test_primitive_base_cannot_be_instantiated():
    from objects import Primitive

    with pytest.raises(TypeError):
        Primitive()
