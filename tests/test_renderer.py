import math

import pytest

from torusview.geometry import Point3D
from torusview.renderer import (
    AXIS_COLOR,
    DEFAULT_A,
    DEFAULT_B,
    DEFAULT_SCALE,
    U_STEPS,
    V_STEPS,
    AxisCommand,
    PolygonCommand,
    TorusRenderer,
)


@pytest.fixture
def renderer():
    return TorusRenderer(800, 800)


def test_initial_state(renderer):
    assert renderer.center == (400, 400)
    assert (renderer.a, renderer.b) == (DEFAULT_A, DEFAULT_B)
    assert renderer.scale == DEFAULT_SCALE
    assert renderer.is_dragging is False


def test_mesh_sizes(renderer):
    assert len(renderer.points) == (U_STEPS + 1) * (V_STEPS + 1)
    assert len(renderer.faces) == U_STEPS * V_STEPS
    assert all(0 <= k < len(renderer.points) for f in renderer.faces for k in f)


def test_points_lie_on_torus(renderer):
    first = renderer.points[0]
    assert (first.x, first.y, first.z) == pytest.approx((2.5, 0.0, 0.0))
    for p in renderer.points:
        radial = math.hypot(p.x, p.y) - DEFAULT_A
        assert radial**2 + p.z**2 == pytest.approx(DEFAULT_B**2, abs=1e-9)


def test_change_parameters_regenerates(renderer):
    renderer.change_parameters(3.5, 1.2)
    assert (renderer.a, renderer.b) == (3.5, 1.2)
    first = renderer.points[0]
    assert (first.x, first.y, first.z) == pytest.approx((4.7, 0.0, 0.0))
    for p in renderer.points:
        radial = math.hypot(p.x, p.y) - 3.5
        assert radial**2 + p.z**2 == pytest.approx(1.2**2, abs=1e-9)


def test_rotate_point_identity_at_zero_angles(renderer):
    p = Point3D(1.5, -2.0, 0.25)
    assert renderer.rotate_point(p) == p


def test_rotation_preserves_length(renderer):
    renderer.rotate(37, -81)
    p = Point3D(1.5, -2.0, 0.25)
    assert renderer.rotate_point(p).length() == pytest.approx(p.length())


def test_project_origin_is_center(renderer):
    assert renderer.project(Point3D()) == renderer.center


def test_project_truncates_and_flips_y(renderer):
    renderer.scale = 10.0
    assert renderer.project(Point3D(1.25, 1.25, 0)) == (412, 388)


def test_rotate_updates_angles_and_axes(renderer):
    renderer.rotate(100, 50)
    assert renderer.angle_y == pytest.approx(1.0)
    assert renderer.angle_x == pytest.approx(0.5)
    for axis in renderer.axes:
        assert axis.end == renderer.rotate_point(axis.original_end)


def test_drag_rotates_only_while_dragging(renderer):
    renderer.update_drag(50, 50)
    assert (renderer.angle_x, renderer.angle_y) == (0.0, 0.0)
    renderer.start_drag(10, 10)
    assert renderer.is_dragging is True
    renderer.update_drag(20, 30)
    assert renderer.angle_y == pytest.approx(0.1)
    assert renderer.angle_x == pytest.approx(0.2)
    assert renderer.prev_mouse_pos == (20, 30)
    renderer.end_drag()
    renderer.update_drag(200, 300)
    assert renderer.angle_y == pytest.approx(0.1)
    assert renderer.is_dragging is False


def test_render_axes(renderer):
    commands = renderer.render()
    axes = [c for c in commands if isinstance(c, AxisCommand)]
    assert sorted(c.label for c in axes) == ["X", "Y", "Z"]
    x_axis = next(c for c in axes if c.label == "X")
    assert x_axis.start == renderer.center
    assert x_axis.end == renderer.project(Point3D(7, 0, 0))
    assert x_axis.color == AXIS_COLOR


def test_render_faces(renderer):
    renderer.rotate(40, 60)
    commands = renderer.render()
    faces = [c for c in commands if isinstance(c, PolygonCommand)]
    assert 0 < len(faces) < len(renderer.faces)
    for face in faces:
        assert len(face.points) == 4
        red, green, blue = face.fill
        assert (red, green) == (0, 0)
        assert 0 <= blue <= 255


def test_render_order_is_far_to_near(renderer):
    renderer.rotate(-70, 25)
    depths = [c.depth for c in renderer.render()]
    assert all(a >= b for a, b in zip(depths, depths[1:]))