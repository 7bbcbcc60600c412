"""Torus mesh generation, rotation, projection and depth-sorted shading."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .geometry import Point3D, calculate_normal, is_face_visible, normalize

U_STEPS = 30
V_STEPS = 30
DEFAULT_A = 2.0
DEFAULT_B = 0.5
DEFAULT_SCALE = 50.0
ROTATION_SPEED = 0.01
LIGHT_POSITION = Point3D(5.0, 5.0, 5.0)
AXIS_LENGTH = 7.0

FACE_OUTLINE = (0, 0, 0)
FACE_OUTLINE_WIDTH = 1
AXIS_COLOR = (255, 0, 0)
AXIS_WIDTH = 2


@dataclass(frozen=True)
class PolygonCommand:
    """A filled quadrilateral of the torus surface, in screen coordinates."""

    points: tuple[tuple[int, int], ...]
    fill: tuple[int, int, int]
    depth: float
    outline: tuple[int, int, int] = FACE_OUTLINE
    outline_width: int = FACE_OUTLINE_WIDTH


@dataclass(frozen=True)
class AxisCommand:
    """A labelled coordinate axis line, in screen coordinates."""

    start: tuple[int, int]
    end: tuple[int, int]
    label: str
    depth: float
    color: tuple[int, int, int] = AXIS_COLOR
    width: int = AXIS_WIDTH


@dataclass
class _Axis:
    label: str
    original_start: Point3D
    original_end: Point3D
    start: Point3D
    end: Point3D


class TorusRenderer:
    """Holds a torus mesh and turns it into a list of drawing commands."""

    def __init__(self, width: int, height: int) -> None:
        self.center = (width // 2, height // 2)
        self._a = DEFAULT_A
        self._b = DEFAULT_B
        self.angle_x = 0.0
        self.angle_y = 0.0
        self.scale = DEFAULT_SCALE
        self.is_dragging = False
        self.prev_mouse_pos = (0, 0)
        self.points: list[Point3D] = []
        self.faces: list[tuple[int, int, int, int]] = []
        self.axes: list[_Axis] = []
        self.generate()

    @property
    def a(self) -> float:
        """Distance from the torus centre to the tube centre."""
        return self._a

    @property
    def b(self) -> float:
        """Radius of the tube."""
        return self._b

    def generate(self) -> None:
        """Rebuild the vertex grid, the faces and the axes."""
        a, b = self._a, self._b
        self.points = []
        for i in range(U_STEPS + 1):
            u = 2 * math.pi * i / U_STEPS
            for j in range(V_STEPS + 1):
                v = 2 * math.pi * j / V_STEPS
                ring = a + b * math.cos(v)
                self.points.append(
                    Point3D(ring * math.cos(u), ring * math.sin(u), b * math.sin(v))
                )

        row = V_STEPS + 1
        self.faces = [
            (
                i * row + j,
                i * row + j + 1,
                (i + 1) * row + j + 1,
                (i + 1) * row + j,
            )
            for i in range(U_STEPS)
            for j in range(V_STEPS)
        ]

        origin = Point3D()
        self.axes = [
            _Axis(label, origin, end, origin, end)
            for label, end in (
                ("X", Point3D(AXIS_LENGTH, 0.0, 0.0)),
                ("Y", Point3D(0.0, AXIS_LENGTH, 0.0)),
                ("Z", Point3D(0.0, 0.0, -AXIS_LENGTH)),
            )
        ]

    def rotate_point(self, p: Point3D) -> Point3D:
        """Rotate a point about X by angle_x, then about Y by angle_y."""
        cos_x, sin_x = math.cos(self.angle_x), math.sin(self.angle_x)
        y1 = p.y * cos_x - p.z * sin_x
        z1 = p.y * sin_x + p.z * cos_x

        cos_y, sin_y = math.cos(self.angle_y), math.sin(self.angle_y)
        x1 = p.x * cos_y + z1 * sin_y
        z2 = -p.x * sin_y + z1 * cos_y
        return Point3D(x1, y1, z2)

    def rotate_axes(self) -> None:
        """Bring the axis end points up to date with the current rotation."""
        for axis in self.axes:
            axis.start = self.rotate_point(axis.original_start)
            axis.end = self.rotate_point(axis.original_end)

    def project(self, p: Point3D) -> tuple[int, int]:
        """Orthographically project a point to integer screen coordinates."""
        cx, cy = self.center
        return cx + int(p.x * self.scale), cy - int(p.y * self.scale)

    def render(self) -> list[PolygonCommand | AxisCommand]:
        """Return drawing commands ordered from farthest to nearest."""
        rotated = [self.rotate_point(p) for p in self.points]
        self.rotate_axes()

        depths = [p.z for p in rotated]
        for axis in self.axes:
            depths.extend((axis.start.z, axis.end.z))
        min_z, max_z = min(depths), max(depths)
        z_range = max_z - min_z

        items: list[tuple[float, bool, int]] = []
        for index, face in enumerate(self.faces):
            depth = sum(rotated[k].z for k in face) / len(face)
            items.append((depth, True, index))
        for index, axis in enumerate(self.axes):
            items.append(((axis.start.z + axis.end.z) / 2.0, False, index))
        items.sort(key=lambda item: item[0], reverse=True)

        light = normalize(self.rotate_point(LIGHT_POSITION))
        commands: list[PolygonCommand | AxisCommand] = []
        for depth, is_face, index in items:
            if not is_face:
                axis = self.axes[index]
                commands.append(
                    AxisCommand(
                        self.project(axis.start),
                        self.project(axis.end),
                        axis.label,
                        depth,
                    )
                )
                continue

            face = self.faces[index]
            p1, p2, p3 = (rotated[k] for k in face[:3])
            if not is_face_visible(p1, p2, p3):
                continue

            normal = normalize(calculate_normal(p1, p2, p3))
            intensity = max(0.0, normal.dot(light))
            base = int((0.4 + 0.6 * intensity) * 255)
            fog = 1.0 - ((depth - min_z) / z_range if z_range else 0.0)
            value = min(255, max(0, int(base * (0.5 + 0.5 * fog))))
            commands.append(
                PolygonCommand(
                    tuple(self.project(rotated[k]) for k in face),
                    (0, 0, value),
                    depth,
                )
            )
        return commands

    def rotate(self, dx: float, dy: float) -> None:
        """Turn the view by a mouse movement of dx, dy pixels."""
        self.angle_x += dy * ROTATION_SPEED
        self.angle_y += dx * ROTATION_SPEED
        self.rotate_axes()

    def change_parameters(self, a: float, b: float) -> None:
        """Set new torus radii and rebuild the mesh."""
        self._a = a
        self._b = b
        self.generate()

    def start_drag(self, x: int, y: int) -> None:
        """Begin a rotation drag at the given mouse position."""
        self.is_dragging = True
        self.prev_mouse_pos = (x, y)

    def end_drag(self) -> None:
        """Stop the current drag."""
        self.is_dragging = False

    def update_drag(self, x: int, y: int) -> None:
        """Rotate by the mouse movement since the last position, while dragging."""
        if self.is_dragging:
            px, py = self.prev_mouse_pos
            self.rotate(x - px, y - py)
            self.prev_mouse_pos = (x, y)