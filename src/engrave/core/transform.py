"""Affine transforms of vector paths.

Transforms only touch coordinate operands; the command structure of a path
is preserved. fontTools' Transform provides the matrix algebra.
"""

from functools import reduce

from fontTools.misc.transform import Identity, Transform

from engrave.domain import CoordinateSpace, PathCommand, Point, VectorPath

# Mirror about the x axis: font/DXF frames are Y-up, SVG is Y-down.
FLIP_Y = Transform(1, 0, 0, -1, 0, 0)


def scale_translate(scale: float, tx: float = 0.0, ty: float = 0.0) -> Transform:
    """Uniform scale followed by a translation."""
    return Transform(scale, 0, 0, scale, tx, ty)


def compose(*transforms: Transform) -> Transform:
    """Compose transforms in application order.

    compose(a, b) maps a point through a first and then through b.
    """
    return reduce(lambda acc, t: t.transform(acc), transforms, Identity)


def apply_transform(
    path: VectorPath,
    transform: Transform,
    space: CoordinateSpace | None = None,
) -> VectorPath:
    """Apply an affine transform to every coordinate of a path.

    Args:
        path: Source path (not modified)
        transform: Affine transform to apply
        space: Coordinate space of the result (defaults to the source space)

    Returns:
        New transformed path
    """
    commands = tuple(
        PathCommand(
            command.kind,
            tuple(Point(*transform.transformPoint((p.x, p.y))) for p in command.points),
        )
        for command in path.commands
    )
    return VectorPath(commands=commands, space=space or path.space)


def transform_path(
    path: VectorPath,
    scale: float,
    tx: float,
    ty: float,
    space: CoordinateSpace | None = None,
) -> VectorPath:
    """Scale a path uniformly, then translate it.

    Args:
        path: Source path (not modified)
        scale: Uniform scale factor
        tx: Translation along x, applied after scaling
        ty: Translation along y, applied after scaling
        space: Coordinate space of the result (defaults to the source space)

    Returns:
        New transformed path; an empty path stays empty
    """
    return apply_transform(path, scale_translate(scale, tx, ty), space)


def flip_y(path: VectorPath) -> VectorPath:
    """Mirror a path about the x axis (Y-up <-> Y-down)."""
    return apply_transform(path, FLIP_Y)
