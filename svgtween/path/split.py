"""
Splitting of line and Bezier segments into shape preserving pieces
"""
import math

from svgtween.path.geometry import Point
from svgtween.path.pathseg import SVGPathSegLineto, SVGPathSegCurvetoQuadratic, SVGPathSegCurvetoCubic


# de Casteljau's algorithm for drawing and splitting bezier curves
# points is [start, control1, control2, ..., end], t is where to split in [0, 1]
# returns the control points of the 0..t part and of the t..1 part
def decasteljau(points, t):
    left = []
    right = []

    def decasteljau_recurse(points):
        if len(points) == 1:
            left.append(points[0])
            right.append(points[0])
        else:
            left.append(points[0])
            right.append(points[-1])
            decasteljau_recurse([p.lerp(q, t) for p, q in zip(points, points[1:])])

    if points:
        decasteljau_recurse(points)

    right.reverse()
    return left, right


def points_to_command(points):
    if len(points) == 4:  # start, control1, control2, end
        return SVGPathSegCurvetoCubic(points[1].x, points[1].y, points[2].x, points[2].y,
                                      points[3].x, points[3].y)
    elif len(points) == 3:  # start, control, end
        return SVGPathSegCurvetoQuadratic(points[1].x, points[1].y, points[2].x, points[2].y)
    else:  # start, end
        return SVGPathSegLineto(points[-1].x, points[-1].y)


def split_curve_as_points(points, segment_count=2):
    """Run de Casteljau enough times to cut the curve into segment_count pieces of equal t length.

    x-----x-----x-----x
    t=  0.33   0.66   1
    x-----o-----------x
    r=  0.33
          x-----o-----x
    r=         0.5  (0.33 / (1 - 0.33))

    Each split is made on what remains of the curve, so the split parameter is
    rescaled to that remainder: t_increment / (1 - t_increment * i)
    """
    if segment_count < 1:
        raise ValueError('Cannot split a curve into %s segments' % segment_count)

    segments = []
    remaining_curve = points
    t_increment = 1 / segment_count

    for i in range(segment_count - 1):
        t_relative = t_increment / (1 - t_increment * i)
        left, remaining_curve = decasteljau(remaining_curve, t_relative)
        segments.append(left)

    # last segment is just to the end from the last point
    segments.append(remaining_curve)

    return segments


def split_curve(command_start, command_end, segment_count):
    """Split the segment command_start -> command_end into segment_count commands.

    command_start followed by the returned commands draws the same curve as the
    original segment.
    """
    points = [Point(x=getattr(command_start, 'x', math.nan), y=getattr(command_start, 'y', math.nan))]
    if 'x1' in command_end:
        points.append(Point(x=command_end.x1, y=command_end.y1))
    if 'x2' in command_end:
        points.append(Point(x=command_end.x2, y=command_end.y2))
    points.append(Point(x=command_end.x, y=command_end.y))

    return [points_to_command(segment) for segment in split_curve_as_points(points, segment_count)]
