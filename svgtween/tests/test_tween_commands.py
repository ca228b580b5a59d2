import math

from svgtween.path.pathseg import SVGPathSegMoveto as M, SVGPathSegLineto as L, SVGPathSegClosePath as Z, \
    SVGPathSegArc as A, SVGPathSegCurvetoCubic as C
from svgtween.tween import interpolate_path_commands

APPROX_MAX_T = 0.999999999999


def approximately_equal(commands1, commands2, epsilon=0.001):
    if len(commands1) != len(commands2):
        return False
    for command1, command2 in zip(commands1, commands2):
        if command1.pathSegTypeAsLetter != command2.pathSegTypeAsLetter:
            return False
        if any(abs(v - w) > epsilon for v, w in zip(command1.values, command2.values)):
            return False
    return True


def test_same_length():
    a = [M(0, 0), L(10, 10), L(100, 100)]
    b = [M(10, 10), L(20, 20), L(200, 200)]
    interpolator = interpolate_path_commands(a, b)

    assert interpolator(0) == a
    assert interpolator(1) == b
    assert interpolator(0.5) == [M(5, 5), L(15, 15), L(150, 150)]


def test_a_longer_than_b():
    a = [M(0, 0), L(10, 10), L(100, 100)]
    b = [M(10, 10), L(20, 20)]
    interpolator = interpolate_path_commands(a, b)

    assert interpolator(0) == a
    assert interpolator(1) is b
    assert approximately_equal(interpolator(APPROX_MAX_T), [M(10, 10), L(15, 15), L(20, 20)])
    assert interpolator(0.5) == [M(5, 5), L(12.5, 12.5), L(60, 60)]


def test_a_shorter_than_b():
    a = [M(0, 0), L(10, 10)]
    b = [M(10, 10), L(20, 20), L(200, 200)]
    interpolator = interpolate_path_commands(a, b)

    assert interpolator(0) == [M(0, 0), L(5, 5), L(10, 10)]
    assert approximately_equal(interpolator(APPROX_MAX_T), b)
    assert interpolator(0.5) == [M(5, 5), L(12.5, 12.5), L(105, 105)]


def test_a_single_point():
    a = [M(0, 0), Z()]
    b = [M(10, 10), L(20, 20), L(200, 200)]
    interpolator = interpolate_path_commands(a, b)

    assert interpolator(0) == [M(0, 0), L(0, 0), L(0, 0)]
    assert interpolator(1) is b
    assert interpolator(0.5) == [M(5, 5), L(10, 10), L(100, 100)]


def test_b_single_point():
    a = [M(0, 0), L(10, 10), L(100, 100)]
    b = [M(10, 10), Z()]
    interpolator = interpolate_path_commands(a, b)

    assert interpolator(0) == a
    assert interpolator(1) is b
    assert interpolator(0.5) == [M(5, 5), L(10, 10), L(55, 55)]


def test_a_is_none():
    b = [M(10, 10), L(20, 20), L(200, 200)]
    interpolator = interpolate_path_commands(None, b)

    assert interpolator(0) == [M(10, 10), L(10, 10), L(10, 10)]
    assert interpolator(1) is b
    assert interpolator(0.5) == [M(10, 10), L(15, 15), L(105, 105)]


def test_b_is_none():
    a = [M(0, 0), L(10, 10), L(100, 100)]
    interpolator = interpolate_path_commands(a, None)

    assert interpolator(0) == a
    assert interpolator(1) == []
    assert interpolator(0.5) == [M(0, 0), L(5, 5), L(50, 50)]


def test_both_none():
    interpolator = interpolate_path_commands(None, None)

    assert interpolator(0) == []
    assert interpolator(0.5) == []
    assert interpolator(1) == []


def test_both_closed():
    a = [M(0, 0), Z()]
    b = [M(10, 10), L(20, 20), Z()]
    interpolator = interpolate_path_commands(a, b)

    assert interpolator(0) == [M(0, 0), L(0, 0), Z()]
    assert interpolator(1) is b
    assert interpolator(0.5) == [M(5, 5), L(10, 10), Z()]


def test_a_is_none_b_closed():
    b = [M(10, 10), L(20, 20), Z()]
    interpolator = interpolate_path_commands(None, b)

    assert interpolator(0) == [M(10, 10), L(10, 10), Z()]
    assert interpolator(1) is b
    assert interpolator(0.5) == [M(10, 10), L(15, 15), Z()]


def test_inputs_are_not_modified():
    a = [M(0, 0), L(10, 10), Z()]
    b = [M(10, 10), L(20, 20), L(30, 30), Z()]
    interpolate_path_commands(a, b)(0.5)

    assert a == [M(0, 0), L(10, 10), Z()]
    assert b == [M(10, 10), L(20, 20), L(30, 30), Z()]


def test_each_frame_is_new():
    interpolator = interpolate_path_commands([M(0, 0), L(10, 10)], [M(10, 10), L(20, 20)])
    first = interpolator(0.25)
    second = interpolator(0.75)

    assert first == [M(2.5, 2.5), L(12.5, 12.5)]
    assert second == [M(7.5, 7.5), L(17.5, 17.5)]


def test_type_conversion_and_arc_flags():
    a = [M(0, 0), L(10, 10)]
    b = [M(0, 0), A(4, 4, 30, 1, 0, 20, 20)]
    interpolator = interpolate_path_commands(a, b)

    assert interpolator(0) == [M(0, 0), A(0, 0, 30, 1, 0, 10, 10)]
    assert interpolator(0.5) == [M(0, 0), A(2, 2, 30, 1, 0, 15, 15)]


def test_arc_flags_are_rounded():
    a = [M(0, 0), A(4, 4, 0, 0, 1, 10, 10)]
    b = [M(0, 0), A(4, 4, 0, 1, 0, 10, 10)]
    interpolator = interpolate_path_commands(a, b)

    frame = interpolator(0.4)
    assert (frame[1].largeArcFlag, frame[1].sweepFlag) == (0, 1)
    frame = interpolator(0.5)
    assert (frame[1].largeArcFlag, frame[1].sweepFlag) == (1, 1)


def test_missing_parameters_propagate_as_nan():
    a = [M(0, 0), C(1, 1, 2, 2, 3, math.nan)]
    b = [M(0, 0), C(1, 1, 2, 2, 3, 3)]

    assert math.isnan(interpolate_path_commands(a, b)(0.5)[1].y)
