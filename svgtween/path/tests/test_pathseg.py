from svgtween.path.pathseg import SVGPathSeg, SVGPathSegMoveto, SVGPathSegLineto, SVGPathSegCurvetoQuadratic, \
    SVGPathSegClosePath, create_segment, to_lineto


def test_letters():
    assert create_segment('M', 1, 2).pathSegTypeAsLetter == 'M'
    assert create_segment('m', 1, 2).pathSegTypeAsLetter == 'm'
    assert create_segment('q', 1, 2, 3, 4).pathSegType == SVGPathSeg.PATHSEG_CURVETO_QUADRATIC_REL
    assert create_segment('Z').pathSegTypeAsLetter == 'Z'
    assert create_segment('T', 1, 2).abs
    assert not create_segment('t', 1, 2).abs


def test_contains():
    quadratic = SVGPathSegCurvetoQuadratic(1, 2, 3, 4)
    assert 'x1' in quadratic
    assert 'x' in quadratic
    assert 'x2' not in quadratic
    assert 'x' not in SVGPathSegClosePath()


def test_copy():
    line = SVGPathSegLineto(1, 2, abs=False)
    moved = line.copy(x=5)

    assert moved == SVGPathSegLineto(5, 2, abs=False)
    assert line == SVGPathSegLineto(1, 2, abs=False)
    assert moved is not line


def test_equality():
    assert SVGPathSegMoveto(1, 2) == SVGPathSegMoveto(1.0, 2.0)
    assert SVGPathSegMoveto(1, 2) != SVGPathSegLineto(1, 2)
    assert SVGPathSegClosePath() == SVGPathSegClosePath()
    assert SVGPathSegLineto(1, 2) != (1, 2)


def test_to_lineto():
    assert to_lineto(SVGPathSegMoveto(1, 2)) == SVGPathSegLineto(1, 2)
    assert to_lineto(SVGPathSegMoveto(1, 2, abs=False)) == SVGPathSegLineto(1, 2, abs=False)
    quadratic = SVGPathSegCurvetoQuadratic(1, 2, 3, 4)
    assert to_lineto(quadratic) is quadratic
