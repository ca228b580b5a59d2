class SVGPathSeg:

    PATHSEG_UNKNOWN = 0
    PATHSEG_CLOSEPATH = 1
    PATHSEG_MOVETO_ABS = 2
    PATHSEG_MOVETO_REL = 3
    PATHSEG_LINETO_ABS = 4
    PATHSEG_LINETO_REL = 5
    PATHSEG_CURVETO_CUBIC_ABS = 6
    PATHSEG_CURVETO_CUBIC_REL = 7
    PATHSEG_CURVETO_QUADRATIC_ABS = 8
    PATHSEG_CURVETO_QUADRATIC_REL = 9
    PATHSEG_ARC_ABS = 10
    PATHSEG_ARC_REL = 11
    PATHSEG_LINETO_HORIZONTAL_ABS = 12
    PATHSEG_LINETO_HORIZONTAL_REL = 13
    PATHSEG_LINETO_VERTICAL_ABS = 14
    PATHSEG_LINETO_VERTICAL_REL = 15
    PATHSEG_CURVETO_CUBIC_SMOOTH_ABS = 16
    PATHSEG_CURVETO_CUBIC_SMOOTH_REL = 17
    PATHSEG_CURVETO_QUADRATIC_SMOOTH_ABS = 18
    PATHSEG_CURVETO_QUADRATIC_SMOOTH_REL = 19

    letters = [
        '', 'Z',
        'M', 'm',
        'L', 'l',
        'C', 'c',
        'Q', 'q',
        'A', 'a',
        'H', 'h',
        'V', 'v',
        'S', 's',
        'T', 't'
    ]

    # parameter names in the order they are written in a `d` attribute
    params = ()

    def __init__(self, pathSegType):
        self.pathSegType = pathSegType

    @property
    def pathSegTypeAsLetter(self):
        return self.letters[self.pathSegType]

    @property
    def abs(self):
        return self.pathSegType == SVGPathSeg.PATHSEG_CLOSEPATH or self.pathSegType % 2 == 0

    @property
    def values(self):
        return tuple(getattr(self, name) for name in self.params)

    def as_dict(self):
        return dict(zip(self.params, self.values))

    def copy(self, **changes):
        values = self.as_dict()
        values.update(changes)
        if not self.params:
            return type(self)()
        return type(self)(abs=self.abs, **values)

    def __contains__(self, item):
        return item in self.params

    def __eq__(self, other):
        if not isinstance(other, SVGPathSeg):
            return NotImplemented
        return self.pathSegTypeAsLetter == other.pathSegTypeAsLetter and self.values == other.values

    def __repr__(self):
        return '%s<%s%s>' % (type(self).__name__, self.pathSegTypeAsLetter,
                             ','.join(repr(v) for v in self.values))


class SVGPathSegClosePath(SVGPathSeg):
    def __init__(self):
        super().__init__(SVGPathSeg.PATHSEG_CLOSEPATH)


class SVGPathSegMoveto(SVGPathSeg):
    params = ('x', 'y')

    def __init__(self, x, y, abs=True):
        if abs:
            super().__init__(SVGPathSeg.PATHSEG_MOVETO_ABS)
        else:
            super().__init__(SVGPathSeg.PATHSEG_MOVETO_REL)
        self.x = x
        self.y = y


class SVGPathSegLineto(SVGPathSeg):
    params = ('x', 'y')

    def __init__(self, x, y, abs=True):
        if abs:
            super().__init__(SVGPathSeg.PATHSEG_LINETO_ABS)
        else:
            super().__init__(SVGPathSeg.PATHSEG_LINETO_REL)
        self.x = x
        self.y = y


class SVGPathSegLinetoHorizontal(SVGPathSeg):
    params = ('x',)

    def __init__(self, x, abs=True):
        if abs:
            super().__init__(SVGPathSeg.PATHSEG_LINETO_HORIZONTAL_ABS)
        else:
            super().__init__(SVGPathSeg.PATHSEG_LINETO_HORIZONTAL_REL)
        self.x = x


class SVGPathSegLinetoVertical(SVGPathSeg):
    params = ('y',)

    def __init__(self, y, abs=True):
        if abs:
            super().__init__(SVGPathSeg.PATHSEG_LINETO_VERTICAL_ABS)
        else:
            super().__init__(SVGPathSeg.PATHSEG_LINETO_VERTICAL_REL)
        self.y = y


class SVGPathSegCurvetoCubic(SVGPathSeg):
    params = ('x1', 'y1', 'x2', 'y2', 'x', 'y')

    def __init__(self, x1, y1, x2, y2, x, y, abs=True):
        if abs:
            super().__init__(SVGPathSeg.PATHSEG_CURVETO_CUBIC_ABS)
        else:
            super().__init__(SVGPathSeg.PATHSEG_CURVETO_CUBIC_REL)
        self.x1 = x1
        self.y1 = y1
        self.x2 = x2
        self.y2 = y2
        self.x = x
        self.y = y


class SVGPathSegCurvetoCubicSmooth(SVGPathSeg):
    params = ('x2', 'y2', 'x', 'y')

    def __init__(self, x2, y2, x, y, abs=True):
        if abs:
            super().__init__(SVGPathSeg.PATHSEG_CURVETO_CUBIC_SMOOTH_ABS)
        else:
            super().__init__(SVGPathSeg.PATHSEG_CURVETO_CUBIC_SMOOTH_REL)
        self.x2 = x2
        self.y2 = y2
        self.x = x
        self.y = y


class SVGPathSegCurvetoQuadratic(SVGPathSeg):
    params = ('x1', 'y1', 'x', 'y')

    def __init__(self, x1, y1, x, y, abs=True):
        if abs:
            super().__init__(SVGPathSeg.PATHSEG_CURVETO_QUADRATIC_ABS)
        else:
            super().__init__(SVGPathSeg.PATHSEG_CURVETO_QUADRATIC_REL)
        self.x1 = x1
        self.y1 = y1
        self.x = x
        self.y = y


class SVGPathSegCurvetoQuadraticSmooth(SVGPathSeg):
    params = ('x', 'y')

    def __init__(self, x, y, abs=True):
        if abs:
            super().__init__(SVGPathSeg.PATHSEG_CURVETO_QUADRATIC_SMOOTH_ABS)
        else:
            super().__init__(SVGPathSeg.PATHSEG_CURVETO_QUADRATIC_SMOOTH_REL)
        self.x = x
        self.y = y


class SVGPathSegArc(SVGPathSeg):
    params = ('rx', 'ry', 'xAxisRotation', 'largeArcFlag', 'sweepFlag', 'x', 'y')

    def __init__(self, rx, ry, xAxisRotation, largeArcFlag, sweepFlag, x, y, abs=True):
        if abs:
            super().__init__(SVGPathSeg.PATHSEG_ARC_ABS)
        else:
            super().__init__(SVGPathSeg.PATHSEG_ARC_REL)
        self.rx = rx
        self.ry = ry
        self.xAxisRotation = xAxisRotation
        self.largeArcFlag = largeArcFlag
        self.sweepFlag = sweepFlag
        self.x = x
        self.y = y


SEGMENT_CLASSES = {
    'M': SVGPathSegMoveto,
    'L': SVGPathSegLineto,
    'H': SVGPathSegLinetoHorizontal,
    'V': SVGPathSegLinetoVertical,
    'C': SVGPathSegCurvetoCubic,
    'S': SVGPathSegCurvetoCubicSmooth,
    'Q': SVGPathSegCurvetoQuadratic,
    'T': SVGPathSegCurvetoQuadraticSmooth,
    'A': SVGPathSegArc,
}


def create_segment(letter, *values):
    """Build the command for `letter` (upper case is absolute) from its values in `d` order."""
    if letter in ('Z', 'z'):
        return SVGPathSegClosePath()
    return SEGMENT_CLASSES[letter.upper()](*values, abs=letter.isupper())


def is_moveto(command):
    return isinstance(command, SVGPathSegMoveto)


def is_closepath(command):
    return isinstance(command, SVGPathSegClosePath)


def to_lineto(command):
    """Lineto to the same point; only the first command of a path may be a moveto."""
    if is_moveto(command):
        return SVGPathSegLineto(command.x, command.y, abs=command.abs)
    return command
