def lerp(a, b, t):
    return (1 - t) * a + t * b


class Point(object):
    def __init__(self, x=None, y=None):
        self.x = x
        self.y = y

    def __repr__(self):
        return 'Point<%s,%s>' % (self.x, self.y)

    def __eq__(self, other):
        return isinstance(other, Point) and self.xy == other.xy

    def lerp(self, other, t):
        return Point(x=lerp(self.x, other.x, t), y=lerp(self.y, other.y, t))

    @property
    def xy(self):
        return self.x, self.y

    @property
    def complex(self):
        return complex(self.x, self.y)
