"""
Value interpolators for tweening path strings.

interpolate_string follows d3-interpolate's interpolateString: the numbers
embedded in both strings are paired up in order and tweened, everything else
is taken from the target string.
"""
import math
import re
from decimal import Decimal

NUMBER_RE = re.compile(r'[-+]?(?:\d+\.?\d*|\.?\d+)(?:[eE][-+]?\d+)?')


def format_number(value):
    """Render a float the way a browser writes it back into a `d` attribute.

    5.0 -> '5', 12.5 -> '12.5', 1e-7 -> '1e-7', nan -> 'NaN'
    """
    value = float(value)
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'Infinity' if value > 0 else '-Infinity'
    if value == int(value) and abs(value) < 1e16:
        return '%d' % value

    text = repr(value)
    if 'e' not in text:
        return text

    mantissa, exponent = text.split('e')
    exponent = int(exponent)
    if -7 < exponent < 21:
        return '{:f}'.format(Decimal(text))
    return '%se%+d' % (mantissa, exponent)


def interpolate_number(a, b):
    a = float(a)
    b = float(b)

    def number_interpolator(t):
        return a * (1 - t) + b * t

    return number_interpolator


def interpolate_string(a, b):
    a = str(a)
    b = str(b)

    pieces = []   # literal strings, None where a number goes
    numbers = []  # (index in pieces, number interpolator)
    bi = 0

    def add_literal(text):
        if pieces and pieces[-1] is not None:
            pieces[-1] += text
        else:
            pieces.append(text)

    for am, bm in zip(NUMBER_RE.finditer(a), NUMBER_RE.finditer(b)):
        if bm.start() > bi:
            add_literal(b[bi:bm.start()])
        if am.group() == bm.group():
            add_literal(bm.group())
        else:
            pieces.append(None)
            numbers.append((len(pieces) - 1, interpolate_number(am.group(), bm.group())))
        bi = bm.end()

    if bi < len(b):
        add_literal(b[bi:])

    if len(pieces) < 2:
        if numbers:
            only = numbers[0][1]
            return lambda t: format_number(only(t))
        return lambda t: b

    def string_interpolator(t):
        frame = list(pieces)
        for i, interpolator in numbers:
            frame[i] = format_number(interpolator(t))
        return ''.join(frame)

    return string_interpolator
