"""
Interpolate from A to B by extending A and B during interpolation to have the
same number of points. This allows for a smooth transition when they have a
different number of points.
"""
import math

from svgtween.path.convert import convert_all
from svgtween.path.extend import extend
from svgtween.path.interpolate import interpolate_string
from svgtween.path.parser import Config as ParserConfig, parse_path, path_is_closed, serialize_path
from svgtween.path.pathseg import SVGPathSegClosePath, is_closepath
from svgtween.path.utils import log

FLAG_PARAMS = ('largeArcFlag', 'sweepFlag')


class Config(ParserConfig):
    snap_end_to_input = True  # at t=1 hand back B exactly as it was given
    round_arc_flags = True


def equalize(a_commands, b_commands, exclude_segment=None):
    """Bring both command lists to the same length and A's commands to B's types."""
    # if A is empty, treat it as if it used to contain just the first point
    # of B. This makes it so the line extends out of from that first point.
    if not a_commands:
        log('empty start path, growing from %r' % b_commands[0])
        a_commands = [b_commands[0]]

    # otherwise if B is empty, treat it as if it contains the first point
    # of A. This makes it so the line retracts into the first point.
    elif not b_commands:
        log('empty end path, shrinking into %r' % a_commands[0])
        b_commands = [a_commands[0]]

    if len(b_commands) > len(a_commands):
        a_commands = extend(a_commands, b_commands, exclude_segment)
    elif len(b_commands) < len(a_commands):
        b_commands = extend(b_commands, a_commands, exclude_segment)

    return convert_all(a_commands, b_commands), b_commands


def interpolate_path(a, b, exclude_segment=None, config=None):
    """Interpolator from path `d` string a to path `d` string b.

    Ignores Z in the paths unless both a and b end with it.

    exclude_segment(start_command, end_command) can return True for segments
    of the shorter path that must not receive extra points.
    Returns a function mapping t in [0, 1] to a `d` string.
    """
    config = config or Config

    a_commands = parse_path(a, config.strict)
    b_commands = parse_path(b, config.strict)

    # if both are empty, interpolation is always the empty string
    if not a_commands and not b_commands:
        return lambda t: ''

    a_commands, b_commands = equalize(a_commands, b_commands, exclude_segment)

    # if both A and B end with Z add it back in
    closed = path_is_closed(a) and path_is_closed(b)
    string_interpolator = interpolate_string(serialize_path(a_commands, closed),
                                             serialize_path(b_commands, closed))

    b_input = '' if b is None else b

    def path_interpolator(t):
        # at 1 return the final value without the extensions used during interpolation
        if t == 1 and config.snap_end_to_input:
            return b_input
        return string_interpolator(t)

    return path_interpolator


def interpolate_path_commands(a_commands, b_commands, exclude_segment=None, config=None):
    """Same as interpolate_path, on lists of command objects instead of `d` strings.

    The interpolator returns a new list of commands for every t.
    """
    config = config or Config

    b_input = b_commands
    a_commands = [] if a_commands is None else list(a_commands)
    b_commands = [] if b_commands is None else list(b_commands)

    if not a_commands and not b_commands:
        return lambda t: []

    closed = (not a_commands or is_closepath(a_commands[-1])) and \
             (not b_commands or is_closepath(b_commands[-1]))

    if a_commands and is_closepath(a_commands[-1]):
        a_commands.pop()
    if b_commands and is_closepath(b_commands[-1]):
        b_commands.pop()

    if not a_commands and not b_commands:
        return lambda t: [SVGPathSegClosePath()] if closed else []

    a_commands, b_commands = equalize(a_commands, b_commands, exclude_segment)
    pairs = list(zip(a_commands, b_commands))

    def interpolate_command(a_command, b_command, t):
        values = {}
        for param in a_command.params:
            # a command is never converted into a moveto, such a param stays put
            a_value = getattr(a_command, param)
            value = (1 - t) * a_value + t * getattr(b_command, param, a_value)
            if config.round_arc_flags and param in FLAG_PARAMS:
                value = math.floor(value + 0.5)
            values[param] = value
        return a_command.copy(**values)

    def path_commands_interpolator(t):
        if t == 1 and config.snap_end_to_input:
            return [] if b_input is None else b_input

        commands = [interpolate_command(a_command, b_command, t) for a_command, b_command in pairs]
        if closed:
            commands.append(SVGPathSegClosePath())
        return commands

    return path_commands_interpolator


def frames(a, b, count, exclude_segment=None, config=None):
    """Yield (t, d) for count evenly spaced values of t from 0 to 1."""
    if count < 2:
        raise ValueError('Need at least 2 frames, got %s' % count)

    interpolator = interpolate_path(a, b, exclude_segment, config)
    for i in range(count):
        t = i / (count - 1)
        yield t, interpolator(t)
