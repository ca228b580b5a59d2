import math

from svgtween.path.geometry import Point
from svgtween.path.pathseg import SVGPathSegLineto, is_closepath, is_moveto, to_lineto
from svgtween.path.split import split_curve
from svgtween.path.utils import array_of_length, log

SPLITTABLE = ('L', 'Q', 'C')


def pen_positions(commands):
    """Absolute pen position after each command.

    H and V keep the coordinate they do not set, relative commands are
    offsets from the previous position.
    """
    positions = []
    pen = subpath_start = Point(0, 0)
    for command in commands:
        if is_closepath(command):
            pen = subpath_start
        elif command.abs:
            pen = Point(getattr(command, 'x', pen.x), getattr(command, 'y', pen.y))
        else:
            pen = Point(pen.x + getattr(command, 'x', 0), pen.y + getattr(command, 'y', 0))
        if is_moveto(command):
            subpath_start = pen
        positions.append(pen)
    return positions


def split_segment(command_start, command_end, segment_count, start_point=None):
    """Interpolate between command_start and command_end segment_count times.

    Lines, quadratic and cubic curves are split with de Casteljau's algorithm,
    anything else is command_start copied segment_count - 1 times, finally
    ending with command_end.

    start_point is the absolute position command_start leaves the pen at, for
    starts that do not carry both coordinates (H, V) or are relative.
    """
    if command_end.pathSegTypeAsLetter in SPLITTABLE:
        if start_point is not None:
            command_start = SVGPathSegLineto(start_point.x, start_point.y)
        return split_curve(command_start, command_end, segment_count)

    copy_command = to_lineto(command_start)
    return array_of_length(segment_count - 1, copy_command) + [command_end]


def count_points_per_segment(commands_to_extend, reference_commands, exclude_segment=None):
    """How many commands each segment of commands_to_extend has to turn into.

    Index i is the segment i -> i + 1; the last index is the final command on
    its own. Every segment gets at least one, its own end point.
    """
    last_index = len(commands_to_extend) - 1
    num_reference_segments = len(reference_commands) - 1

    # this value is always between [0, 1]
    segment_ratio = last_index / num_reference_segments

    counts = array_of_length(len(commands_to_extend), 0)
    for i in range(num_reference_segments):
        insert_index = math.floor(segment_ratio * i)

        if exclude_segment is not None and insert_index < last_index and \
                exclude_segment(commands_to_extend[insert_index], commands_to_extend[insert_index + 1]):
            # split half and half on the neighbouring segments
            add_to_prior_segment = (segment_ratio * i) % 1 < 0.5

            # an excluded segment keeps its own point, only the extra ones move.
            # two adjacent excluded segments are not handled, the point may land
            # in the other excluded one
            if counts[insert_index]:
                if add_to_prior_segment:
                    if insert_index > 0:
                        insert_index -= 1
                    elif insert_index < last_index:
                        insert_index += 1
                elif insert_index < last_index:
                    insert_index += 1
                elif insert_index > 0:
                    insert_index -= 1

        counts[insert_index] += 1

    return counts


def extend(commands_to_extend, reference_commands, exclude_segment=None):
    """Extend commands_to_extend to the length of reference_commands.

    Segments are split until the number of commands match; all the commands of
    commands_to_extend are in the extended list.
    """
    if len(commands_to_extend) == 1:
        # no segment to split, pretend there is a line back to the same point
        commands_to_extend = [commands_to_extend[0], to_lineto(commands_to_extend[0])]
        if len(reference_commands) <= len(commands_to_extend):
            return commands_to_extend

    counts = count_points_per_segment(commands_to_extend, reference_commands, exclude_segment)
    log('extending %s commands to %s: %s' % (len(commands_to_extend), len(reference_commands), counts))

    last_index = len(commands_to_extend) - 1

    positions = pen_positions(commands_to_extend)

    # the very first point, split_segment only adds the ones after it
    extended = [commands_to_extend[0]]
    for i, segment_count in enumerate(counts):
        if not segment_count:
            continue
        if i == last_index:
            extended += array_of_length(segment_count, to_lineto(commands_to_extend[last_index]))
        else:
            extended += split_segment(commands_to_extend[i], commands_to_extend[i + 1], segment_count,
                                      positions[i])

    return extended
