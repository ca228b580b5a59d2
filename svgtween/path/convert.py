from svgtween.path.pathseg import is_moveto

# positional equivalents used when the source command lacks a control point
CONVERSION_MAP = {
    'x1': 'x',
    'y1': 'y',
    'x2': 'x',
    'y2': 'y',
}

# arc only values, always taken from the target command
READ_FROM_B_KEYS = ('xAxisRotation', 'largeArcFlag', 'sweepFlag')


def converted_value(a_command, b_command, param):
    if param in a_command:
        return getattr(a_command, param)
    if param in READ_FROM_B_KEYS:
        return getattr(b_command, param)
    equivalent = CONVERSION_MAP.get(param)
    if equivalent is not None and equivalent in a_command:
        return getattr(a_command, equivalent)
    return 0


def convert_to_same_type(a_command, b_command):
    """Converts a_command to have the same type as b_command.

    e.g., L0,5 -> C0,5,0,5,0,5

    Commands are never converted into a moveto.
    """
    if a_command.pathSegTypeAsLetter == b_command.pathSegTypeAsLetter or is_moveto(b_command):
        return a_command

    values = {param: converted_value(a_command, b_command, param) for param in b_command.params}
    return b_command.copy(**values)


def convert_all(a_commands, b_commands):
    return [convert_to_same_type(a_command, b_command)
            for a_command, b_command in zip(a_commands, b_commands)]
