from svgtween.path.parser import parse_path, serialize_path, PathError, InvalidCommandError, ArityMismatchError
from svgtween.tween import interpolate_path, interpolate_path_commands, frames, Config
