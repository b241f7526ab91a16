"""
Input loading and file conversion: JSON or YAML in, Gameplay3D property out
"""
import json
import logging

import yaml

from converter import json_to_property, write_property
from errors import InputUnreadableError, MalformedJSONError, OutputUnwritableError
from format_detector import detect_format

logger = logging.getLogger(__name__)

INPUT_FORMATS = ('auto', 'json', 'yaml')


def json_to_data(json_text: str):
    """Parse JSON text, reporting failures with line and column"""
    try:
        return json.loads(json_text)
    except json.JSONDecodeError as e:
        raise MalformedJSONError(f"{e.msg} at line {e.lineno} column {e.colno}")


def yaml_to_data(yaml_text: str):
    """Parse YAML text"""
    if not yaml_text.strip():
        return {}
    try:
        return yaml.safe_load(yaml_text)
    except yaml.YAMLError as e:
        raise MalformedJSONError(f"Invalid YAML: {e}")


def load_content(content: str, from_format: str = 'auto'):
    """
    Parse content into a value tree.

    Args:
        content: The text to parse
        from_format: 'json', 'yaml', or 'auto' to detect it

    Returns:
        Tuple of (parsed data, format actually used)
    """
    if from_format not in INPUT_FORMATS:
        raise ValueError(f"Unknown source format: {from_format}")

    if from_format == 'auto':
        detected = detect_format(content)
        # Undetectable input goes through the JSON parser for a useful diagnostic
        from_format = detected if detected != 'unknown' else 'json'
        logger.debug("Detected input format: %s", from_format)

    if from_format == 'yaml':
        return yaml_to_data(content), from_format
    return json_to_data(content), from_format


def convert_content(content: str, from_format: str = 'json', sort_keys: bool = False,
                    name_key: str = 'name') -> str:
    """
    Convert JSON or YAML text to Gameplay3D property text.

    Raises:
        MalformedJSONError: If the content cannot be parsed
    """
    data, _ = load_content(content, from_format)
    return json_to_property(data, sort_keys=sort_keys, name_key=name_key)


def read_input_file(input_path: str) -> str:
    try:
        with open(input_path, 'r', encoding='utf-8') as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Cannot read %s: %s", input_path, e)
        raise InputUnreadableError("Failed to open input file")


def convert_file(input_path: str, output_path: str, from_format: str = 'auto',
                 sort_keys: bool = False, name_key: str = 'name'):
    """
    Convert an input file and write the property file.

    The input is parsed before the output is opened, so malformed input
    never leaves a file behind.

    Raises:
        InputUnreadableError: If the input cannot be opened
        MalformedJSONError: If the input cannot be parsed
        OutputUnwritableError: If the output cannot be created
    """
    content = read_input_file(input_path)
    data, used_format = load_content(content, from_format)
    logger.debug("Loaded %s as %s", input_path, used_format)

    try:
        output = open(output_path, 'w', encoding='utf-8')
    except OSError as e:
        raise OutputUnwritableError(f"Failed to open output file: {e.strerror or e}")

    try:
        with output:
            write_property(data, output, sort_keys=sort_keys, name_key=name_key)
    except OSError as e:
        raise OutputUnwritableError(f"Failed to write output file: {e.strerror or e}")

    logger.debug("Wrote %s", output_path)
