"""
Format detection utilities to tell JSON and YAML input apart
"""
import json
import yaml


def detect_format(content: str) -> str:
    """
    Detect the format of the given content.

    Returns:
        'json', 'yaml', or 'unknown'
    """
    if not content or not content.strip():
        return 'unknown'

    content = content.strip()

    # JSON is also valid YAML, so check it first
    if is_json(content):
        return 'json'

    if is_yaml(content):
        return 'yaml'

    return 'unknown'


def is_json(content: str) -> bool:
    """Check if content is JSON"""
    try:
        json.loads(content)
        return True
    except (json.JSONDecodeError, ValueError):
        return False


def is_yaml(content: str) -> bool:
    """Check if content is a YAML mapping or sequence"""
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError:
        return False

    # A bare word loads as a string; only structured documents count
    if isinstance(data, (dict, list)):
        return True

    lines = content.strip().split('\n')
    first_line = lines[0].strip()

    # Documents that start with a marker but hold a single scalar
    return first_line.startswith('---') and len(lines) > 1
