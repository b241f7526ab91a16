"""
JSON to Gameplay3D property converter module
"""
import io

from transcriber import Namespace, transcribe


def write_property(json_data, stream, sort_keys=False, name_key="name"):
    """
    Write JSON data to an open text stream in Gameplay3D property format.

    Lines are written as the tree is walked, so nothing is buffered here.
    """
    transcribe(json_data, Namespace(), stream, sort_keys=sort_keys, name_key=name_key)


def json_to_property(json_data, sort_keys=False, name_key="name"):
    """
    Convert JSON data to Gameplay3D property format.

    Args:
        json_data: The JSON data to convert (dict, list, or primitive)
        sort_keys: Emit object members in sorted key order
        name_key: Member used to name namespaces made from array elements

    Returns:
        str: The property formatted text
    """
    output = io.StringIO()
    write_property(json_data, output, sort_keys=sort_keys, name_key=name_key)
    return output.getvalue()
