import logging
import os

from flask import Flask, request, jsonify
from flask_cors import CORS

from format_detector import detect_format
from property_converter import INPUT_FORMATS, convert_content

logger = logging.getLogger(__name__)

app = Flask(__name__)
CORS(app)  # Enable CORS for the editor frontend


def _read_request():
    """Pull content and options from a JSON body or a multipart upload"""
    if 'file' in request.files:
        file = request.files['file']
        if file.filename == '':
            raise ValueError('No file selected')
        options = request.form
        content = file.read().decode('utf-8')
    else:
        options = request.get_json(silent=True)
        if not options or not isinstance(options, dict):
            raise ValueError('No data provided')
        content = options.get('content') or ''

    sort_keys = options.get('sort_keys', False)
    if isinstance(sort_keys, str):
        sort_keys = sort_keys.lower() in ('1', 'true', 'yes')

    from_format = options.get('from_format') or 'auto'
    name_key = options.get('name_key', 'name') or None

    if not isinstance(content, str):
        raise ValueError('Content must be a string')
    if not isinstance(from_format, str):
        raise ValueError('Format must be a string')
    if name_key is not None and not isinstance(name_key, str):
        raise ValueError('Name key must be a string')

    return {
        'content': content.strip(),
        'from_format': from_format.lower(),
        'sort_keys': bool(sort_keys),
        'name_key': name_key,
    }


@app.route('/api/convert', methods=['POST'])
def convert_to_property():
    """
    Convert JSON or YAML content to Gameplay3D property text.
    Accepts: { "content": "...", "from_format": "json|yaml|auto",
               "sort_keys": false, "name_key": "name" }
             or multipart/form-data with 'file' and the same options as fields
    Returns: {
        "success": true,
        "property": "...",
        "detected_format": "json"
    }
    """
    try:
        params = _read_request()

        if not params['content']:
            return jsonify({'error': 'No content provided'}), 400

        if params['from_format'] not in INPUT_FORMATS:
            return jsonify({'error': f"Invalid format: {params['from_format']}. Must be json, yaml, or auto"}), 400

        detected_format = detect_format(params['content'])
        property_text = convert_content(
            params['content'],
            from_format=params['from_format'],
            sort_keys=params['sort_keys'],
            name_key=params['name_key'],
        )

        return jsonify({
            'success': True,
            'property': property_text,
            'detected_format': detected_format,
        })

    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    except Exception as e:
        logger.exception("Conversion failed")
        return jsonify({'error': f'Conversion error: {str(e)}'}), 500


@app.route('/api/health', methods=['GET'])
def health_check():
    return jsonify({'status': 'ok'})


if __name__ == '__main__':
    app.run(
        debug=os.getenv('JSON2PROPERTY_DEBUG', '1') == '1',
        port=int(os.getenv('JSON2PROPERTY_PORT', '5000')),
    )
