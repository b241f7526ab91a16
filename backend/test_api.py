"""
Test cases for Flask API endpoints
"""
import pytest
import json
import io
from app import app


@pytest.fixture
def client():
    """Create a test client for the Flask app"""
    app.config['TESTING'] = True
    with app.test_client() as client:
        yield client


class TestConvertEndpoint:
    """Test the /api/convert endpoint"""

    def test_convert_json_content(self, client):
        """Test conversion of JSON content"""
        response = client.post(
            '/api/convert',
            json={"content": '{"a": 1, "b": {"c": 2}}', "from_format": "json"}
        )
        assert response.status_code == 200
        data = json.loads(response.data)
        assert data['success'] is True
        assert data['property'] == "a = 1\n\nb\n{\n    c = 2\n}\n"
        assert data['detected_format'] == 'json'

    def test_convert_yaml_content_auto(self, client):
        """Test YAML content with format detection"""
        response = client.post(
            '/api/convert',
            json={"content": "node:\n  url: box\n"}
        )
        assert response.status_code == 200
        data = json.loads(response.data)
        assert data['property'] == "node\n{\n    url = box\n}\n"
        assert data['detected_format'] == 'yaml'

    def test_convert_with_options(self, client):
        """Test sort_keys and name_key options"""
        response = client.post(
            '/api/convert',
            json={
                "content": '{"z": 1, "items": [{"id": "first"}]}',
                "sort_keys": True,
                "name_key": "id"
            }
        )
        assert response.status_code == 200
        data = json.loads(response.data)
        assert data['property'].startswith("items\n{\n    first\n")
        assert data['property'].endswith("\nz = 1\n")

    def test_convert_file_upload(self, client):
        """Test conversion with file upload"""
        json_string = json.dumps({"b": 1, "a": 2})
        data = {
            'file': (io.BytesIO(json_string.encode('utf-8')), 'test.json'),
            'sort_keys': 'true'
        }
        response = client.post(
            '/api/convert',
            data=data,
            content_type='multipart/form-data'
        )
        assert response.status_code == 200
        data = json.loads(response.data)
        assert data['property'] == "a = 2\nb = 1\n"

    def test_convert_file_upload_empty_filename(self, client):
        """Test file upload with empty filename"""
        data = {
            'file': (io.BytesIO(b''), '')
        }
        response = client.post(
            '/api/convert',
            data=data,
            content_type='multipart/form-data'
        )
        assert response.status_code == 400

    def test_convert_no_data(self, client):
        """Test request without a body"""
        response = client.post('/api/convert', json={})
        assert response.status_code == 400
        assert 'error' in json.loads(response.data)

    def test_convert_empty_content(self, client):
        """Test request with blank content"""
        response = client.post('/api/convert', json={"content": "   "})
        assert response.status_code == 400
        assert json.loads(response.data)['error'] == 'No content provided'

    def test_convert_invalid_format(self, client):
        """Test an unsupported source format"""
        response = client.post('/api/convert', json={"content": "{}", "from_format": "csv"})
        assert response.status_code == 400
        assert 'Invalid format' in json.loads(response.data)['error']

    def test_convert_malformed_json(self, client):
        """Test content that fails to parse"""
        response = client.post('/api/convert', json={"content": '{"a": [1,', "from_format": "json"})
        assert response.status_code == 400
        assert 'line 1' in json.loads(response.data)['error']

    def test_convert_null_format_defaults_to_auto(self, client):
        """A null from_format falls back to detection"""
        response = client.post(
            '/api/convert',
            json={"content": '{"a": 1}', "from_format": None, "name_key": None}
        )
        assert response.status_code == 200
        data = json.loads(response.data)
        assert data['property'] == "a = 1\n"

    @pytest.mark.parametrize("payload", [
        {"content": 42},
        {"content": {"a": 1}},
        {"content": '{"a": 1}', "from_format": 3},
        {"content": '{"a": 1}', "name_key": ["id"]},
    ])
    def test_convert_wrong_option_types(self, client, payload):
        """Non-string content or options are rejected as bad requests"""
        response = client.post('/api/convert', json=payload)
        assert response.status_code == 400
        assert 'must be a string' in json.loads(response.data)['error']

    def test_convert_non_object_body(self, client):
        """Test a JSON body that is not an object"""
        response = client.post('/api/convert', json=["content"])
        assert response.status_code == 400
        assert json.loads(response.data)['error'] == 'No data provided'


class TestHealthEndpoint:
    """Test the /api/health endpoint"""

    def test_health_check(self, client):
        """Test health check returns ok"""
        response = client.get('/api/health')
        assert response.status_code == 200
        data = json.loads(response.data)
        assert data['status'] == 'ok'
