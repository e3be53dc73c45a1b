"""
Upload Routes
=============
"""

from flask import jsonify, request

from . import uploads_bp
from ..auth.utils import login_required
from ...core.api_client import get_api
from ...core.config import get_config_value
from ...core.logging_service import logger


def extract_url(body):
    """The API answers with {url}, {data: {url}}, {secure_url} or a bare string"""
    if isinstance(body, str):
        return body.strip() or None
    if not isinstance(body, dict):
        return None
    data = body.get('data') if isinstance(body.get('data'), dict) else {}
    return body.get('url') or data.get('url') or body.get('secure_url') or None


def file_size(file_storage):
    stream = file_storage.stream
    position = stream.tell()
    stream.seek(0, 2)
    size = stream.tell()
    stream.seek(position)
    return size


@uploads_bp.route('/image', methods=['POST'])
@login_required
def upload_image():
    """Upload a cover image through the API"""
    if 'image' not in request.files:
        return jsonify({'error': 'No image file provided'}), 400

    file = request.files['image']
    if file.filename == '':
        return jsonify({'error': 'No file selected'}), 400

    if not (file.mimetype or '').startswith('image/'):
        return jsonify({'error': 'Please upload an image file'}), 400

    max_size = int(get_config_value('MAX_IMAGE_SIZE', 5 * 1024 * 1024))
    if file_size(file) > max_size:
        return jsonify({'error': f'Image size should be less than {max_size // (1024 * 1024)}MB'}), 400

    body = get_api().upload('/upload/image', file, field='image', notify=False)

    url = extract_url(body)
    if not url:
        logger.error('uploads', 'Upload response did not include a URL', {'body': str(body)[:500]})
        return jsonify({'error': 'Upload failed: No URL returned'}), 502

    logger.info('uploads', f"Uploaded image {file.filename}", {'url': url})
    return jsonify({'success': True, 'url': url, 'message': 'Image uploaded successfully'})
