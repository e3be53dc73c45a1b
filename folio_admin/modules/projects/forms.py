"""
Project form state.

The form works on a flat dict (one cover image, lists for features and
tech stack); the API expects `images` as a list and no blank list entries.
"""

PROJECT_TYPES = ('web', 'mobile')
PROJECT_STATUSES = ('draft', 'published')
ARRAY_FIELDS = ('features', 'techStack')
TEXT_FIELDS = ('title', 'description', 'videoUrl', 'downloadUrl', 'liveUrl')

_HTML_ENTITIES = [
    ('&#x2F;', '/'),
    ('&amp;', '&'),
    ('&quot;', '"'),
    ('&#x27;', "'"),
    ('&lt;', '<'),
    ('&gt;', '>'),
]


def decode_html_entities(value):
    """Undo the entity escaping the API applies to stored URLs"""
    if not value:
        return value
    for entity, char in _HTML_ENTITIES:
        value = value.replace(entity, char)
    return value


def empty_form():
    return {
        'title': '',
        'type': 'web',
        'description': '',
        'features': [''],
        'techStack': [''],
        'image': '',
        'videoUrl': '',
        'downloadUrl': '',
        'liveUrl': '',
        'status': 'draft',
    }


def form_from_project(project):
    """Prefill the form from a project record returned by the API"""
    form = empty_form()
    if not project:
        return form

    images = project.get('images') or []
    form.update({
        'title': project.get('title') or '',
        'type': project.get('type') or 'web',
        'description': project.get('description') or '',
        'features': list(project.get('features') or []) or [''],
        'techStack': list(project.get('techStack') or []) or [''],
        'image': decode_html_entities(images[0]) if images else '',
        'videoUrl': decode_html_entities(project.get('videoUrl') or ''),
        'downloadUrl': project.get('downloadUrl') or '',
        'liveUrl': project.get('liveUrl') or '',
        'status': project.get('status') or 'draft',
    })
    return form


def form_from_request(form_data):
    """Read the submitted form (a werkzeug MultiDict) back into form state"""
    form = empty_form()
    for field in TEXT_FIELDS:
        form[field] = form_data.get(field, '').strip()
    form['image'] = form_data.get('image', '').strip()
    form['type'] = form_data.get('type', 'web')
    form['status'] = form_data.get('status', 'draft')
    for field in ARRAY_FIELDS:
        form[field] = form_data.getlist(field) or ['']
    return form


def validate_form(form):
    """Return a list of error messages; empty when the form can be submitted"""
    errors = []
    if not form['title'].strip():
        errors.append('Title is required')
    if not form['description'].strip():
        errors.append('Description is required')
    if form['type'] not in PROJECT_TYPES:
        errors.append('Type must be web or mobile')
    if form['status'] not in PROJECT_STATUSES:
        errors.append('Status must be draft or published')
    return errors


def clean_payload(form):
    """Strip blank list entries and shape the form into the API payload"""
    payload = {field: form[field] for field in TEXT_FIELDS}
    payload['type'] = form['type']
    payload['status'] = form['status']
    for field in ARRAY_FIELDS:
        payload[field] = [item.strip() for item in form[field] if item.strip()]
    payload['images'] = [form['image']] if form['image'] else []
    return payload
