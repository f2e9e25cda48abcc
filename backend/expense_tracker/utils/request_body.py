"""Request body helpers."""
from flask import request


def get_payload():
    """JSON body, falling back to form fields. Malformed JSON reads as empty."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    if request.form:
        return request.form.to_dict()
    return {}
