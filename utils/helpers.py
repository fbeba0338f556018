# Utility functions
import json

JSON_HEADERS = {"Content-Type": "application/json"}


def format_response(data=None, status_code=200):
    """
    Formats a mock response as a (status, headers, body) tuple.
    """
    body = "" if data is None else json.dumps(data)
    return (status_code, dict(JSON_HEADERS), body)


def error_response(message, status_code):
    return format_response({"error": message}, status_code)


def parse_json_object(request):
    """
    Decodes the JSON body of a request into a dict.

    An empty body gives an empty dict. Malformed JSON, or JSON that is not an
    object, raises ValueError.
    """
    body = request.body
    if not body:
        return {}
    if isinstance(body, bytes):
        body = body.decode("utf-8")
    data = json.loads(body)
    if not isinstance(data, dict):
        raise ValueError("Request body must be a JSON object.")
    return data


if __name__ == "__main__":
    # Example usage
    print(format_response({"id": 1, "name": "Yogurt"}))
    print(error_response("Item with ID 9 not found.", 404))
