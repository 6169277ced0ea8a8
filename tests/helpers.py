def data_of(resp):
    """Unwrap the response envelope, failing loudly on errors."""
    body = resp.json()
    assert resp.status_code == 200, body
    return body["data"]
