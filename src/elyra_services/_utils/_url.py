from urllib.parse import urlsplit, urlunsplit


def url_join(base: str, *parts: str) -> str:
    """Join a base URL and relative path segments.

    Exactly one ``/`` separates each segment. A leading ``/`` on a relative
    part does not discard the path of the base URL, so
    ``url_join("http://host/lab/", "/elyra/runtimes")`` keeps ``/lab``.
    The trailing slash of the last segment is preserved.
    """
    scheme, netloc, base_path, query, fragment = urlsplit(base)

    segments = [base_path] + [part for part in parts if part]
    path = ""
    for segment in segments:
        if not path:
            path = segment
            continue
        path = f"{path.rstrip('/')}/{segment.lstrip('/')}"

    if netloc and not path.startswith("/"):
        path = f"/{path}"

    return urlunsplit((scheme, netloc, path, query, fragment))
