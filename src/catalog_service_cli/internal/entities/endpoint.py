"""Resolution of the management service endpoint.

Unless told otherwise, the management service of a cluster is reachable
at a well-known DNS name derived from the cluster name.
"""

MANAGE_SERVICE_NAME: str = "openmanage-manageserver"
MANAGE_HTTP_SERVER_PORT: int = 27040


def default_domain_name(cluster: str) -> str:
    """The default DNS domain of the given cluster."""
    return f"{cluster}-openmanage.com"


def default_manage_service_url(cluster: str, tls_enabled: bool) -> str:
    """The default URL of the management service of the given cluster."""
    scheme = "https" if tls_enabled else "http"
    return (
        f"{scheme}://{MANAGE_SERVICE_NAME}.{default_domain_name(cluster)}"
        f":{MANAGE_HTTP_SERVER_PORT}/"
    )


def format_manage_service_url(url: str, tls_enabled: bool) -> str:
    """Set the scheme in use on a URL, and ensure a trailing slash.

    A scheme given in the URL is replaced when it disagrees with
    whether TLS is enabled.
    """
    for scheme in ("http://", "https://"):
        if url.startswith(scheme):
            url = url.removeprefix(scheme)
            break
    url = f"{'https' if tls_enabled else 'http'}://{url}"
    if not url.endswith("/"):
        url += "/"
    return url


def resolve_manage_service_url(server_url: str, cluster: str, tls_enabled: bool) -> str:
    """Resolve the URL to use, preferring an explicitly given one."""
    if server_url:
        return format_manage_service_url(server_url, tls_enabled)
    return default_manage_service_url(cluster, tls_enabled)
