import socket

FALLBACK_HOSTS = (
    ("1.1.1.1", 53),         # Cloudflare DNS
    ("8.8.8.8", 53),         # Google DNS
    ("208.67.222.222", 53),  # OpenDNS
    ("9.9.9.9", 53),         # Quad9
)


def check_host_reachable(host: str, port: int = 443, timeout: float = 2.0) -> bool:
    """
    Check whether a TCP connection to host:port can be opened.

    Args:
        host: Hostname or IP address
        port: TCP port
        timeout: Connection timeout in seconds

    Returns:
        True if the connection succeeded, False otherwise
    """
    try:
        connection = socket.create_connection((host, port), timeout=timeout)
    except OSError:
        return False
    connection.close()
    return True


def check_internet_connectivity(timeout: float = 2.0) -> bool:
    """
    Check if the system has internet connectivity by attempting to connect
    to a list of reliable public DNS servers, stopping at the first success.

    Args:
        timeout: Connection timeout in seconds

    Returns:
        True if internet connection detected, False otherwise
    """
    for host, port in FALLBACK_HOSTS:
        if check_host_reachable(host, port, timeout=timeout):
            return True
    return False
