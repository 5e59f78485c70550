"""Network helpers used when starting the Food Tracker server."""
import socket
from typing import List


def get_local_ip() -> str:
    """Return a non-loopback local IP address if possible, otherwise '127.0.0.1'.

    Connecting a UDP socket only asks the OS which interface it would route
    through; no data is sent.
    """
    s = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        s.connect(("8.8.8.8", 80))
        ip = str(s.getsockname()[0])
    except OSError:
        ip = "127.0.0.1"
    finally:
        s.close()
    return ip


def server_urls(host: str, port: int) -> List[str]:
    """URLs a user can open for a server bound to host:port (localhost first, then LAN)."""
    urls = [f"http://localhost:{port}"]
    if host in ("0.0.0.0", "::"):
        local_ip = get_local_ip()
        if local_ip not in ("127.0.0.1", "localhost"):
            urls.append(f"http://{local_ip}:{port}")
    elif host not in ("127.0.0.1", "localhost"):
        urls.append(f"http://{host}:{port}")
    return urls
