"""Network helpers used when the service starts.

The startup banner in `menubot.main` needs the address other devices on the LAN
can use to reach the server; that lookup lives here so the entry point stays
small.
"""
import socket
from typing import List


def get_local_ip() -> str:
    """Return the LAN address of this machine, or '127.0.0.1' when offline.

    Connecting a UDP socket sends nothing; it only makes the OS choose the
    outgoing interface so its address can be read back.
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


def serving_urls(port: int, local_ip: str) -> List[str]:
    """URLs worth printing at startup: localhost first, then the LAN one if any."""
    urls = [f"http://localhost:{port}"]
    if local_ip not in ("127.0.0.1", "localhost"):
        urls.append(f"http://{local_ip}:{port}")
    return urls
