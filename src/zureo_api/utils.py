import os
import socket

from dotenv import load_dotenv

load_dotenv()


def get_env(key, default=None):
    value = os.getenv(key)
    if value is None or value.strip() == "":
        return default
    return value.strip()


def get_env_bool(key, default=False):
    value = get_env(key)
    if value is None:
        return default
    return value.lower() in ("1", "true", "yes", "on")


def local_ip():
    """First non-loopback IPv4 address of this host, or 'localhost'."""
    try:
        addresses = socket.getaddrinfo(socket.gethostname(), None, socket.AF_INET)
    except OSError:
        return "localhost"
    for *_, sockaddr in addresses:
        ip = sockaddr[0]
        if not ip.startswith("127."):
            return ip
    return "localhost"
