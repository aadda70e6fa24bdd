"""Client IP address dependency for FastAPI."""

from fastapi import Request

__all__ = ["client_ip_dependency"]

_DEFAULT_CLIENT_IP = "127.0.0.1"


def _first_entry(header: str) -> str | None:
    entry = header.split(",")[0].strip()
    return entry or None


async def client_ip_dependency(request: Request) -> str:
    """Determine the IP address of the client.

    Proxy headers are consulted in order: the first ``X-Forwarded-For``
    entry, then ``X-Real-IP``, then the first ``X-Vercel-Forwarded-For``
    entry. Without any of them, the address of the connecting peer is used.
    """
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for and (ip := _first_entry(forwarded_for)):
        return ip
    real_ip = request.headers.get("X-Real-IP")
    if real_ip and real_ip.strip():
        return real_ip.strip()
    vercel = request.headers.get("X-Vercel-Forwarded-For")
    if vercel and (ip := _first_entry(vercel)):
        return ip
    if request.client and request.client.host:
        return request.client.host
    return _DEFAULT_CLIENT_IP
