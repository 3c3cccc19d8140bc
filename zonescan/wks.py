"""Protocol and service scanners for Well-Known Services (WKS) records.

Only TCP and UDP are known by name; other protocols are given by number.
A small set of well-known services is known by name; others by port.
"""

from __future__ import annotations

_PROTOCOLS = {"tcp": 6, "udp": 17}

_SERVICES = {
    "snmptrap": 162,
    "pop3s": 995,
    "pop3": 110,
    "ldaps": 636,
    "domain": 53,
    "nntps": 563,
    "nntp": 119,
    "ftps-data": 989,
    "imaps": 993,
    "imap": 143,
    "time": 37,
    "kerberos": 88,
    "ftp": 21,
    "ntp": 123,
    "whoispp": 63,
    "ssh": 22,
    "nicname": 43,
    "ptp-general": 320,
    "domain-s": 853,
    "ftp-data": 20,
    "ftps": 990,
    "snmp": 161,
    "bgmp": 264,
    "echo": 7,
    "nnsp": 433,
    "submission": 587,
    "submissions": 465,
    "ptp-event": 319,
    "npp": 92,
    "https": 443,
    "http": 80,
    "telnet": 23,
    "tcpmux": 1,
    "lmtp": 24,
    "smtp": 25,
}


def _scan_unsigned(text: str, maximum: int) -> int:
    if not text or not all("0" <= char <= "9" for char in text):
        raise ValueError(f"invalid number {text!r}")
    value = int(text)
    if value > maximum:
        raise ValueError(f"number out of range {text!r}")
    return value


def _ascii_lower(text: str) -> str | None:
    return text.lower() if text.isascii() else None


def scan_protocol(name: str) -> int:
    """Return the protocol number for ``tcp``, ``udp`` or a number up to 255."""
    protocol = _PROTOCOLS.get(_ascii_lower(name) or "")
    if protocol is not None:
        return protocol
    return _scan_unsigned(name, 0xFF)


def scan_service(name: str, protocol: int) -> int:
    """Return the port of a well-known service name or a number up to 65535.

    All supported services map to both TCP and UDP, so ``protocol`` does
    not affect the result.
    """
    del protocol
    if name and "0" <= name[0] <= "9":
        return _scan_unsigned(name, 0xFFFF)
    port = _SERVICES.get(_ascii_lower(name) or "")
    if port is None:
        raise ValueError(f"unknown service {name!r}")
    return port