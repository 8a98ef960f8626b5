from __future__ import annotations

import logging
from typing import Optional, Protocol

from .history import RunHistory
from .results import CipherRun
from .utils import normalize_az

logger = logging.getLogger(__name__)


class CipherPlugin(Protocol):
    name: str

    def encrypt(self, plaintext: str, key: str) -> str:
        ...

    def decrypt(self, ciphertext: str, key: str) -> str:
        ...

    def fingerprint(self) -> dict:
        ...


_PLUGINS: dict[str, CipherPlugin] = {}


def register_plugin(plugin: CipherPlugin) -> None:
    key = plugin.name.lower().strip()
    if not key:
        raise ValueError("Plugin must have a non-empty name.")
    _PLUGINS[key] = plugin
    logger.debug("Registered cipher plugin %r", key)


def list_plugins() -> list[str]:
    return sorted(_PLUGINS.keys())


def get_plugin(cipher_name: str) -> CipherPlugin:
    name = cipher_name.lower().strip()
    if name not in _PLUGINS:
        raise ValueError(f"Unknown cipher '{cipher_name}'. Available: {', '.join(list_plugins())}")
    return _PLUGINS[name]


def _run(
    mode: str,
    cipher_name: str,
    text: str,
    key: Optional[str],
    history: Optional[RunHistory],
) -> str:
    if key is None:
        raise ValueError(f"This {mode} operation requires --key.")
    plugin = get_plugin(cipher_name)

    if mode == "encrypt":
        out = plugin.encrypt(text, key)
    else:
        out = plugin.decrypt(text, key)

    # Only successful runs reach the history
    if history is not None:
        history.push(CipherRun.create(plugin.name, mode, text, out, key))
    logger.debug("%s %s: %d -> %d letters", plugin.name, mode, len(normalize_az(text)), len(out))
    return out


def encrypt_known(
    cipher_name: str,
    plaintext: str,
    key: Optional[str],
    *,
    history: Optional[RunHistory] = None,
) -> str:
    return _run("encrypt", cipher_name, plaintext, key, history)


def decrypt_known(
    cipher_name: str,
    ciphertext: str,
    key: Optional[str],
    *,
    history: Optional[RunHistory] = None,
) -> str:
    return _run("decrypt", cipher_name, ciphertext, key, history)
