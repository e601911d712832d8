"""
Club Studio Kernel — Override Store

The store is a plain dict: {element_id: {field: scalar}}. It lives inside the
theme configuration under "componentOverrides".

Every mutation returns a NEW top-level dict (and a new entry dict for the id
it touches). Inputs are never modified, so a reader holding the previous map
never observes a torn write and identity comparison detects changes.

  read(store, id, key)        → value | None   (no defaults, ever)
  write(store, id, key, val)  → new store      (create or shallow merge)
  reset(store, id)            → new store      (drop the whole entry)
  apply(store, id, command)   → StoreResult    (Update | Reset, never throws)
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

from studio.kernel.types import is_scalar, is_valid_element_id

logger = logging.getLogger(__name__)

OverrideStore = dict[str, dict[str, Any]]


def empty_store() -> OverrideStore:
    return {}


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Update:
    """Set one override field. A value of None clears the field."""

    key: str
    value: Any


@dataclass(frozen=True)
class Reset:
    """Clear every override for the element."""


Command = Update | Reset


class StoreResult:
    """
    Result of applying one command to a store.
    Never throws — always returns one of these.
    """

    __slots__ = ("store", "accepted", "reason")

    def __init__(self, store: OverrideStore, accepted: bool, reason: str | None = None) -> None:
        self.store = store
        self.accepted = accepted
        self.reason = reason

    def __repr__(self) -> str:  # pragma: no cover
        if self.accepted:
            return "StoreResult(accepted=True)"
        return f"StoreResult(accepted=False, reason={self.reason!r})"


def _reject(store: OverrideStore, reason: str) -> StoreResult:
    return StoreResult(store=store, accepted=False, reason=reason)


def _ok(store: OverrideStore) -> StoreResult:
    return StoreResult(store=store, accepted=True)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def read(store: OverrideStore | None, element_id: str, key: str) -> Any:
    """Current override for (id, key), or None. Callers supply the default."""
    if not store:
        return None
    entry = store.get(element_id)
    if entry is None:
        return None
    return entry.get(key)


def overrides_for(store: OverrideStore | None, element_id: str) -> dict[str, Any]:
    """The entry for an id, or an empty dict. Treat the result as read-only."""
    if not store:
        return {}
    return store.get(element_id) or {}


def write(store: OverrideStore | None, element_id: str, key: str, value: Any) -> OverrideStore:
    """
    Shallow-merge {key: value} into the entry for element_id.
    None removes the key; an entry left empty is dropped.
    """
    new_store = dict(store or {})
    entry = dict(new_store.get(element_id) or {})
    if value is None:
        entry.pop(key, None)
    else:
        entry[key] = value
    if entry:
        new_store[element_id] = entry
    else:
        new_store.pop(element_id, None)
    return new_store


def reset(store: OverrideStore | None, element_id: str) -> OverrideStore:
    """Drop the entry for element_id. No-op when absent."""
    new_store = dict(store or {})
    new_store.pop(element_id, None)
    return new_store


def apply(store: OverrideStore | None, element_id: str, command: Command) -> StoreResult:
    """
    Apply one command for one element.
    Returns StoreResult with the new store + accepted flag.
    """
    current = store or {}
    if not isinstance(element_id, str) or not element_id:
        return _reject(current, "MISSING_ID: command requires an element id")
    if not is_valid_element_id(element_id):
        return _reject(current, f"INVALID_ID: '{element_id}' must be snake_case, max 64 chars")

    handler = _HANDLERS.get(type(command))
    if handler is None:
        return _reject(current, f"UNKNOWN_COMMAND: {type(command).__name__}")
    return handler(current, element_id, command)


def apply_all(store: OverrideStore | None, commands: list[tuple[str, Command]]) -> OverrideStore:
    """
    Apply a sequence of (element_id, command) pairs.
    Rejections are skipped. Returns the final store.
    """
    current = store or {}
    for element_id, command in commands:
        result = apply(current, element_id, command)
        if result.accepted:
            current = result.store
    return current


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------


def _handle_update(store: OverrideStore, element_id: str, command: Update) -> StoreResult:
    if not command.key:
        return _reject(store, "MISSING_KEY: update requires a property key")
    if command.value is not None and not is_scalar(command.value):
        return _reject(store, f"INVALID_VALUE: '{command.key}' must be a string, number or boolean")
    return _ok(write(store, element_id, command.key, command.value))


def _handle_reset(store: OverrideStore, element_id: str, command: Reset) -> StoreResult:
    return _ok(reset(store, element_id))


_HANDLERS: dict[type, Any] = {
    Update: _handle_update,
    Reset: _handle_reset,
}


# ---------------------------------------------------------------------------
# JSON
# ---------------------------------------------------------------------------


def dumps_store(store: OverrideStore) -> str:
    return json.dumps(store, sort_keys=True, ensure_ascii=False)


def loads_store(text: str) -> OverrideStore:
    """Parse a persisted store. Non-scalar fields and malformed entries are dropped."""
    raw = json.loads(text)
    return normalize_store(raw)


def normalize_store(raw: Any) -> OverrideStore:
    if not isinstance(raw, dict):
        logger.warning("overrides: expected an object, got %s", type(raw).__name__)
        return {}

    store: OverrideStore = {}
    for element_id, entry in raw.items():
        if not isinstance(entry, dict):
            logger.warning("overrides: dropping malformed entry for %s", element_id)
            continue
        clean: dict[str, Any] = {}
        for key, value in entry.items():
            if is_scalar(value):
                clean[key] = value
            elif value is not None:
                logger.warning("overrides: dropping non-scalar %s.%s", element_id, key)
        store[element_id] = clean
    return store
