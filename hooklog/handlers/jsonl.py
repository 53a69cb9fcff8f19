"""JSON-lines handler."""

import json
from typing import Any

from hooklog.record import Record

from .base import Context, StreamHandler


CLASH_PREFIX = "attr."


def _group_key(target: dict[str, Any], group: str, group_ids: set[int]) -> str:
    """Key for a group object, skipping keys that hold anything else."""
    key = group
    while key in target and id(target[key]) not in group_ids:
        key = CLASH_PREFIX + key
    return key


def _attr_key(
    target: dict[str, Any], key: str, reserved: frozenset[str], group_ids: set[int]
) -> str:
    """Key for an attribute, skipping fixed keys and group objects."""
    while key in reserved or (key in target and id(target[key]) in group_ids):
        key = CLASH_PREFIX + key
    return key


class JSONHandler(StreamHandler):
    """Writes one JSON object per record.

    Guaranteed keys are ``time`` (unless disabled), ``level`` and ``msg``.
    Attributes bound under groups are nested as objects. An attribute named
    like a fixed key or an existing group, and a group named like an
    existing attribute, are written under an ``attr.`` prefixed key instead.
    """

    def format(self, ctx: Context, record: Record) -> str:
        entry: dict[str, Any] = {}
        if self._add_timestamp:
            entry["time"] = record.time.isoformat()
        entry["level"] = record.level_name
        entry["msg"] = record.message

        fixed = frozenset(entry)
        group_ids: set[int] = set()
        for groups, attr in self.collect_attrs(ctx, record):
            target = entry
            for group in groups:
                key = _group_key(target, group, group_ids)
                if key not in target:
                    target[key] = {}
                    group_ids.add(id(target[key]))
                target = target[key]
            reserved = fixed if target is entry else frozenset()
            target[_attr_key(target, attr.key, reserved, group_ids)] = attr.value

        return json.dumps(entry, default=str)
