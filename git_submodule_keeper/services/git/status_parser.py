"""Parsing of `git status --porcelain=v2 -z` output."""

from typing import Iterable, List

from git_submodule_keeper.exceptions import StatusParseError
from git_submodule_keeper.models.status import ChangeEntry

# Number of space separated fields before the path, per record type
_FIELD_COUNTS = {
    "1": 8,  # 1 XY sub mH mI mW hH hI path
    "2": 9,  # 2 XY sub mH mI mW hH hI Xscore path
    "u": 10,  # u XY sub m1 m2 m3 mW h1 h2 h3 path
}


def parse_name_list(output: str) -> List[str]:
    """Split NUL-delimited `--name-only -z` output into paths."""
    return [name for name in output.split("\0") if name]


def _split_record(record: str) -> List[str]:
    fields = record.split(" ", _FIELD_COUNTS[record[0]])
    if len(fields) != _FIELD_COUNTS[record[0]] + 1 or len(fields[1]) != 2:
        raise StatusParseError(record)
    return fields


def parse_porcelain_v2(output: str, stale_paths: Iterable[str] = ()) -> List[ChangeEntry]:
    """
    Parse porcelain v2 status output into change entries.

    Args:
        output: Output of `git status --porcelain=v2 -z`
        stale_paths: Paths reported by `git diff-files` before the status ran.
            Those missing from the status output only had stale stat data and
            are returned as modifications flagged needs_update.

    Returns:
        Change entries in output order, followed by needs_update entries

    Raises:
        StatusParseError: If a record is not in the expected format
    """
    entries: List[ChangeEntry] = []
    records = output.split("\0")
    i = 0
    while i < len(records):
        record = records[i]
        i += 1
        if not record or record.startswith("#"):
            continue

        kind = record[0]
        if kind in ("?", "!"):
            if len(record) < 3 or record[1] != " ":
                raise StatusParseError(record)
            if kind == "?":
                entries.append(ChangeEntry.untracked(record[2:]))
            continue

        if kind not in _FIELD_COUNTS:
            raise StatusParseError(record)

        fields = _split_record(record)
        xy = fields[1]
        path = fields[-1]

        if kind == "1":
            entries.append(ChangeEntry.modification(path, intent_to_add=xy == ".A"))
        elif kind == "u":
            entries.append(ChangeEntry.modification(path, conflict=True))
        else:
            # Rename/copy records carry the original path in the next record
            if i >= len(records) or not records[i]:
                raise StatusParseError(record)
            source = records[i]
            i += 1
            entries.append(ChangeEntry.rewrite(source, path, copy=fields[8].startswith("C")))

    seen = {entry.path for entry in entries}
    seen.update(entry.source for entry in entries if entry.source)
    for path in stale_paths:
        if path not in seen:
            seen.add(path)
            entries.append(ChangeEntry.modification(path, needs_update=True))

    return entries
