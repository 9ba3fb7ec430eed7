"""Input/output helpers for the fastwild CLI."""
import csv
import json
import os
from collections.abc import Iterable
from typing import TextIO

from .engine.models import Case

_TRUE = {"true", "1", "yes"}
_FALSE = {"false", "0", "no"}


def _parse_expected(value: object, where: str) -> bool:
    if isinstance(value, bool):
        return value
    key = str(value).strip().lower()
    if key in _TRUE:
        return True
    if key in _FALSE:
        return False
    raise ValueError(f"{where}: expected must be true or false, got {value!r}")


def _case_from_obj(obj: object, where: str) -> Case:
    if not isinstance(obj, dict):
        raise ValueError(f"{where}: expected an object with subject, pattern and expected")
    try:
        subject = obj["subject"]
        pattern = obj["pattern"]
        expected = obj["expected"]
    except KeyError as exc:
        raise ValueError(f"{where}: missing key {exc.args[0]!r}") from exc
    return Case(str(subject), str(pattern), _parse_expected(expected, where))


def _read_jsonl(handle: TextIO) -> list[Case]:
    data: list[Case] = []
    for lineno, raw in enumerate(handle, start=1):
        raw = raw.strip()
        if not raw:
            continue
        data.append(_case_from_obj(json.loads(raw), f"line {lineno}"))
    return data


def _read_json(handle: TextIO) -> list[Case]:
    payload = json.load(handle)
    if isinstance(payload, dict) and "cases" in payload:
        payload = payload["cases"]
    if not isinstance(payload, list):
        raise ValueError("cases file must contain a list or an object with a 'cases' key")
    return [_case_from_obj(obj, f"case {index}") for index, obj in enumerate(payload)]


def _read_csv(handle: TextIO) -> list[Case]:
    reader = csv.DictReader(handle)
    fieldnames = reader.fieldnames or []
    missing = [name for name in ("subject", "pattern", "expected") if name not in fieldnames]
    if missing:
        raise ValueError(f"CSV missing required columns: {', '.join(missing)}")
    # Header is line 1.
    return [_case_from_obj(row, f"line {lineno}") for lineno, row in enumerate(reader, start=2)]


def _read_tsv(handle: TextIO) -> list[Case]:
    data: list[Case] = []
    for lineno, raw in enumerate(handle, start=1):
        line = raw.rstrip("\n\r")
        if not line.strip():
            continue
        parts = line.split("\t")
        if len(parts) != 3:
            raise ValueError(f"line {lineno}: expected subject<TAB>pattern<TAB>expected")
        subject, pattern, expected = parts
        data.append(Case(subject, pattern, _parse_expected(expected, f"line {lineno}")))
    return data


def _open_path(path: str) -> Iterable[Case]:
    _, ext = os.path.splitext(path)
    ext = ext.lower()
    if ext == ".jsonl":
        with open(path, encoding="utf-8") as handle:
            yield from _read_jsonl(handle)
    elif ext == ".json":
        with open(path, encoding="utf-8") as handle:
            yield from _read_json(handle)
    elif ext == ".csv":
        with open(path, encoding="utf-8", newline="") as handle:
            yield from _read_csv(handle)
    else:
        with open(path, encoding="utf-8") as handle:
            yield from _read_tsv(handle)


def read_cases(path: str) -> list[Case]:
    return list(_open_path(path))


def write_json(obj: object, path: str) -> None:
    if path == "-":
        json.dump(obj, os.sys.stdout, indent=2, sort_keys=True, ensure_ascii=False)
        os.sys.stdout.write("\n")
        os.sys.stdout.flush()
        return
    with open(path, "w", encoding="utf-8") as handle:
        json.dump(obj, handle, indent=2, sort_keys=True, ensure_ascii=False)
        handle.write("\n")


def write_text(text: str, path: str) -> None:
    if path == "-":
        os.sys.stdout.write(text)
        if not text.endswith("\n"):
            os.sys.stdout.write("\n")
        os.sys.stdout.flush()
        return
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(text)
