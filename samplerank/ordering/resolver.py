"""Dotted-path lookup into entity records."""

from typing import Any, Mapping, Sequence


class _Absent:
    """Marker for a value that could not be found."""

    _instance = None

    def __new__(cls) -> "_Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"

    def __reduce__(self):
        return (_Absent, ())


ABSENT = _Absent()


def is_absent(value: Any) -> bool:
    return value is ABSENT


def resolve(entity: Any, data_path: str) -> Any:
    """
    Walk ``entity`` along ``data_path`` and return the value found there.

    Mappings are walked by key, lists and tuples by integer index
    (``"tests.0.score"``). A missing key, an empty segment, an index out of
    range, a value that cannot be walked into, or a ``None`` at the end all
    give ``ABSENT``. This function never raises.

    Args:
        entity: Record to read from
        data_path: Dotted field path, e.g. ``"quality.score"``

    Returns:
        The value, or ``ABSENT``
    """
    if not isinstance(data_path, str) or not data_path.strip():
        return ABSENT

    current = entity
    for segment in data_path.split("."):
        segment = segment.strip()
        if not segment:
            return ABSENT

        if isinstance(current, Mapping):
            if segment not in current:
                return ABSENT
            current = current[segment]
        elif isinstance(current, Sequence) and not isinstance(current, (str, bytes)):
            try:
                index = int(segment)
            except ValueError:
                return ABSENT
            if index < 0 or index >= len(current):
                return ABSENT
            current = current[index]
        else:
            return ABSENT

    if current is None:
        return ABSENT
    return current
