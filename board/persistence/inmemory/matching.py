"""Evaluation of MongoDB query and aggregation documents in memory.

Covers the operators the board issues: equality, ``$in``, ``$nin``,
``$all``, ``$regex``, ordering comparisons, ``$exists``, ``$and``/``$or``,
and the ``$match``, ``$group`` (``$sum``), ``$unwind``, ``$sort``, ``$skip``
and ``$limit`` stages. Anything else raises ``NotImplementedError``.
"""

import re
from copy import deepcopy
from typing import Any, Iterable

_MISSING = object()

_REGEX_FLAGS = {"i": re.IGNORECASE, "m": re.MULTILINE, "s": re.DOTALL, "x": re.VERBOSE}


def _get(document: Any, path: str) -> Any:
    value = document
    for part in path.split("."):
        if isinstance(value, dict) and part in value:
            value = value[part]
        else:
            return _MISSING
    return value


def _candidates(value: Any) -> list[Any]:
    # Array fields match when any element (or the array itself) matches
    if value is _MISSING:
        return [None]
    if isinstance(value, list):
        return [*value, value]
    return [value]


def _ordered(op: str, left: Any, right: Any) -> bool:
    if left is None or right is None:
        return False
    try:
        if op == "$lt":
            return left < right
        if op == "$lte":
            return left <= right
        if op == "$gt":
            return left > right
        return left >= right
    except TypeError:
        # Mongo never matches across incomparable types
        return False


def _compile(pattern: Any, options: str) -> re.Pattern:
    if isinstance(pattern, re.Pattern):
        return pattern
    flags = 0
    for option in options:
        flags |= _REGEX_FLAGS[option]
    return re.compile(pattern, flags)


def _apply_operator(value: Any, op: str, arg: Any, condition: dict[str, Any]) -> bool:
    candidates = _candidates(value)

    if op == "$eq":
        return any(c == arg for c in candidates)
    if op == "$ne":
        return not any(c == arg for c in candidates)
    if op == "$in":
        return any(c == a for c in candidates for a in arg)
    if op == "$nin":
        return not any(c == a for c in candidates for a in arg)
    if op == "$all":
        if value is _MISSING:
            return False
        present = value if isinstance(value, list) else [value]
        return bool(arg) and all(a in present for a in arg)
    if op == "$regex":
        pattern = _compile(arg, condition.get("$options", ""))
        return any(isinstance(c, str) and pattern.search(c) for c in candidates)
    if op in ("$lt", "$lte", "$gt", "$gte"):
        return any(_ordered(op, c, arg) for c in candidates if not isinstance(c, list))
    if op == "$exists":
        return (value is not _MISSING) == bool(arg)

    raise NotImplementedError(f"Unsupported query operator: {op}")


def _is_operator_document(condition: Any) -> bool:
    return (
        isinstance(condition, dict)
        and bool(condition)
        and all(key.startswith("$") for key in condition)
    )


def _match_condition(value: Any, condition: Any) -> bool:
    if _is_operator_document(condition):
        return all(
            _apply_operator(value, op, arg, condition)
            for op, arg in condition.items()
            if op != "$options"
        )
    if isinstance(condition, re.Pattern):
        return any(isinstance(c, str) and condition.search(c) for c in _candidates(value))
    return any(c == condition for c in _candidates(value))


def matches(document: dict[str, Any], query: dict[str, Any]) -> bool:
    """Whether ``document`` satisfies the query document ``query``."""
    for key, condition in query.items():
        if key == "$and":
            if not all(matches(document, q) for q in condition):
                return False
        elif key == "$or":
            if not any(matches(document, q) for q in condition):
                return False
        elif key.startswith("$"):
            raise NotImplementedError(f"Unsupported top-level operator: {key}")
        elif not _match_condition(_get(document, key), condition):
            return False
    return True


def sort_documents(
    documents: Iterable[dict[str, Any]], keys: list[tuple[str, int]]
) -> list[dict[str, Any]]:
    """Sort documents by ``(field, direction)`` pairs, missing values first."""
    result = list(documents)
    # Stable sorts applied from the least significant key
    for field, direction in reversed(keys):

        def sort_key(document: dict[str, Any], field: str = field) -> tuple:
            value = _get(document, field)
            if value is _MISSING or value is None:
                return (0,)
            return (1, value)

        result.sort(key=sort_key, reverse=direction < 0)
    return result


def _evaluate(row: dict[str, Any], expression: Any) -> Any:
    if isinstance(expression, str) and expression.startswith("$"):
        value = _get(row, expression[1:])
        return None if value is _MISSING else value
    return expression


def _group(rows: list[dict[str, Any]], spec: dict[str, Any]) -> list[dict[str, Any]]:
    accumulators = {name: acc for name, acc in spec.items() if name != "_id"}
    groups: dict[Any, dict[str, Any]] = {}

    for row in rows:
        key = _evaluate(row, spec["_id"])
        group = groups.setdefault(key, {"_id": key, **{name: 0 for name in accumulators}})

        for name, accumulator in accumulators.items():
            (operator, expression), = accumulator.items()
            if operator != "$sum":
                raise NotImplementedError(f"Unsupported accumulator: {operator}")
            value = _evaluate(row, expression)
            if isinstance(value, (int, float)) and not isinstance(value, bool):
                group[name] += value

    return list(groups.values())


def _unwind(rows: list[dict[str, Any]], spec: Any) -> list[dict[str, Any]]:
    path = spec if isinstance(spec, str) else spec["path"]
    field = path[1:]
    unwound = []
    for row in rows:
        value = _get(row, field)
        if value is _MISSING or value is None:
            continue
        for item in value if isinstance(value, list) else [value]:
            unwound.append({**row, field: item})
    return unwound


def run_pipeline(
    documents: Iterable[dict[str, Any]], pipeline: list[dict[str, Any]]
) -> list[dict[str, Any]]:
    """Run an aggregation pipeline over ``documents``."""
    rows = [deepcopy(document) for document in documents]

    for stage in pipeline:
        (name, spec), = stage.items()
        if name == "$match":
            rows = [row for row in rows if matches(row, spec)]
        elif name == "$group":
            rows = _group(rows, spec)
        elif name == "$unwind":
            rows = _unwind(rows, spec)
        elif name == "$sort":
            rows = sort_documents(rows, list(spec.items()))
        elif name == "$skip":
            rows = rows[spec:]
        elif name == "$limit":
            rows = rows[:spec]
        else:
            raise NotImplementedError(f"Unsupported pipeline stage: {name}")

    return rows
