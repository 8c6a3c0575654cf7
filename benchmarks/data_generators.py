"""
Test data generators for rewrite benchmarks.

Creates lenient JSON documents the way people hand-edit config files:
- Bare keys wherever the key is identifier-like
- Trailing commas after the last member of every container
- Line and block comments between members

Each generator returns bytes together with a strict twin of the same value,
so benchmarks can compare rewrite-then-decode against plain decoding.
"""

import json
import random
import string
from typing import Any

# Constants for random data generation
_INT_TYPE = 1
_FLOAT_TYPE = 2
_STRING_TYPE = 3
_BOOL_TYPE = 4
_NULL_TYPE = 5
_COMMENT_PROBABILITY = 0.3
_ESCAPE_PROBABILITY = 0.3

DATA_TYPES = [
    "small_object",
    "large_object",
    "mixed_array",
    "nested_structure",
    "string_heavy",
]


def generate_test_data(data_type: str) -> bytes:
    """Generates lenient JSON test data based on specified type."""
    return dump_lenient(generate_value(data_type)).encode("utf-8")


def generate_strict_data(data_type: str) -> bytes:
    """Generates strict JSON with the same shape as generate_test_data."""
    return json.dumps(generate_value(data_type), indent=2).encode("utf-8")


def generate_value(data_type: str) -> Any:
    """Generates the Python value behind a benchmark document."""
    generators = {
        "small_object": _generate_small_object,
        "large_object": _generate_large_object,
        "mixed_array": _generate_mixed_array,
        "nested_structure": _generate_nested_structure,
        "string_heavy": _generate_string_heavy,
    }

    if data_type not in generators:
        raise ValueError(f"Unknown data type: {data_type}")

    # Same seed per type so lenient and strict twins match
    random.seed(data_type)
    return generators[data_type]()


def dump_lenient(value: Any, level: int = 0) -> str:
    """Serializes a value as lenient JSON with comments and trailing commas."""
    pad = "  " * (level + 1)
    closing_pad = "  " * level

    if isinstance(value, dict):
        lines = ["{"]
        for key, item in value.items():
            lines.extend(_maybe_comment(pad))
            lines.append(
                f"{pad}{_dump_key(key)}: {dump_lenient(item, level + 1)},"
            )
        lines.append(f"{closing_pad}}}")
        return "\n".join(lines)

    if isinstance(value, list):
        lines = ["["]
        for item in value:
            lines.extend(_maybe_comment(pad))
            lines.append(f"{pad}{dump_lenient(item, level + 1)},")
        lines.append(f"{closing_pad}]")
        return "\n".join(lines)

    return json.dumps(value)


def _dump_key(key: str) -> str:
    """Writes identifier-like keys bare, everything else quoted."""
    if key.isidentifier():
        return key
    return json.dumps(key)


def _maybe_comment(pad: str) -> list[str]:
    """Returns zero or one comment line for the next member."""
    if random.random() >= _COMMENT_PROBABILITY:
        return []
    if random.random() < 0.5:
        return [f"{pad}// {_random_string(20)}"]
    return [f"{pad}/* {_random_string(12)}\n{pad}   {_random_string(12)} */"]


def _generate_small_object() -> dict[str, Any]:
    """Generates a small config-like object (< 1KB)."""
    return {
        "id": 12345,
        "name": "Alice Johnson",
        "email": "alice@example.com",
        "active": True,
        "balance": 1234.56,
        "homepage": "https://example.com/~alice",
        "metadata": {"created": "2024-01-15T10:30:00Z", "source": "api"},
    }


def _generate_large_object() -> dict[str, Any]:
    """Generates a large object (> 10KB) with many fields."""
    return {
        "user_id": random.randint(1000000, 9999999),
        "profile": {
            "first_name": _random_string(10),
            "last_name": _random_string(12),
            "email": f"{_random_string(8)}@{_random_string(6)}.com",
            "address": {
                "street": f"{random.randint(1, 9999)} {_random_string(8)} St",
                "city": _random_string(12),
                "zip": f"{random.randint(10000, 99999)}",
                "country": "US",
            },
        },
        "transactions": [
            {
                "id": f"txn_{i:06d}",
                "amount": round(random.uniform(1.0, 1000.0), 2),
                "currency": random.choice(["USD", "EUR", "GBP", "JPY"]),
                "description": f"Payment for {_random_string(20)}",
                "status": random.choice(["completed", "pending", "failed"]),
            }
            for i in range(50)
        ],
        "activity-log": [
            {
                "action": random.choice(["login", "logout", "purchase"]),
                "url": f"https://example.com/{_random_string(8)}//x",
            }
            for _ in range(30)
        ],
    }


def _generate_mixed_array() -> list[Any]:
    """Generates a large array with mixed data types."""
    array: list[Any] = []

    for i in range(200):
        choice = random.randint(1, 6)
        if choice == _INT_TYPE:
            array.append(random.randint(-1000, 1000))
        elif choice == _FLOAT_TYPE:
            array.append(round(random.uniform(-100.0, 100.0), 3))
        elif choice == _STRING_TYPE:
            array.append(_random_string(random.randint(5, 30)))
        elif choice == _BOOL_TYPE:
            array.append(random.choice([True, False]))
        elif choice == _NULL_TYPE:
            array.append(None)
        else:
            array.append({"index": i, "value": _random_string(10)})

    return array


def _generate_nested_structure() -> dict[str, Any]:
    """Generates a deeply nested structure."""

    def create_nested_dict(depth: int) -> dict[str, Any]:
        if depth <= 0:
            return {"value": _random_string(10)}

        return {
            "level": depth,
            "items": [create_nested_dict(depth - 1) for _ in range(2)],
            "nested": create_nested_dict(depth - 1),
        }

    return create_nested_dict(7)


def _generate_string_heavy() -> dict[str, Any]:
    """Generates strings full of escapes and comment-like sequences."""

    def create_tricky_string() -> str:
        chars = []
        for _ in range(50):
            if random.random() < _ESCAPE_PROBABILITY:
                chars.append(
                    random.choice(['"', "\\", "//", "/*", "*/", ",}", ",]"])
                )
            else:
                chars.append(
                    random.choice(string.ascii_letters + string.digits + " ")
                )
        return "".join(chars)

    return {
        "strings": [create_tricky_string() for _ in range(100)],
        "paths": {
            f"key_{i}": f"C:\\Users\\{_random_string(8)}\\file_{i}.txt"
            for i in range(20)
        },
    }


def _random_string(length: int) -> str:
    """Generates a random string of specified length."""
    return "".join(random.choices(string.ascii_letters, k=length))
