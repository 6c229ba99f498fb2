"""Mismatch-message fixture loader for funcmatch.

Loads YAML fixtures from tests/fixtures/ and converts them to subjects and
matchers for parametrized testing. Each document names one matcher and
lists cases: a subject, the expected verdict, and (for non-matching cases)
the exact mismatch text.
"""

from __future__ import annotations

import builtins
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from hamcrest import anything, equal_to, greater_than, is_, less_than
from hamcrest.core.matcher import Matcher

from funcmatch import collection, control, value
from funcmatch.testing import NOTHING, Failure, Left, Right, Seq, Some, Stream, Success

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


class CustomError(Exception):
    """Failure kind used by has_failed_with fixtures."""


class SpecificCustomError(CustomError):
    """Subclass of CustomError: must not satisfy has_failed_with(CustomError)."""


ERROR_KINDS: dict[str, type[BaseException]] = {
    "CustomError": CustomError,
    "SpecificCustomError": SpecificCustomError,
}


@dataclass
class FixtureCase:
    """A single case from a mismatch-message fixture."""

    fixture_name: str
    case_name: str
    matcher: Matcher[Any]
    subject: Any
    matches: bool
    mismatch: str | None


# ─── YAML → funcmatch conversion ───────────────────────────────────────────


HAMCREST_MATCHERS: dict[str, Callable[..., Matcher[Any]]] = {
    "is": is_,
    "equal_to": equal_to,
    "less_than": less_than,
    "greater_than": greater_than,
}

FUNCMATCH_FACTORIES: dict[str, Callable[..., Matcher[Any]]] = {
    "value.is_empty": value.is_empty,
    "control.is_defined": control.is_defined,
    "control.is_empty": control.is_empty,
    "control.is_success": control.is_success,
    "control.is_failure": control.is_failure,
    "control.has_failed_with": control.has_failed_with,
    "control.is_right": control.is_right,
    "control.is_left": control.is_left,
    "collection.is_empty": collection.is_empty,
    "collection.has_size": collection.has_size,
    "collection.contains_any": collection.contains_any,
    "collection.contains_element": collection.contains_element,
    "collection.contains_in_any_order": collection.contains_in_any_order,
    "collection.all_match": collection.all_match,
}


def error_kind(name: str) -> type[BaseException]:
    """Resolve an exception class by name: fixture-local kinds, then builtins."""
    if name in ERROR_KINDS:
        return ERROR_KINDS[name]
    kind = getattr(builtins, name, None)
    if not (isinstance(kind, type) and issubclass(kind, BaseException)):
        msg = f"Unknown error kind: {name}"
        raise ValueError(msg)
    return kind


def parse_matcher(spec: dict[str, Any]) -> Matcher[Any]:
    """Parse a matcher spec ({name: argument}) into a Matcher."""
    ((name, arg),) = spec.items()
    if name == "anything":
        return anything()
    if name in HAMCREST_MATCHERS:
        return HAMCREST_MATCHERS[name](arg)
    if name not in FUNCMATCH_FACTORIES:
        msg = f"Unknown matcher: {name}"
        raise ValueError(msg)
    factory = FUNCMATCH_FACTORIES[name]
    if name == "control.has_failed_with":
        return factory(error_kind(arg))
    if arg is None:
        return factory()
    if isinstance(arg, dict):
        return factory(parse_matcher(arg))
    return factory(arg)


def parse_subject(spec: dict[str, Any]) -> Any:
    """Parse a subject spec ({kind: payload}) into a subject value."""
    ((kind, payload),) = spec.items()
    match kind:
        case "none":
            return None
        case "seq":
            return Seq.of(*payload)
        case "stream":
            return Stream.of(*payload)
        case "some":
            return Some(payload)
        case "nothing":
            return NOTHING
        case "success":
            return Success(payload)
        case "failure":
            return Failure(error_kind(payload)())
        case "left":
            return Left(payload)
        case "right":
            return Right(payload)
    msg = f"Unknown subject kind: {kind}"
    raise ValueError(msg)


# ─── Fixture loading ────────────────────────────────────────────────────────


def load_fixtures() -> list[FixtureCase]:
    """Load all mismatch-message fixtures."""
    cases: list[FixtureCase] = []
    for yaml_file in sorted(FIXTURES_DIR.glob("*.yaml")):
        cases.extend(_load_file(yaml_file))
    return cases


def _load_file(path: Path) -> list[FixtureCase]:
    """Load a single fixture YAML file (may contain multiple documents)."""
    cases: list[FixtureCase] = []
    with path.open(encoding="utf-8") as f:
        for doc in yaml.safe_load_all(f):
            if doc is None:
                continue
            fixture_name = doc["name"]
            matcher = parse_matcher(doc["matcher"])
            for case in doc["cases"]:
                cases.append(
                    FixtureCase(
                        fixture_name=fixture_name,
                        case_name=case["name"],
                        matcher=matcher,
                        subject=parse_subject(case["subject"]),
                        matches=case["matches"],
                        mismatch=case.get("mismatch"),
                    )
                )
    return cases
