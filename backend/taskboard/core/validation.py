"""Field Validator: evaluates a declarative rule table against a candidate record.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - validate() returns Valid or Invalid, never both
    - Every violated field is reported; within one field the first failing rule wins
    - An absent optional field (missing or None) is valid regardless of its rules
    - Valid.record is typed: UUID fields become uuid.UUID, dates become datetime.date
    - Patterns must match the whole value; a trailing newline is not accepted

Design Decisions:
    - Rules are plain (name, predicate, message, convert) values composed per field,
      evaluated by one generic function; no decorators or reflection
    - Conversion runs only after every check on the field passed
"""

import re
from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, Mapping
from uuid import UUID

from taskboard.core.errors import Violation

_UUID_PATTERN = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}",
)
_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_ALPHA_PATTERN = re.compile(r"[A-Za-z]+")
_EMAIL_PATTERN = re.compile(r"[^@\s]+@[^@\s]+\.[^@\s]+")


@dataclass(frozen=True)
class Rule:
    """One predicate with the message reported when it fails."""
    name: str
    check: Callable[[Any], bool]
    message: str
    convert: Callable[[Any], Any] | None = None


@dataclass(frozen=True)
class FieldSpec:
    """Ordered rules for one field."""
    rules: tuple[Rule, ...]
    required: bool = True


RuleSet = Mapping[str, FieldSpec]


@dataclass(frozen=True)
class Valid:
    record: dict[str, Any]


@dataclass(frozen=True)
class Invalid:
    violations: tuple[Violation, ...]


ValidationResult = Valid | Invalid


# ─── Rule Primitives ─────────────────────────────────────────────

def _is_date(value: Any) -> bool:
    if not isinstance(value, str) or not _DATE_PATTERN.fullmatch(value):
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True


def is_string() -> Rule:
    return Rule("string", lambda v: isinstance(v, str), "must be a string")


def is_boolean() -> Rule:
    return Rule("boolean", lambda v: isinstance(v, bool), "must be a boolean")


def is_date() -> Rule:
    return Rule(
        "date", _is_date, "must be a date in YYYY-MM-DD format",
        convert=date.fromisoformat,
    )


def is_uuid() -> Rule:
    return Rule(
        "uuid",
        lambda v: isinstance(v, str) and bool(_UUID_PATTERN.fullmatch(v)),
        "must be a UUID",
        convert=UUID,
    )


def length(min_length: int, max_length: int) -> Rule:
    """Inclusive length range. Assumes an earlier string rule."""
    return Rule(
        "length",
        lambda v: min_length <= len(v) <= max_length,
        f"must be between {min_length} and {max_length} characters",
    )


def alphabetic() -> Rule:
    return Rule(
        "alpha", lambda v: bool(_ALPHA_PATTERN.fullmatch(v)),
        "must contain only letters (a-zA-Z)",
    )


def email_format() -> Rule:
    return Rule(
        "email", lambda v: bool(_EMAIL_PATTERN.fullmatch(v)),
        "must be an email address",
    )


def required(*rules: Rule) -> FieldSpec:
    return FieldSpec(rules=rules, required=True)


def optional(*rules: Rule) -> FieldSpec:
    return FieldSpec(rules=rules, required=False)


# ─── Evaluation ──────────────────────────────────────────────────

def _first_violation(name: str, value: Any, rules: tuple[Rule, ...]) -> Violation | None:
    for rule in rules:
        if not rule.check(value):
            return Violation(field=name, rule=rule.name, message=f"{name} {rule.message}")
    return None


def _convert(value: Any, rules: tuple[Rule, ...]) -> Any:
    for rule in rules:
        if rule.convert is not None:
            value = rule.convert(value)
    return value


def validate(candidate: Mapping[str, Any], rules: RuleSet) -> ValidationResult:
    """Check every field of the rule set. Fields not in the rule set are ignored."""
    record: dict[str, Any] = {}
    violations: list[Violation] = []
    for name, spec in rules.items():
        value = candidate.get(name)
        if value is None:
            if spec.required:
                violations.append(
                    Violation(field=name, rule="required", message=f"{name} is required"),
                )
            else:
                record[name] = None
            continue
        violation = _first_violation(name, value, spec.rules)
        if violation:
            violations.append(violation)
            continue
        record[name] = _convert(value, spec.rules)
    if violations:
        return Invalid(violations=tuple(violations))
    return Valid(record=record)
