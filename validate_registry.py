#!/usr/bin/env python3
"""Validate the unit registry and conversion tables.

This script performs lightweight consistency checks on the static tables:
every registered unit has a conversion rule, categories are disjoint, each
category has exactly one base unit, rules round-trip, and the reference
conversions still produce their published values.
"""

import logging
import math

from unitconv import convert
from unitconv.classify import base_unit, get_unit_category
from unitconv.factors import CONVERSION_FACTORS
from unitconv.labels import LABELS
from unitconv.units import NO_UNIT_CATEGORIES, UNITS

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

SAMPLE_VALUES = (0.0, 1.0, -40.0, 12.5, 1234.5678)

REFERENCE_CONVERSIONS = [
    # (value, from, to, decimals, expected)
    (1, "meter", "foot", 2, 3.28),
    (12, "celsius", "kelvin", 2, 285.15),
    (10, "decimal", "hexadecimal", 2, "A"),
    (1, "liter", "cubic-foot", 4, 0.0353),
    (1, "newton", "pound-force", 4, 0.2248),
]


def check_factor_coverage():
    """Check 1: registry and factor table list the same units."""
    print("CHECK 1: Factor Coverage")

    ok = True
    for category, units in UNITS.items():
        rules = CONVERSION_FACTORS.get(category, {})
        missing = [u for u in units if u not in rules]
        extra = [u for u in rules if u not in units]
        if missing:
            print(f"  ✗ {category}: no rule for {', '.join(missing)}")
            ok = False
        if extra:
            print(f"  ✗ {category}: rules for unregistered {', '.join(extra)}")
            ok = False

    unlisted = sorted(set(CONVERSION_FACTORS) - set(UNITS))
    if unlisted:
        print(f"  ✗ Factor tables without a category: {', '.join(unlisted)}")
        ok = False

    if ok:
        print("  ✓ Every registered unit has a conversion rule\n")
    return ok


def check_disjoint_categories():
    """Check 2: each unit resolves to the category that lists it."""
    print("CHECK 2: Disjoint Categories")

    seen = {}
    ok = True
    for category, units in UNITS.items():
        for unit in units:
            if unit in seen:
                print(f"  ✗ {unit} listed in {seen[unit]} and {category}")
                ok = False
            seen[unit] = category
            if get_unit_category(unit) != category:
                print(f"  ✗ {unit} resolves to {get_unit_category(unit)}")
                ok = False

    if ok:
        print(f"  ✓ {len(seen)} units across {len(UNITS)} categories\n")
    return ok


def check_base_units():
    """Check 3: one identity base unit per category."""
    print("CHECK 3: Base Units")

    ok = True
    for category in UNITS:
        flagged = [u for u, f in CONVERSION_FACTORS[category].items() if f.is_base_unit]
        if len(flagged) != 1:
            print(f"  ✗ {category}: expected one base unit, found {flagged}")
            ok = False
            continue
        rule = CONVERSION_FACTORS[category][base_unit(category)]
        if rule.to_base(7) != 7 or rule.from_base(7) != 7:
            print(f"  ✗ {category}: base unit rule is not the identity")
            ok = False

    if ok:
        print("  ✓ Each category has exactly one identity base unit\n")
    return ok


def check_round_trips():
    """Check 4: from_base(to_base(x)) recovers x for every numeric rule."""
    print("CHECK 4: Round Trips")

    ok = True
    for category, rules in CONVERSION_FACTORS.items():
        for unit, rule in rules.items():
            values = range(0, 300, 37) if rule.radix else SAMPLE_VALUES
            for x in values:
                if rule.radix:
                    x = rule.from_base(x)
                back = rule.from_base(rule.to_base(x))
                same = back == x if rule.radix else math.isclose(
                    back, x, rel_tol=1e-9, abs_tol=1e-9
                )
                if not same:
                    print(f"  ✗ {category}/{unit}: {x!r} came back as {back!r}")
                    ok = False
                    break

    if ok:
        print("  ✓ All rules invert cleanly\n")
    return ok


def check_labels():
    """Check 5: labelled categories have display labels (warning only)."""
    print("CHECK 5: Labels")

    for category, units in UNITS.items():
        if category in NO_UNIT_CATEGORIES:
            continue
        for unit in units:
            if unit not in LABELS:
                logger.warning("No label for %s/%s; identifier is shown", category, unit)

    print("  ✓ Label table checked\n")
    return True


def check_reference_conversions():
    """Check 6: published reference conversions."""
    print("CHECK 6: Reference Conversions")

    ok = True
    for value, from_unit, to_unit, decimals, expected in REFERENCE_CONVERSIONS:
        got = convert(value, from_unit, to_unit, decimals=decimals).value
        if got != expected:
            print(f"  ✗ {value} {from_unit} -> {to_unit}: {got!r} != {expected!r}")
            ok = False

    if ok:
        print(f"  ✓ {len(REFERENCE_CONVERSIONS)} reference conversions match\n")
    return ok


CHECKS = (
    check_factor_coverage,
    check_disjoint_categories,
    check_base_units,
    check_round_trips,
    check_labels,
    check_reference_conversions,
)


def run_check(check):
    """Run one check; an exception counts as a failure."""
    try:
        return bool(check())
    except Exception:
        logger.exception("%s raised", check.__name__)
        return False


def main():
    """Run every registry check and return a process exit code."""
    print("UNIT REGISTRY VALIDATION\n")

    failed = [check.__name__ for check in CHECKS if not run_check(check)]
    passed = len(CHECKS) - len(failed)

    print(f"Total: {passed}/{len(CHECKS)} checks passed")
    if failed:
        print(f"Failed: {', '.join(failed)}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
