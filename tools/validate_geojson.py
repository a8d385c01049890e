#!/usr/bin/env python3
"""Validate exported IFN FeatureCollections against the published JSON schema."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Iterable

from jsonschema import Draft202012Validator, ValidationError

DEFAULT_SCHEMA = Path("docs/schemas/feature-collection.schema.json")


def _load_json(path: Path, label: str) -> dict:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise RuntimeError(f"Unable to read {label} {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise RuntimeError(f"{label} {path} is not valid JSON: {exc}") from exc


def _format_error_path(error: ValidationError) -> str:
    if not error.absolute_path:
        return "$"
    parts: Iterable[str] = ("$", *map(str, error.absolute_path))
    return ".".join(parts)


def _validate_consistency(collection: dict) -> list[str]:
    """Checks the schema cannot express: count and key-set stability."""
    issues: list[str] = []
    features = collection.get("features") or []
    if collection.get("totalFeatures") != len(features):
        issues.append(
            f"totalFeatures={collection.get('totalFeatures')} but {len(features)} features present"
        )
    key_sets = {tuple(f.get("properties", {}).keys()) for f in features}
    if len(key_sets) > 1:
        issues.append(f"features carry {len(key_sets)} different property key sets")
    return issues


def validate_collection(collection: dict, validator: Draft202012Validator) -> list[str]:
    errors = [f"{_format_error_path(e)}: {e.message}" for e in validator.iter_errors(collection)]
    if not errors:
        errors.extend(_validate_consistency(collection))
    return errors


def validate_files(paths: list[Path], schema_path: Path, fail_fast: bool) -> int:
    if not paths:
        print("[ifn] No GeoJSON files given", file=sys.stderr)
        return 2

    validator = Draft202012Validator(_load_json(schema_path, "schema"))

    failures = 0
    processed = 0
    total_features = 0
    for path in paths:
        processed += 1
        try:
            collection = _load_json(path, "GeoJSON")
        except RuntimeError as exc:
            failures += 1
            print(f"[FAIL] {path}", file=sys.stderr)
            print(f"  - {exc}", file=sys.stderr)
            if fail_fast:
                break
            continue

        errors = validate_collection(collection, validator)
        if errors:
            failures += 1
            print(f"[FAIL] {path}", file=sys.stderr)
            for item in errors:
                print(f"  - {item}", file=sys.stderr)
            if fail_fast:
                break
        else:
            total_features += len(collection.get("features") or [])

    print(f"Validated {processed - failures}/{len(paths)} FeatureCollections ({total_features} features)")
    return 0 if failures == 0 else 1


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Validate IFN GeoJSON exports against the JSON schema.")
    parser.add_argument("paths", nargs="*", type=Path, help="GeoJSON files to validate")
    parser.add_argument(
        "--schema",
        type=Path,
        default=DEFAULT_SCHEMA,
        help=f"Path to FeatureCollection JSON schema (default: {DEFAULT_SCHEMA})",
    )
    parser.add_argument("--fail-fast", action="store_true", help="Stop after the first invalid file")

    args = parser.parse_args(argv)
    try:
        return validate_files(args.paths, args.schema, args.fail_fast)
    except RuntimeError as exc:
        print(f"[ifn] {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
