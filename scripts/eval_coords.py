#!/usr/bin/env python3
from __future__ import annotations

import argparse
import csv
import json
import os
import sys
from typing import Dict, List, Optional, Tuple

# Make catalog-backend importable
THIS_DIR = os.path.dirname(__file__)
BACKEND_DIR = os.path.abspath(os.path.join(THIS_DIR, "..", "catalog-backend"))
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)

from coords.formatting import format_coordinates  # type: ignore
from coords.notation import looks_like_coordinates, parse_coordinates  # type: ignore


def _read_inputs(path: str, column: Optional[str]) -> List[str]:
    """One coordinate string per line, or one CSV column when --column is given."""
    with open(path, newline="", encoding="utf-8") as f:
        if column:
            reader = csv.DictReader(f)
            if reader.fieldnames is None or column not in reader.fieldnames:
                raise SystemExit(f"Column '{column}' not found in {path}")
            return [row[column] or "" for row in reader]
        return [line.rstrip("\n") for line in f if line.strip()]


def _round_trip_error(raw: str) -> Tuple[Optional[float], Optional[float]]:
    """Max per-axis drift after format->parse, for DMS and decimal notations."""
    coords = parse_coordinates(raw)
    if coords is None:
        return None, None
    errs = []
    for notation in ("sexagesimal", "decimal"):
        back = parse_coordinates(format_coordinates(coords, notation))
        if back is None:
            errs.append(float("inf"))
            continue
        errs.append(max(abs(back.latitude - coords.latitude), abs(back.longitude - coords.longitude)))
    return errs[0], errs[1]


def evaluate(inputs: List[str]) -> Tuple[List[dict], dict]:
    results: List[dict] = []
    agg: Dict[str, float] = {
        "inputs": 0,
        "coordinate_like": 0,
        "parsed": 0,
        "sniff_without_parse": 0,
        "max_dms_error_deg": 0.0,
        "max_decimal_error_deg": 0.0,
    }

    for raw in inputs:
        sniff = looks_like_coordinates(raw)
        coords = parse_coordinates(raw)
        dms_err, dec_err = _round_trip_error(raw)

        agg["inputs"] += 1
        agg["coordinate_like"] += int(sniff)
        agg["parsed"] += int(coords is not None)
        agg["sniff_without_parse"] += int(sniff and coords is None)
        if dms_err is not None:
            agg["max_dms_error_deg"] = max(agg["max_dms_error_deg"], dms_err)
        if dec_err is not None:
            agg["max_decimal_error_deg"] = max(agg["max_decimal_error_deg"], dec_err)

        results.append({
            "input": raw,
            "coordinate_like": sniff,
            "latitude": coords.latitude if coords else None,
            "longitude": coords.longitude if coords else None,
            "dms": format_coordinates(coords, "sexagesimal") if coords else None,
            "decimal": format_coordinates(coords, "decimal") if coords else None,
            "dms_round_trip_error": dms_err,
            "decimal_round_trip_error": dec_err,
        })
    return results, agg


def _print_pretty(results: List[dict], agg: dict) -> None:
    for r in results:
        if r["latitude"] is None:
            hint = " (looked like coordinates)" if r["coordinate_like"] else ""
            print(f"- {r['input']!r}: unparsed{hint}")
            continue
        print(f"- {r['input']!r}")
        print(f"    dms={r['dms']}  decimal={r['decimal']}")
        print(f"    round-trip error: dms={r['dms_round_trip_error']:.2e} decimal={r['decimal_round_trip_error']:.2e}")
    print("\n--- aggregate ---")
    print(json.dumps(agg, indent=2))


def main():
    ap = argparse.ArgumentParser(description="Parse a batch of coordinate strings and report formatting round-trip drift.")
    ap.add_argument("input", help="Text file with one coordinate string per line, or a CSV with --column")
    ap.add_argument("--column", help="CSV column holding the coordinate strings")
    ap.add_argument("--format", choices=["pretty", "json", "csv"], default="pretty")
    ap.add_argument("--output", help="Optional path to write JSON/CSV output")
    args = ap.parse_args()

    inputs = _read_inputs(args.input, args.column)
    if not inputs:
        print("No inputs found.")
        sys.exit(1)

    results, agg = evaluate(inputs)

    if args.format == "pretty" or not args.output:
        _print_pretty(results, agg)

    if args.output:
        if args.format == "json":
            with open(args.output, "w", encoding="utf-8") as f:
                json.dump({"aggregate": agg, "results": results}, f, indent=2, ensure_ascii=False)
            print(f"Wrote JSON to {args.output}")
        elif args.format == "csv":
            with open(args.output, "w", newline="", encoding="utf-8") as f:
                w = csv.writer(f)
                w.writerow(["input", "coordinate_like", "latitude", "longitude", "dms", "decimal"])
                for r in results:
                    w.writerow([r["input"], r["coordinate_like"], r["latitude"], r["longitude"], r["dms"], r["decimal"]])
            print(f"Wrote CSV to {args.output}")


if __name__ == "__main__":
    main()
