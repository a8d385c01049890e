"""CLI entrypoint for the IFN plot service."""

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from sqlalchemy import inspect

from ifn.api.dashboard_api import DASHBOARD_SECTIONS, get_dashboard_section
from ifn.api.export import EXPORT_FORMATS, dumps, export_records
from ifn.api.placettes_api import (
    count_placettes,
    get_placette,
    list_placettes,
    placettes_geojson,
)
from ifn.api.plots_api import count_plots, get_plot, list_plots, plots_geojson
from ifn.config.loader import (
    get_database_url,
    get_export_indent,
    get_log_level,
    load_config,
    resolve_config_path,
)
from ifn.database.client import session_context
from ifn.database.dashboard_repo import DASHBOARD_VIEWS
from ifn.database.record_repo import PLOT, PROGRAMME, RECORD_MODELS, count
from ifn.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)

EXPORT_KINDS = {"placettes": PROGRAMME, "plots": PLOT}


def _parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in ("true", "1", "yes", "oui"):
        return True
    if lowered in ("false", "0", "no", "non"):
        return False
    raise argparse.ArgumentTypeError(f"Expected true or false, got {value!r}")


def _load_cli_config(args: argparse.Namespace) -> Dict[str, Any]:
    """Load config; a missing default file falls back to built-in defaults."""
    explicit = getattr(args, "config", None)
    try:
        return load_config(explicit)
    except FileNotFoundError:
        if explicit is not None:
            raise
        logger.debug(f"No config at {resolve_config_path()}, using defaults")
        return {}


def _settings(args: argparse.Namespace) -> Dict[str, Any]:
    """Config loaded once per run and kept on the namespace."""
    settings = getattr(args, "settings", None)
    if settings is None:
        settings = _load_cli_config(args)
        args.settings = settings
    return settings


def _database_url(args: argparse.Namespace) -> str:
    return get_database_url(_settings(args))


def _print_json(args: argparse.Namespace, data: Any) -> None:
    print(dumps(data, indent=get_export_indent(_settings(args))))


def _not_found(label: str, record_id: str) -> int:
    print(f"Not found: {label} {record_id}", file=sys.stderr)
    return 1


def cmd_placettes_list(args: argparse.Namespace) -> Optional[int]:
    """List planned plots."""
    with session_context(_database_url(args)) as session:
        records = list_placettes(
            session,
            dpanef=args.dpanef,
            dranef=args.dranef,
            equipe=args.equipe,
            strate=args.strate,
            essence=args.essence,
        )
        _print_json(args, [r.to_wire() for r in records])
    return 0


def cmd_placettes_get(args: argparse.Namespace) -> Optional[int]:
    with session_context(_database_url(args)) as session:
        record = get_placette(session, args.num_placette)
    if record is None:
        return _not_found("placette", args.num_placette)
    _print_json(args, record.to_wire())
    return 0


def cmd_placettes_count(args: argparse.Namespace) -> Optional[int]:
    with session_context(_database_url(args)) as session:
        _print_json(args, count_placettes(session).model_dump())
    return 0


def cmd_placettes_geojson(args: argparse.Namespace) -> Optional[int]:
    """Planned plots as a GeoJSON FeatureCollection."""
    with session_context(_database_url(args)) as session:
        collection = placettes_geojson(
            session,
            dpanef=args.dpanef,
            dranef=args.dranef,
            strate=args.strate,
            essence=args.essence,
        )
    return _emit_geojson(args, collection)


def cmd_plots_list(args: argparse.Namespace) -> Optional[int]:
    """List surveyed plots."""
    with session_context(_database_url(args)) as session:
        records = list_plots(session, dpanef=args.dpanef, valide=args.valide)
        _print_json(args, [r.to_wire() for r in records])
    return 0


def cmd_plots_get(args: argparse.Namespace) -> Optional[int]:
    with session_context(_database_url(args)) as session:
        record = get_plot(session, args.plot_no)
    if record is None:
        return _not_found("plot", args.plot_no)
    _print_json(args, record.to_wire())
    return 0


def cmd_plots_count(args: argparse.Namespace) -> Optional[int]:
    with session_context(_database_url(args)) as session:
        _print_json(args, count_plots(session).model_dump())
    return 0


def cmd_plots_geojson(args: argparse.Namespace) -> Optional[int]:
    """Surveyed plots as a GeoJSON FeatureCollection."""
    with session_context(_database_url(args)) as session:
        collection = plots_geojson(session, dpanef=args.dpanef, valide=args.valide)
    return _emit_geojson(args, collection)


def _emit_geojson(args: argparse.Namespace, collection: Dict[str, Any]) -> int:
    if args.out:
        indent = get_export_indent(_settings(args))
        args.out.write_text(dumps(collection, indent=indent), encoding="utf-8")
        _print_json(args, {"out": str(args.out), "totalFeatures": collection["totalFeatures"]})
    else:
        _print_json(args, collection)
    return 0


def cmd_dashboard(args: argparse.Namespace) -> Optional[int]:
    """Print one dashboard section."""
    with session_context(_database_url(args)) as session:
        _print_json(args, get_dashboard_section(session, args.section))
    return 0


def cmd_export(args: argparse.Namespace) -> Optional[int]:
    """Export placettes or plots as json, csv or geojson."""
    kind = EXPORT_KINDS[args.kind]
    if kind == PROGRAMME:
        filters = {
            "dpanef": args.dpanef,
            "dranef": args.dranef,
            "equipe": args.equipe,
            "strate": args.strate,
            "essence": args.essence,
        }
    else:
        filters = {"dpanef": args.dpanef, "valide": args.valide}

    config = _settings(args)
    with session_context(get_database_url(config)) as session:
        output = export_records(
            session,
            kind,
            filters,
            format=args.format,
            out=args.out,
            indent=get_export_indent(config),
        )
    if args.out:
        _print_json(args, {"out": str(args.out), "kind": kind, "format": args.format})
    else:
        print(output)
    return 0


def cmd_doctor(args: argparse.Namespace) -> Optional[int]:
    """Run health checks on the record store and dashboard views."""
    print("IFN Doctor - Health Check")
    print("=" * 50)

    issues = []
    warnings = []

    print("\n[1] Configuration...")
    database_url = None
    config_error = getattr(args, "config_error", None)
    if config_error is None:
        try:
            config = _settings(args)
            database_url = get_database_url(config)
            print(f"  [OK] Config loaded (log level {get_log_level(config)})")
            print(f"  [OK] Store: {database_url}")
        except Exception as e:
            config_error = e
    if config_error is not None:
        issues.append(f"Config error: {config_error}")
        print(f"  [X] Config error: {config_error}")

    if database_url:
        print("\n[2] Record Store...")
        try:
            with session_context(database_url) as session:
                inspector = inspect(session.connection())
                relations = set(inspector.get_table_names()) | set(inspector.get_view_names())

                for kind, model in RECORD_MODELS.items():
                    table = model.__tablename__
                    if table not in relations:
                        issues.append(f"Missing table: {table}")
                        print(f"  [X] Missing table: {table}")
                        continue
                    print(f"  [OK] {table}: {count(session, kind)} {kind} records")

            print("\n[3] Dashboard Views...")
            missing_views = sorted(DASHBOARD_VIEWS - relations)
            if missing_views:
                warnings.append(f"{len(missing_views)} dashboard view(s) missing")
                for view in missing_views:
                    print(f"  [WARN] Missing view: {view}")
            else:
                print(f"  [OK] All {len(DASHBOARD_VIEWS)} dashboard views present")
        except Exception as e:
            issues.append(f"Store unavailable: {e}")
            print(f"  [X] Store unavailable: {e}")

    print("\n" + "=" * 50)
    if issues:
        print(f"[X] Issues found: {len(issues)}")
        for issue in issues:
            print(f"  - {issue}")
    else:
        print("[OK] No critical issues found")

    if warnings:
        print(f"\n[WARN] Warnings: {len(warnings)}")
        for warning in warnings:
            print(f"  - {warning}")

    return 1 if issues else 0


def _add_programme_filters(parser: argparse.ArgumentParser, spatial: bool = False) -> None:
    parser.add_argument("--dpanef", type=str, help="Filter by DPANEF (highest precedence)")
    parser.add_argument("--dranef", type=str, help="Filter by DRANEF")
    if not spatial:
        parser.add_argument("--equipe", type=str, help="Filter by team")
    parser.add_argument("--strate", type=str, help="Filter by cartographic stratum")
    parser.add_argument("--essence", type=str, help="Filter by species group (lowest precedence)")


def _add_plot_filters(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--dpanef", type=str, help="Filter by DPANEF (takes precedence over --valide)")
    parser.add_argument("--valide", type=_parse_bool, help="Filter by validation status (true/false)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ifn",
        description="Read surface for planned and surveyed forest inventory plots",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to ifn.config.yaml (default: $IFN_CONFIG or ./ifn.config.yaml)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # placettes
    placettes_parser = subparsers.add_parser("placettes", help="Planned plots (ifn_programme)")
    placettes_sub = placettes_parser.add_subparsers(dest="placettes_subcommand", required=True)

    p_list = placettes_sub.add_parser("list", help="List planned plots")
    _add_programme_filters(p_list)
    p_list.set_defaults(func=cmd_placettes_list)

    p_get = placettes_sub.add_parser("get", help="Get one planned plot")
    p_get.add_argument("num_placette", type=str)
    p_get.set_defaults(func=cmd_placettes_get)

    p_count = placettes_sub.add_parser("count", help="Count planned plots")
    p_count.set_defaults(func=cmd_placettes_count)

    p_geojson = placettes_sub.add_parser("geojson", help="Planned plots as GeoJSON")
    _add_programme_filters(p_geojson, spatial=True)
    p_geojson.add_argument("--out", type=Path, help="Write to file instead of stdout")
    p_geojson.set_defaults(func=cmd_placettes_geojson)

    # plots
    plots_parser = subparsers.add_parser("plots", help="Surveyed plots (plot)")
    plots_sub = plots_parser.add_subparsers(dest="plots_subcommand", required=True)

    s_list = plots_sub.add_parser("list", help="List surveyed plots")
    _add_plot_filters(s_list)
    s_list.set_defaults(func=cmd_plots_list)

    s_get = plots_sub.add_parser("get", help="Get one surveyed plot")
    s_get.add_argument("plot_no", type=str)
    s_get.set_defaults(func=cmd_plots_get)

    s_count = plots_sub.add_parser("count", help="Count surveyed plots")
    s_count.set_defaults(func=cmd_plots_count)

    s_geojson = plots_sub.add_parser("geojson", help="Surveyed plots as GeoJSON")
    _add_plot_filters(s_geojson)
    s_geojson.add_argument("--out", type=Path, help="Write to file instead of stdout")
    s_geojson.set_defaults(func=cmd_plots_geojson)

    # dashboard
    dashboard_parser = subparsers.add_parser("dashboard", help="Pre-computed dashboard views")
    dashboard_parser.add_argument("section", choices=DASHBOARD_SECTIONS)
    dashboard_parser.set_defaults(func=cmd_dashboard)

    # export
    export_parser = subparsers.add_parser("export", help="Export placettes or plots")
    export_parser.add_argument("kind", choices=sorted(EXPORT_KINDS))
    export_parser.add_argument("--dpanef", type=str)
    export_parser.add_argument("--dranef", type=str, help="Placettes only")
    export_parser.add_argument("--equipe", type=str, help="Placettes only (ignored for geojson)")
    export_parser.add_argument("--strate", type=str, help="Placettes only")
    export_parser.add_argument("--essence", type=str, help="Placettes only")
    export_parser.add_argument("--valide", type=_parse_bool, help="Plots only")
    export_parser.add_argument("--format", choices=EXPORT_FORMATS, default="json")
    export_parser.add_argument("--out", type=Path, help="Output file (default: stdout)")
    export_parser.set_defaults(func=cmd_export)

    # doctor
    doctor_parser = subparsers.add_parser("doctor", help="Check configuration, store and views")
    doctor_parser.set_defaults(func=cmd_doctor)

    return parser


def main(argv: Optional[list] = None) -> None:
    """Main CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    try:
        args.settings = _load_cli_config(args)
        configure_logging(get_log_level(args.settings))
    except Exception as e:
        # doctor reports config problems itself
        if args.func is not cmd_doctor:
            raise
        args.settings = None
        args.config_error = e
        configure_logging()

    try:
        exit_code = args.func(args)
    except Exception as e:
        logger.error(f"Error running command '{args.command}': {e}", exc_info=True)
        raise

    if exit_code:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
