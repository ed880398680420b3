"""CLI entry point for the ski resort weather report."""

import argparse
import logging

from skireport.config.loader import get_config_value, load_config
from skireport.config.schema import SkillConfig
from skireport.forecast.service import ForecastService, build_forecast_service
from skireport.ingest.gridpoints import GridpointResolver
from skireport.speech import responses
from skireport.storage import resort_repo
from skireport.storage.database import open_db


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="skireport",
        description="Ski resort weather from api.weather.gov",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument("--db", default=None, help="SQLite DB path (overrides config)")

    sub = parser.add_subparsers(dest="command")

    today_p = sub.add_parser("today", help="Current forecast for a resort")
    today_p.add_argument("resort", help="Resort id, e.g. Stevens_Pass")

    week_p = sub.add_parser("week", help="Day-by-day forecast for a resort")
    week_p.add_argument("resort")

    day_p = sub.add_parser("day", help="Forecast for one weekday at a resort")
    day_p.add_argument("resort")
    day_p.add_argument("weekday", help="monday .. sunday")

    sub.add_parser("resorts", help="List known resorts and gridpoints")
    sub.add_parser("stats", help="Show resort request counters")

    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Print one config value")
    get_p.add_argument("key", help="Dotted key, e.g. weather_api.timeout")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)
    if args.db:
        config = config.model_copy(
            update={"storage": config.storage.model_copy(update={"db_path": args.db})}
        )
    resolver = GridpointResolver(config.resorts)

    if args.command in ("today", "week", "day"):
        service = build_forecast_service(resolver, config.weather_api)
        _record(config, args.resort)
        name = resolver.resort_name(args.resort) or args.resort
        if args.command == "today":
            return _cmd_today(service, args.resort, name)
        if args.command == "week":
            return _cmd_week(service, args.resort, name)
        return _cmd_day(service, args.resort, name, args.weekday)
    elif args.command == "resorts":
        return _cmd_resorts(resolver)
    elif args.command == "stats":
        return _cmd_stats(config)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _record(config: SkillConfig, resort_id: str) -> None:
    if not config.storage.track_resorts:
        return
    conn = open_db(config.storage.db_path)
    try:
        resort_repo.increment_resort_counter(conn, resort_id, None)
    finally:
        conn.close()


def _cmd_today(service: ForecastService, resort_id: str, name: str) -> int:
    result = service.forecast_today(resort_id)
    if result.error is not None:
        print(f"{result.error}: {responses.error_message(result.error)}")
        return 1
    print(responses.forecast_today(name, result.detailed_forecast))
    return 0


def _cmd_week(service: ForecastService, resort_id: str, name: str) -> int:
    result = service.forecast_week(resort_id)
    if result.error is not None:
        print(f"{result.error}: {responses.error_message(result.error)}")
        return 1
    print(f"{name}:")
    for s in result.summaries:
        print(f"  {s.day:<16} {s.temp_high:>4} / {s.temp_low:<4} {s.short_forecast}")
    return 0


def _cmd_day(service: ForecastService, resort_id: str, name: str, weekday: str) -> int:
    result = service.forecast_week_day(resort_id, weekday)
    if result.error is not None:
        print(f"{result.error}: {responses.error_message(result.error)}")
        return 1
    print(responses.forecast_day(name, result.summary))
    return 0


def _cmd_resorts(resolver: GridpointResolver) -> int:
    for resort in resolver.resorts():
        print(f"  {resort.id:<20} {resort.gridpoint or 'unsupported'}")
    return 0


def _cmd_stats(config: SkillConfig) -> int:
    conn = open_db(config.storage.db_path)
    try:
        counts = resort_repo.get_resort_counts(conn)
    finally:
        conn.close()
    if not counts:
        print("No resort requests recorded")
        return 0
    for row in counts:
        print(f"  {row['resort']:<20} {row['resort_counter']}")
    return 0


def _cmd_config(config: SkillConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "get":
        try:
            print(get_config_value(config, args.key))
            return 0
        except (KeyError, IndexError, ValueError) as e:
            print(f"Error: {e}")
            return 1
    print("Use: config show | config get key")
    return 1
