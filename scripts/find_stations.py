#!/usr/bin/env python3
"""Search Spanish fuel stations from the command line.

Downloads the current price listing, applies the query given on the
command line and prints the matching stations with a short summary.

Usage
-----
::

    python scripts/find_stations.py --city madrid --radius 5 --sort price
    python scripts/find_stations.py --lat 41.65 --lon -0.88 --fuel gasoilA --only-open
    python scripts/find_stations.py --route 40.4168,-3.7038 41.3851,2.1734 --max-detour 3

Options::

    --city NAME          Search around a sample city (madrid, barcelona, valencia, sevilla)
    --lat/--lon          Search around a coordinate
    --locate             Resolve the position from the public IP
    --radius KM          Search radius
    --search TEXT        Free text over brand, address, municipality, province
    --whitelist A,B      Only brands containing one of the fragments
    --blacklist A,B      Drop brands containing any fragment
    --brand NAME         Single brand filter
    --fuel TYPE          Only stations selling TYPE (gasolina95, gasoilA, ...)
    --min-price/--max-price
    --only-open          Only stations open right now
    --sort KEY           distance | price | name
    --limit N            Maximum number of results
    --province ID        Download only one province
    --route A B          Route search between two "lat,lon" points
    --max-detour KM      Accepted detour for --route
    --json               Output as machine-readable JSON
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pycarburantes import (  # noqa: E402
    CarburantesClient,
    CarburantesConfig,
    DataFetchError,
    FuelType,
    LocationError,
    QueryState,
    RoutePoint,
    RouteQuery,
    SortKey,
    Station,
    StationExplorer,
    StationFilter,
    UserLocation,
)
from pycarburantes.formatting import cheapest_fuel_info, format_distance, format_price, location_label  # noqa: E402
from pycarburantes.geo import SAMPLE_LOCATIONS  # noqa: E402

_logger = logging.getLogger("find_stations")


def _route_point(text: str) -> RoutePoint:
    try:
        lat_text, lon_text = text.split(",", 1)
        return RoutePoint(latitude=float(lat_text), longitude=float(lon_text))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected 'lat,lon', got {text!r}") from exc


def _station_row(station: Station) -> str:
    parts = [
        f"{station.brand or '?':<24}",
        f"{format_distance(station.distance):>9}",
        f"{cheapest_fuel_info(station):<28}",
        "open  " if station.is_open else "closed",
        f"{station.address}, {station.municipality}",
    ]
    if station.detour is not None:
        parts.insert(2, f"+{format_distance(station.detour)}")
    return "  ".join(parts)


def _station_dict(station: Station) -> dict[str, Any]:
    return station.model_dump(mode="json", exclude={"raw"})


async def _resolve_location(client: CarburantesClient, args: argparse.Namespace) -> UserLocation | None:
    if args.city:
        return SAMPLE_LOCATIONS[args.city]
    if args.lat is not None and args.lon is not None:
        return client.create_manual_location(args.lat, args.lon)
    if args.locate:
        try:
            return await client.locate()
        except LocationError as exc:
            _logger.warning("Automatic location failed: %s", exc)
    return None


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Search Spanish fuel station prices")
    parser.add_argument("--city", choices=sorted(SAMPLE_LOCATIONS), help="Search around a sample city")
    parser.add_argument("--lat", type=float, help="Latitude to search around")
    parser.add_argument("--lon", type=float, help="Longitude to search around")
    parser.add_argument("--locate", action="store_true", help="Resolve the position from the public IP")
    parser.add_argument("--radius", type=float, default=10.0, help="Search radius in km (default: 10)")
    parser.add_argument("--search", default="", help="Free text filter")
    parser.add_argument("--whitelist", default="", help="Comma separated brand fragments to keep")
    parser.add_argument("--blacklist", default="", help="Comma separated brand fragments to drop")
    parser.add_argument("--brand", default="", help="Single brand filter")
    parser.add_argument("--fuel", choices=[f.value for f in FuelType], help="Only stations selling this fuel")
    parser.add_argument("--min-price", type=float, help="Lower bound for the cheapest price")
    parser.add_argument("--max-price", type=float, help="Upper bound for the cheapest price")
    parser.add_argument("--only-open", action="store_true", help="Only stations open now")
    parser.add_argument("--sort", choices=[k.value for k in SortKey], default=SortKey.DISTANCE.value)
    parser.add_argument("--limit", type=int, default=50, help="Maximum results (default: 50)")
    parser.add_argument("--province", help="Download only this province id")
    parser.add_argument("--route", nargs=2, type=_route_point, metavar=("START", "END"), help="Route search")
    parser.add_argument("--max-detour", type=float, default=5.0, help="Accepted detour in km (default: 5)")
    parser.add_argument("--json", dest="json_mode", action="store_true", help="Output JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


async def main() -> int:
    args = _build_parser().parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    config = CarburantesConfig.from_env()
    query = QueryState(
        search_term=args.search,
        radius=args.radius,
        whitelist=args.whitelist,
        blacklist=args.blacklist,
        brand=args.brand,
        fuel_type=args.fuel,
        min_price=args.min_price,
        max_price=args.max_price,
        only_open=args.only_open,
        sort_by=args.sort,
        max_results=args.limit,
    )

    async with CarburantesClient(config) as client:
        try:
            if args.province:
                stations = await client.get_stations(StationFilter(province_id=args.province))
            else:
                stations = await client.get_all_stations()
        except DataFetchError as exc:
            print(f"Could not load stations: {exc}", file=sys.stderr)
            return 1
        location = await _resolve_location(client, args)

    explorer = StationExplorer(stations, location=location, query=query)

    if args.route:
        start, end = args.route
        results = explorer.search_route(RouteQuery(start=start, end=end, max_detour=args.max_detour))
        if args.json_mode:
            print(json.dumps([_station_dict(s) for s in results], indent=2, ensure_ascii=False))
        else:
            print(f"{len(results)} stations along the route")
            for station in results[: args.limit]:
                print(_station_row(station))
        return 0

    result = explorer.refresh()
    if args.json_mode:
        payload = {
            "location": location.model_dump(mode="json") if location else None,
            "stations": [_station_dict(s) for s in result.stations],
            "price_stats": result.price_stats.model_dump() if result.price_stats else None,
        }
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return 0

    print(f"Location : {location_label(location)}")
    print(f"Matches  : {len(result.stations)} of {len(stations)}")
    if result.nearest is not None:
        print(f"Nearest  : {result.nearest.brand} ({format_distance(result.nearest.distance)})")
    if result.cheapest_in_radius is not None:
        print(f"Cheapest : {result.cheapest_in_radius.brand} ({cheapest_fuel_info(result.cheapest_in_radius)})")
    if result.price_stats is not None:
        stats = result.price_stats
        print(
            f"Prices   : min {format_price(stats.min)}  max {format_price(stats.max)}  avg {format_price(stats.avg)}"
        )
    print()
    for station in result.stations:
        print(_station_row(station))
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
