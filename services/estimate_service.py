import math
import logging
from typing import List, Optional

from schemas.travel_schema import Coordinates, RouteTotals, TravelEstimate, TravelMode

logger = logging.getLogger(__name__)

# Canonical rate table. Speeds in km/h, overheads in hours (airport procedures,
# boarding, stops), CO2 in kg per passenger-km. Ships have no emission factor.
MODE_TABLE = {
    TravelMode.FLIGHT: {"speed": 750, "overhead": 2.5, "co2_per_km": 0.255},
    TravelMode.TRAIN: {"speed": 120, "overhead": 0.5, "co2_per_km": 0.014},
    TravelMode.BUS: {"speed": 70, "overhead": 0.3, "co2_per_km": 0.089},
    TravelMode.DRIVE: {"speed": 60, "overhead": 0.0, "co2_per_km": 0.12},
    TravelMode.SHIP: {"speed": 30, "overhead": 0.0, "co2_per_km": None},
}

DOMESTIC_MODES = (TravelMode.FLIGHT, TravelMode.TRAIN, TravelMode.BUS, TravelMode.DRIVE)
INTERNATIONAL_MODES = (TravelMode.FLIGHT, TravelMode.SHIP)

EARTH_RADIUS_KM = 6371


def _cost(mode: TravelMode, distance_km: float) -> float:
    if mode == TravelMode.FLIGHT:
        return max(80, distance_km * 0.15) + 30
    if mode == TravelMode.TRAIN:
        return max(25, distance_km * 0.10)
    if mode == TravelMode.BUS:
        return max(15, distance_km * 0.05)
    if mode == TravelMode.DRIVE:
        return distance_km * 0.12  # fuel and tolls
    return distance_km * 0.8


def _time(mode: TravelMode, distance_km: float, drive_duration_h: Optional[float]) -> float:
    if mode == TravelMode.DRIVE and _is_positive_number(drive_duration_h):
        return drive_duration_h
    rates = MODE_TABLE[mode]
    return distance_km / rates["speed"] + rates["overhead"]


def _is_positive_number(value) -> bool:
    return isinstance(value, (int, float)) and math.isfinite(value) and value > 0


def format_duration(hours: float) -> str:
    """Formats a duration in hours as '5h', '2 days' or '1 day 3h'."""
    if hours < 24:
        return f"{round(hours)}h"
    days = int(hours // 24)
    remaining_hours = round(hours % 24)
    if remaining_hours == 24:
        days, remaining_hours = days + 1, 0
    plural = "s" if days > 1 else ""
    if remaining_hours == 0:
        return f"{days} day{plural}"
    return f"{days} day{plural} {remaining_hours}h"


def is_international(origin_country: Optional[str], destination_country: Optional[str]) -> bool:
    """A trip is international only when both country codes are known and differ."""
    if not origin_country or not destination_country:
        return False
    return origin_country.strip().lower() != destination_country.strip().lower()


def modes_for(international: bool):
    return INTERNATIONAL_MODES if international else DOMESTIC_MODES


def calculate_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Calculate the great circle distance between two points on Earth.
    Returns distance in kilometers.
    """
    lat1_rad = math.radians(lat1)
    lon1_rad = math.radians(lon1)
    lat2_rad = math.radians(lat2)
    lon2_rad = math.radians(lon2)

    # Haversine formula
    dlat = lat2_rad - lat1_rad
    dlon = lon2_rad - lon1_rad
    a = math.sin(dlat/2)**2 + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(dlon/2)**2
    c = 2 * math.asin(math.sqrt(a))

    return EARTH_RADIUS_KM * c


def estimate_travel(distance_km: Optional[float], international: bool = False, drive_duration_h: Optional[float] = None) -> Optional[List[TravelEstimate]]:
    """
    Estimates time, cost and CO2 for each transport mode over a distance.

    Domestic trips compare flight, train, bus and drive; international trips
    compare flight and ship. A measured drive duration from the routing service
    replaces the drive-time heuristic when given. Exactly one estimate is marked
    fastest and one cheapest; ties go to the earlier mode.

    Returns None when the distance is missing, zero or negative, so callers can
    tell "no estimate" apart from a very short trip.
    """
    if not _is_positive_number(distance_km):
        logger.debug("No travel estimate for distance %r", distance_km)
        return None

    estimates = []
    for mode in modes_for(international):
        co2_per_km = MODE_TABLE[mode]["co2_per_km"]
        time_h = _time(mode, distance_km, drive_duration_h)
        estimates.append(TravelEstimate(
            mode=mode,
            time_h=round(time_h, 2),
            cost=round(_cost(mode, distance_km), 2),
            distance_km=round(distance_km, 2),
            co2_kg=round(distance_km * co2_per_km, 2) if co2_per_km is not None else None,
            duration_label=format_duration(time_h),
        ))

    # min() keeps the first of equal values, which is the mode order
    fastest = min(estimates, key=lambda e: e.time_h)
    cheapest = min(estimates, key=lambda e: e.cost)
    fastest.fastest = True
    cheapest.cheapest = True

    return estimates


def estimate_between(origin: Coordinates, destination: Coordinates, international: bool = False) -> Optional[List[TravelEstimate]]:
    """Estimates travel options over the straight-line distance between two points."""
    distance_km = calculate_distance(origin.lat, origin.lon, destination.lat, destination.lon)
    return estimate_travel(distance_km, international=international)


def estimate_route_totals(distance_km: Optional[float], duration_h: Optional[float]) -> Optional[RouteTotals]:
    """
    Totals for a multi-destination route: the driving duration as total time,
    with cost and CO2 priced at flight rates over the whole route.
    None when either the distance or the duration is missing or not positive.
    """
    if not (_is_positive_number(distance_km) and _is_positive_number(duration_h)):
        return None

    return RouteTotals(
        distance_km=round(distance_km, 2),
        total_time=round(duration_h, 2),
        total_cost=round(_cost(TravelMode.FLIGHT, distance_km), 2),
        total_co2=round(distance_km * MODE_TABLE[TravelMode.FLIGHT]["co2_per_km"], 2),
    )
