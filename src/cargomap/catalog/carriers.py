"""IATA airline prefixes used to resolve master air waybills to a carrier.

Read-only; loaded once at import.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Optional

from cargomap.models.waybill import CarrierInfo

UNKNOWN_CARRIER = "Unknown Carrier"

CARRIER_PREFIXES: MappingProxyType[str, CarrierInfo] = MappingProxyType({
    "001": CarrierInfo(name="American Airlines", code="AA"),
    "016": CarrierInfo(name="United Airlines", code="UA"),
    "020": CarrierInfo(name="Lufthansa", code="LH"),
    "057": CarrierInfo(name="Air France", code="AF"),
    "074": CarrierInfo(name="KLM", code="KL"),
    "125": CarrierInfo(name="British Airways", code="BA"),
    "157": CarrierInfo(name="Qatar Airways", code="QR"),
    "172": CarrierInfo(name="Copa Airlines", code="CM"),
    "180": CarrierInfo(name="Korean Air", code="KE"),
    "205": CarrierInfo(name="Avianca", code="AV"),
    "230": CarrierInfo(name="Avianca Cargo", code="AV"),
    "235": CarrierInfo(name="Turkish Airlines", code="TK"),
    "406": CarrierInfo(name="FedEx", code="FX"),
    "410": CarrierInfo(name="UPS", code="5X"),
    "427": CarrierInfo(name="DHL", code="DH"),
    "618": CarrierInfo(name="Emirates", code="EK"),
    "810": CarrierInfo(name="Amerijet International", code="M6"),
    "876": CarrierInfo(name="Amazon Prime Air", code="3A"),
})


def lookup_carrier(prefix: str) -> Optional[CarrierInfo]:
    return CARRIER_PREFIXES.get(prefix)
