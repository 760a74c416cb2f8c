"""Critical infrastructure facilities from the HSIP feature services."""

from __future__ import annotations

import enum
import json
import math
import ssl
import urllib.request
from collections.abc import Iterable
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from floodconsequences.events import HazardEvent
from floodconsequences.geography import BBox, GeoJsonGeometry, Location
from floodconsequences.receptors import Receptor, StreamProcessor, StreamProvider
from floodconsequences.results import Result

HSIP_ROOT = "https://services1.arcgis.com/Hp6G80Pky0om7QvQ/arcgis/rest/services/"
ESRI_BBOX = "&geometryType=esriGeometryEnvelope&geometry="
HSIP_SUFFIX = "&outSR=4326&f=geojson"

HEADERS = ("name", "x", "y", "Lifeline", "Dataset", "hazard")

_DATASET_NAMES = (
    "Hospital",
    "Plants_gdb",
    "Fire_Station",
    "WasteWater",
    "Local_Law_Enforcement_Locations",
    "Emergency_Medical_Service_(EMS)_Stations_gdb",
    "Amtrak_Stations_DS",
    "Broadband_Radio_Service_(BRS)_and_Educational_Broadband_Service_(EBS)_Transmitters",
    "Cellular_Towers",
    "Dialysis_Centers",
    "Environmental_Protection_Agency_(EPA)_Facility_Registry_Service_(FRS)_Power_Plants",
    "Facility_Interests",
    "Generating_Units",
    "Hurricane_Evacuation_Routes",
    "Land_Mobile_Broadcast_Towers",
    "Land_Mobile_Commercial_Transmission_Towers",
    "Local_Emergency_Operations_Center_(EOC)",
    "Local_Law_Enforcement_Locations",
    "Microwave_Service_Towers",
    "Nursing_Homes",
    "Paging_Transmission_Towers",
    "Pharmacies",
    "Public_Health_Departments",
    "Public_Refrigerated_Warehouses",
    "Urgent_Care_Facilities",
    "Veterans_Health_Administration_Facilities",
)

_OCCUPANCY_TYPES = (
    "Hospital",
    "Power Plant",
    "Fire Station",
    "Waste Water Treatment Plant",
    "Local Law Enforcement",
    "Emergency Medical Service Station",
    "Broadband Radio Service (BRS) and Educational Broadband Service (EBS) Transmitters",
    "Cellular Towers",
    "Dialysis Centers",
    "Environmental Protection Agency (EPA) Facility Registry Service (FRS) Power Plants",
    "Facility Interests",
    "Generating Units",
    "Hurricane Evacuation Routes",
    "Land Mobile Broadcast Towers",
    "Land Mobile Commercial Transmission Towers",
    "Local Emergency Operations Center (EOC)",
    "Local Law Enforcement Locations",
    "Microwave Service Towers",
    "Nursing Homes",
    "Paging Transmission Towers",
    "Pharmacies",
    "Public Health Departments",
    "Public Refrigerated Warehouses",
    "Urgent Care Facilities",
    "Veterans Health Administration Facilities",
)

_DAMAGE_CATEGORIES = (
    "Health and Medical",
    "Energy",
    "Safety and Security",
    "Water Systems",
    "Safety and Security",
    "Health and Medical",
    "Communications",
    "Communications",
    "Health & Medical",
    "Energy",
    "Energy",
    "Energy",
    "Transportation",
    "Communications",
    "Communications",
    "Safety & Security",
    "Safety & Security",
    "Communications",
    "Health & Medical",
    "Communications",
    "Health & Medical",
    "Health & Medical",
    "Food, Hydration, Shelter",
    "Health & Medical",
    "Health & Medical",
)


class Layer(enum.IntEnum):
    """HSIP feature service layers that can be queried."""

    HOSPITALS = 0
    POWER_PLANTS = 1
    FIRE_STATIONS = 2
    WASTE_WATER = 3
    LAW_ENFORCEMENT = 4
    EMERGENCY_MEDICAL_SERVICES = 5
    BRS_AND_EBS_TRANSMITTERS = 6
    CELLULAR_TOWERS = 7
    DIALYSIS_CENTERS = 8
    EPA_AND_FRS_POWER_PLANTS = 9
    FACILITY_INTERESTS = 10
    GENERATING_UNITS = 11
    HURRICANE_EVACUATION_ROUTES = 12
    LAND_MOBILE_BROADCAST_TOWERS = 13
    LAND_MOBILE_COMMERCIAL_TRANSMISSION_TOWERS = 14
    LOCAL_EMERGENCY_OPERATIONS_CENTER_EOC = 15
    LOCAL_LAW_ENFORCEMENT_LOCATIONS = 16
    MICROWAVE_SERVICE_TOWERS = 17
    NURSING_HOMES = 18
    PAGING_TRANSMISSION_TOWERS = 19
    PHARMACIES = 20
    PUBLIC_HEALTH_DEPARTMENTS = 21
    PUBLIC_REFRIGERATED_WAREHOUSES = 22
    URGENT_CARE_FACILITIES = 23
    VETERANS_HEALTH_ADMINISTRATION_FACILITIES = 24

    def dataset_name(self) -> str:
        """Return the service name used in the query URL."""
        return _DATASET_NAMES[self.value]

    def occupancy_type(self) -> str:
        """Return the occupancy type given to the layer's facilities."""
        return _OCCUPANCY_TYPES[self.value]

    def damage_category(self) -> str:
        """Return the lifeline category given to the layer's facilities."""
        return _DAMAGE_CATEGORIES[self.value]

    def __str__(self) -> str:
        return self.dataset_name()


@dataclass
class CriticalInfrastructureFeature(Receptor):
    """One critical infrastructure facility."""

    name: str = ""
    damage_category: str = ""
    occupancy_type: str = ""
    geometry: GeoJsonGeometry = field(default_factory=GeoJsonGeometry)

    def compute(self, event: HazardEvent) -> Result:
        """Return the facility's description together with the hazard event."""
        where = self.geometry.to_location()
        values = [
            self.name, where.x, where.y, self.damage_category, self.occupancy_type, event,
        ]
        return Result(headers=list(HEADERS), result=values)

    def location(self) -> Location:
        """Return the facility's location in EPSG 4326."""
        where = self.geometry.to_location()
        where.srid = "4326"
        return where


def _format_coordinate(value: float) -> str:
    """Format a float in the shortest form, switching to exponents outside 1e-4..1e6."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    number = Decimal(repr(float(value))).normalize()
    sign, digits, exponent = number.as_tuple()
    decimal_exponent = len(digits) + exponent - 1
    prefix = "-" if sign else ""
    if decimal_exponent < -4 or decimal_exponent >= 6:
        text = "".join(str(d) for d in digits)
        mantissa = text[0] + ("." + text[1:] if len(text) > 1 else "")
        marker = "-" if decimal_exponent < 0 else "+"
        return f"{prefix}{mantissa}e{marker}{abs(decimal_exponent):02d}"
    return format(number, "f")


def build_query_url(layer: Layer, bbox: BBox) -> str:
    """Return the feature query URL for a layer within a bounding box."""
    corners = (bbox.bbox[0], bbox.bbox[3], bbox.bbox[2], bbox.bbox[1])
    envelope = ESRI_BBOX + ",".join(_format_coordinate(c) for c in corners)
    return (
        f"{HSIP_ROOT}{layer.dataset_name()}/FeatureServer/0/query?outFields=*"
        f"{envelope}{HSIP_SUFFIX}"
    )


def _coordinates(value: Any) -> list[float]:
    if not isinstance(value, list):
        return []
    if all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in value):
        return [float(v) for v in value]
    return []


def _features(data: Any) -> Iterable[dict]:
    if not isinstance(data, dict):
        return []
    features = data.get("features")
    if not isinstance(features, list):
        return []
    return [item for item in features if isinstance(item, dict)]


def parse_features(
    data: str | bytes, layer: Layer
) -> list[CriticalInfrastructureFeature]:
    """Read the features of a GeoJSON reply, labelled with the layer's categories.

    Text that is not JSON yields no features.
    """
    try:
        decoded = json.loads(data)
    except (ValueError, UnicodeDecodeError):
        return []
    damage_category = layer.damage_category()
    occupancy_type = layer.occupancy_type()
    parsed = []
    for item in _features(decoded):
        properties = item.get("properties")
        name = ""
        if isinstance(properties, dict) and isinstance(properties.get("NAME"), str):
            name = properties["NAME"]
        geometry = item.get("geometry")
        geometry_type = ""
        coordinates: list[float] = []
        if isinstance(geometry, dict):
            if isinstance(geometry.get("type"), str):
                geometry_type = geometry["type"]
            coordinates = _coordinates(geometry.get("coordinates"))
        parsed.append(
            CriticalInfrastructureFeature(
                name=name,
                damage_category=damage_category,
                occupancy_type=occupancy_type,
                geometry=GeoJsonGeometry(type=geometry_type, coordinates=coordinates),
            )
        )
    return parsed


def _fetch(url: str) -> bytes:
    context = ssl.create_default_context()
    context.check_hostname = False
    context.verify_mode = ssl.CERT_NONE
    with urllib.request.urlopen(url, context=context) as response:
        return response.read()


@dataclass
class HsipProvider(StreamProvider):
    """Streams facilities of the chosen layers from the HSIP services."""

    filter_list: list[Layer] = field(default_factory=list)

    def by_bbox(self, bbox: BBox, processor: StreamProcessor) -> None:
        """Query every layer within the box and hand each facility to the processor."""
        for layer in self.filter_list:
            url = build_query_url(layer, bbox)
            print(url)
            for feature in parse_features(_fetch(url), layer):
                processor(feature)

    def by_fips(self, fips_code: str, processor: StreamProcessor) -> None:
        """FIPS queries are not offered by the HSIP services."""
        raise ValueError("fips query is not available for the hsip provider")