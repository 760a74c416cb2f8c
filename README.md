# floodconsequences

Building blocks for estimating the consequences of flood hazards: hazard
events and their parameters, consequence results and their JSON form, the
interfaces that receptors, receptor streams and result writers implement,
crop season and cost functions, critical infrastructure facilities, and
indirect economic impacts.

The package depends only on the standard library and needs Python 3.10 or
later.

## Modules

- `floodconsequences.geography`: `Location` (x, y and an optional SRID),
  `BBox` holding `[minx, miny, maxx, maxy]` with `contains(location)` and
  `to_string()` (the closed ring of corners as comma separated values), and
  `GeoJsonGeometry` with `to_location()`.
- `floodconsequences.parameters`: `Parameter`, a set of flags (depth,
  velocity, arrival time, erosion, duration, wave height, medium and high wave
  height, salinity, qualitative, depth times velocity). `parameter_to_string`
  and `parameter_from_string` convert to and from the comma separated names;
  `parameter_to_json` and `parameter_from_json` do the same as a quoted JSON
  string. Unknown names are ignored when reading. `HazardData` holds the raw
  values read at one location.
- `floodconsequences.events`: `DepthEvent`, `ArrivalandDurationEvent`,
  `ArrivalDepthandDurationEvent`, `QualitativeEvent`, `DepthandDVEvent` and
  `CoastalEvent`, all `HazardEvent`s with `parameters()`, `has(parameter)` and
  `to_json()`. Values an event does not carry read as `-901.0`.
  `new_coastal_event` returns a copy of a coastal event with an unset depth or
  wave height marked as `-901.0`.
- `floodconsequences.results`: `Result` holds headers and values;
  `fetch(header)` returns a value or raises `KeyError`. `Results` collects rows
  with `add_result`. Both render as JSON with `to_json()`.
- `floodconsequences.receptors`: the abstract `Receptor` (`compute(event)`,
  `location()`), `StreamProvider` (`by_fips`, `by_bbox`), `ResultsWriter`
  (`write`, `close`, usable as a context manager) and `ContinuousDistribution`,
  plus `ParameterValue` for a value that is either a number or a distribution
  (`central_tendency()`, `sample_value(probability)`).
- `floodconsequences.crops.cases`: `CropDamageCase` (unassigned, impacted, not
  impacted during season, planting delayed, not planted, substitute crop), with
  a readable `label`.
- `floodconsequences.crops.schedule`: `CropSchedule` and
  `compute_crop_damage_case(event)`, which classifies an event's arrival day
  and duration against the planting season, including winter crops.
- `floodconsequences.crops.damagefunction`: `DamageFunction`, monthly damage
  percentages by flood duration in days; `compute_damage_percent(event)`
  interpolates between durations for the arrival month.
- `floodconsequences.crops.production`: `build_production_function` cumulates
  monthly variable and fixed costs from the planting dates to maturity into a
  `ProductionFunction`; `exposed_value(event)` gives the costs sunk by the
  arrival month. `cumulate_monthly_costs` raises `ValueError` when the days to
  maturity exceed the year. `is_leap_year` is also available.
- `floodconsequences.ecam`: `parse_ecam_result(lines)` reads a regional
  economic impact reply into an `EcamResult` of production and employment
  impacts by sector (`EcamSectorResultOutput`), raising `EcamError` on an error
  code or an unexpected layout; `parse_sector_result` and `sector_name` handle
  single lines and sector abbreviations. `compute_ecam` queries the ECAM web
  service directly, with certificate checking turned off. `CapitalAndLabor`
  holds totals for an area.
- `floodconsequences.criticalinfrastructure`: `Layer` lists the HSIP facility
  layers, each with `dataset_name()`, `occupancy_type()` and
  `damage_category()`. `build_query_url` builds a layer's query for a bounding
  box and `parse_features` reads a GeoJSON reply into
  `CriticalInfrastructureFeature` receptors. `HsipProvider.by_bbox` fetches
  each chosen layer (printing the URL, certificate checking off) and hands
  every facility to a processor; `by_fips` raises `ValueError`.

## Examples

```python
from datetime import datetime

from floodconsequences.crops.damagefunction import DamageFunction
from floodconsequences.crops.production import build_production_function
from floodconsequences.crops.schedule import CropSchedule
from floodconsequences.events import ArrivalandDurationEvent
from floodconsequences.parameters import (
    Parameter, parameter_from_string, parameter_to_string,
)

parameter_to_string(Parameter.DEPTH | Parameter.SALINITY)   # "depth, salinity"
parameter_from_string("depth, salinity")                   # DEPTH | SALINITY

event = ArrivalandDurationEvent(arrival_time=datetime(1984, 1, 22), duration=7)
schedule = CropSchedule(datetime(1984, 1, 25), datetime(1984, 1, 31), 100)
schedule.compute_crop_damage_case(event)                   # PLANTING_DELAYED

curves = DamageFunction({
    1.0: [1.1 + m for m in range(12)],
    2.0: [1.2 + m for m in range(12)],
})
curves.compute_damage_percent(
    ArrivalandDurationEvent(arrival_time=datetime(1984, 1, 22), duration=1.5)
)                                                          # 1.15

ones = [1.0] * 12
season = CropSchedule(datetime(1984, 1, 22), datetime(1984, 1, 28), 330)
production = build_production_function(ones, ones, ones, season, 1.0, 0.1)
production.cumulative_monthly_production_costs_early      # [2.0, 4.0, ..., 24.0]
```

## What the package does not do

There is no command-line tool and no complete compute run. The package
provides no hazard sources (no reading of depth grids or other rasters), no
structure inventories, and no concrete results writers or file output:
`StreamProvider` and `ResultsWriter` are interfaces for you to implement, and
`HsipProvider` is the only stream provider included. Crop damage is available
as its parts (season classification, damage curves and production costs),
not as a priced crop receptor.