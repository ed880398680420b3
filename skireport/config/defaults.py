"""Default resort table with pre-resolved api.weather.gov gridpoints."""

from skireport.config.schema import ResortConfig


def _resort(resort_id: str, gridpoint: str | None) -> ResortConfig:
    return ResortConfig(
        id=resort_id, name=resort_id.replace("_", " "), gridpoint=gridpoint
    )


DEFAULT_RESORTS: list[ResortConfig] = [
    _resort("Stevens_Pass", "SEW/164,66"),
    _resort("Snoqualmie_Pass", "SEW/151,53"),
    _resort("Crystal_Mountain", "SEW/144,30"),
    _resort("Mount_Baker", "SEW/156,122"),
    _resort("Mission_Ridge", "OTX/42,89"),
    _resort("Mount_Hood_Meadows", "PQR/143,88"),
    _resort("Mount_Hood_Skibowl", "PQR/139,87"),
    _resort("Timberline_Lodge", "PQR/135,95"),
    _resort("Mount_Bachelor", "PDT/22,39"),
    _resort("Schweitzer", "OTX/171,120"),
    _resort("Sun_Valley", "PIH/38,93"),
    _resort("Mammoth_Mountain", "REV/56,16"),
    _resort("Big_Bear_Mountain", "SGX/76,78"),
    _resort("Breckenridge", "BOU/24,52"),
    _resort("Alta", "SLC/107,166"),
    _resort("Brighton", "SLC/109,166"),
    _resort("Snowbird", "SLC/107,165"),
    _resort("Solitude", "SLC/109,167"),
    _resort("Deer_Valley", "SLC/113,167"),
    _resort("Park_City", "SLC/112,168"),
    _resort("Sundance", "SLC/108,157"),
    _resort("Powder_Mountain", "SLC/107,202"),
    _resort("Snowbasin", "SLC/103,195"),
    _resort("Brian_Head_Resort", "SLC/48,41"),
    _resort("Eagle_Point", "SLC/68,67"),
    _resort("Beaver_Mountain", "SLC/118,228"),
    # New Hampshire is outside the gridpoint coverage we resolved
    _resort("Mount_Washington", None),
]
