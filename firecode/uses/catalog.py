"""Use-code display names, injected into the engine for message text."""

from __future__ import annotations

import abc

_USE_LABELS: dict[str, str] = {
    "01_i": "(1)i Theatre, cinema, entertainment hall, viewing venue",
    "01_ro": "(1)ro Public hall, assembly hall",
    "02_i": "(2)i Cabaret, cafe, nightclub",
    "02_ro": "(2)ro Amusement arcade, dance hall",
    "02_ha": "(2)ha Adult entertainment shop",
    "02_ni": "(2)ni Karaoke box, internet cafe",
    "03_i": "(3)i Waiting house, entertainment restaurant",
    "03_ro": "(3)ro Restaurant, eating and drinking establishment",
    "04": "(4) Department store, market, retail shop, exhibition hall",
    "05_i": "(5)i Hotel, inn, lodging house",
    "05_ro": "(5)ro Dormitory, apartment house",
    "06_i_1": "(6)i(1) Hospital with specified departments",
    "06_i_2": "(6)i(2) Clinic with specified departments",
    "06_i_3": "(6)i(3) Hospital or clinic with beds, maternity home with beds",
    "06_i_4": "(6)i(4) Clinic or maternity home without beds",
    "06_ro_1": "(6)ro(1) Elderly nursing home, short-stay facility",
    "06_ro_2": "(6)ro(2) Relief facility",
    "06_ro_3": "(6)ro(3) Infant home",
    "06_ro_4": "(6)ro(4) Residential facility for persons with disabilities",
    "06_ro_5": "(6)ro(5) Residential support facility for persons with disabilities",
    "06_ha_1": "(6)ha(1) Elderly day-care facility",
    "06_ha_2": "(6)ha(2) Shelter, welfare facility",
    "06_ha_3": "(6)ha(3) Nursery, child welfare facility",
    "06_ha_4": "(6)ha(4) Child development support centre",
    "06_ha_5": "(6)ha(5) Day facility for persons with disabilities",
    "06_ni": "(6)ni Kindergarten, special needs school",
    "07": "(7) School",
    "08": "(8) Library, museum, art gallery",
    "09_i": "(9)i Sauna, steam bath",
    "09_ro": "(9)ro Other public bath",
    "10": "(10) Vehicle station, ship or aircraft terminal",
    "11": "(11) Shrine, temple, church",
    "12_i": "(12)i Factory, workshop",
    "12_ro": "(12)ro Film or television studio",
    "13_i": "(13)i Garage, parking structure",
    "13_ro": "(13)ro Aircraft hangar",
    "14": "(14) Warehouse",
    "15": "(15) Other business premises",
    "16_i": "(16)i Composite use including specified uses",
    "16_ro": "(16)ro Other composite use",
    "16_2": "(16-2) Underground shopping mall",
    "16_3": "(16-3) Quasi-underground shopping mall",
    "17": "(17) Important cultural property",
    "18": "(18) Arcade of 50 m or longer",
    "19": "(19) Designated forest",
    "20": "(20) Designated vehicle or vessel",
}


class UseCatalog(abc.ABC):
    """Lookup of human-readable labels for use codes."""

    @abc.abstractmethod
    def display_name_for(self, code: str | None) -> str:
        """Return the label used in judgement messages."""


class TableUseCatalog(UseCatalog):
    """Catalog backed by the annexed use table.

    Parameters
    ----------
    labels:
        Optional overrides merged over the built-in table.
    """

    def __init__(self, labels: dict[str, str] | None = None) -> None:
        self._labels = dict(_USE_LABELS)
        if labels:
            self._labels.update(labels)

    def display_name_for(self, code: str | None) -> str:
        if not code:
            return "unknown"
        return self._labels.get(code, code)
