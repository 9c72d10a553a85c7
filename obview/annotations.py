"""Board annotations kept in SQLite, and per-part/net notes kept in YAML."""

from __future__ import annotations

import enum
import logging
import sqlite3
from dataclasses import dataclass, field
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

FORMAT_VERSION = "0.0.2"

_CREATE_TABLE = (
    "CREATE TABLE annotations("
    "ID INTEGER PRIMARY KEY AUTOINCREMENT,"
    "VISIBLE INTEGER,"
    "PIN TEXT,"
    "PART TEXT,"
    "NET TEXT,"
    "POSX INTEGER,"
    "POSY INTEGER,"
    "SIDE INTEGER,"
    "NOTE TEXT );"
)


@dataclass
class Annotation:
    """A note pinned to a position on one side of the board."""

    id: int
    side: int
    x: float
    y: float
    net: str = ""
    part: str = ""
    pin: str = ""
    note: str = ""
    hovered: bool = False


class PinVoltageFlag(enum.Enum):
    UNKNOWN = 0
    INPUT = 1
    OUTPUT = 2


class PartAngle(enum.Enum):
    DEG_0 = 0
    DEG_270 = 1
    DEG_180 = 2
    DEG_90 = 3
    SORTED = 4


def _enum_to_text(member: enum.Enum) -> str:
    return member.name.lower()


def _enum_from_text(cls, text):
    text = str(text).strip()
    try:
        return cls[text.upper()]
    except KeyError:
        pass
    try:
        return cls(int(text))
    except ValueError as exc:
        raise ValueError(f"invalid {cls.__name__} value: {text!r}") from exc


def _as_mapping(node) -> dict:
    return node if isinstance(node, dict) else {}


@dataclass
class PinInfo:
    """Measurements recorded for one pin."""

    part_name: str = ""
    pin_name: str = ""
    diode: str = ""
    voltage: str = ""
    ohm: str = ""
    ohm_black: str = ""
    voltage_flag: PinVoltageFlag = PinVoltageFlag.UNKNOWN

    def __bool__(self) -> bool:
        return bool(
            self.diode
            or self.voltage
            or self.ohm
            or self.ohm_black
            or self.voltage_flag is not PinVoltageFlag.UNKNOWN
        )

    def to_dict(self) -> dict:
        data = {}
        for name in ("diode", "voltage", "ohm", "ohm_black"):
            value = getattr(self, name)
            if value:
                data[name] = value
        if self.voltage_flag is not PinVoltageFlag.UNKNOWN:
            data["voltage_flag"] = _enum_to_text(self.voltage_flag)
        return data

    @classmethod
    def from_dict(cls, data, part_name="", pin_name="") -> PinInfo:
        data = _as_mapping(data)
        info = cls(part_name=part_name, pin_name=pin_name)
        for name in ("diode", "voltage", "ohm", "ohm_black"):
            if name in data:
                setattr(info, name, str(data[name]))
        if "voltage_flag" in data:
            info.voltage_flag = _enum_from_text(PinVoltageFlag, data["voltage_flag"])
        return info


@dataclass
class PartInfo:
    """Notes recorded for one part, with its pins."""

    part_name: str = ""
    part_type: str = ""
    angle: PartAngle = PartAngle.DEG_0
    pins: dict[str, PinInfo] = field(default_factory=dict)

    def __bool__(self) -> bool:
        return bool(self.part_type or self.angle is not PartAngle.DEG_0 or self.pins)

    def to_dict(self) -> dict:
        data: dict = {}
        if self.part_type:
            data["part_type"] = self.part_type
        if self.pins:
            data["pins"] = {name: self.pins[name].to_dict() for name in sorted(self.pins)}
        if self.angle is not PartAngle.DEG_0:
            data["angle"] = _enum_to_text(self.angle)
        return data

    @classmethod
    def from_dict(cls, data, part_name="") -> PartInfo:
        data = _as_mapping(data)
        info = cls(part_name=part_name)
        if "part_type" in data:
            info.part_type = str(data["part_type"])
        for pin_name, pin_data in _as_mapping(data.get("pins")).items():
            info.pins[str(pin_name)] = PinInfo.from_dict(pin_data, part_name, str(pin_name))
        if "angle" in data:
            info.angle = _enum_from_text(PartAngle, data["angle"])
        return info


@dataclass
class NetInfo:
    """Notes recorded for one net."""

    name: str = ""
    showname: str = ""

    def __bool__(self) -> bool:
        return bool(self.showname)

    def to_dict(self) -> dict:
        return {"showname": self.showname} if self.showname else {}

    @classmethod
    def from_dict(cls, data, name="") -> NetInfo:
        data = _as_mapping(data)
        info = cls(name=name)
        if "showname" in data:
            info.showname = str(data["showname"])
        return info


class Annotations:
    """Annotations and part/net notes belonging to one board file."""

    def __init__(self, filename="") -> None:
        self.filename = str(filename)
        self.sqldb: sqlite3.Connection | None = None
        self.annotations: list[Annotation] = []
        self.part_infos: dict[str, PartInfo] = {}
        self.net_infos: dict[str, NetInfo] = {}

    def __enter__(self) -> Annotations:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def database_path(self) -> str:
        """Board file name with its last dot made an underscore, plus ``.sqlite3``."""
        name = self.filename
        pos = name.rfind(".")
        if pos != -1:
            name = name[:pos] + "_" + name[pos + 1 :]
        return name + ".sqlite3"

    @property
    def yaml_path(self) -> Path:
        return Path(self.filename + ".yaml")

    def _db(self) -> sqlite3.Connection:
        if self.sqldb is None:
            raise RuntimeError("annotation database is not open")
        return self.sqldb

    def init(self) -> None:
        """Create the annotations table unless it is already there."""
        db = self._db()
        try:
            db.execute(_CREATE_TABLE)
        except sqlite3.OperationalError as exc:
            logger.debug("SQL error: %s", exc)
        else:
            logger.debug("Table created successfully")

    def load(self) -> None:
        """Open the database next to the board file and read its annotations."""
        self.close()
        self.sqldb = sqlite3.connect(self.database_path, isolation_level=None)
        logger.debug("Opened database successfully")
        self.init()
        self.generate_list()

    def close(self) -> None:
        if self.sqldb is not None:
            self.sqldb.close()
            self.sqldb = None

    def generate_list(self) -> list[Annotation]:
        """Reload the visible annotations from the database."""
        rows = self._db().execute(
            "SELECT id,side,posx,posy,net,part,pin,note from annotations where visible=1;"
        ).fetchall()
        self.annotations = []
        for ann_id, side, posx, posy, net, part, pin, note in rows:
            ann = Annotation(
                id=int(ann_id),
                side=int(side or 0),
                x=float(posx or 0),
                y=float(posy or 0),
                net="" if net is None else str(net),
                part="" if part is None else str(part),
                pin="" if pin is None else str(pin),
                note="" if note is None else str(note),
            )
            logger.debug(
                "%d(%d:%f,%f) Net:%s Part:%s Pin:%s: Note:%s added",
                ann.id, ann.side, ann.x, ann.y, ann.net, ann.part, ann.pin, ann.note,
            )
            self.annotations.append(ann)
        return self.annotations

    def add(self, side, x, y, net, part, pin, note) -> None:
        """Store a new visible annotation; positions are rounded to whole units."""
        self._db().execute(
            "INSERT into annotations ( visible, side, posx, posy, net, part, pin, note ) "
            "values ( 1, ?, ?, ?, ?, ?, ?, ? );",
            (int(side), int(round(x)), int(round(y)), net, part, pin, note),
        )

    def remove(self, annotation_id) -> None:
        """Hide an annotation; the row is kept."""
        self._db().execute(
            "UPDATE annotations set visible = 0 where id=?;", (int(annotation_id),)
        )

    def update(self, annotation_id, note) -> None:
        self._db().execute(
            "UPDATE annotations set note = ? where id=?;", (note, int(annotation_id))
        )

    def new_part_info(self, part_name) -> PartInfo:
        info = self.part_infos.setdefault(part_name, PartInfo())
        info.part_name = part_name
        return info

    def new_pin_info(self, part_name, pin_name) -> PinInfo:
        info = self.new_part_info(part_name).pins.setdefault(pin_name, PinInfo())
        info.part_name = part_name
        info.pin_name = pin_name
        return info

    def new_net_info(self, net_name) -> NetInfo:
        info = self.net_infos.setdefault(net_name, NetInfo())
        info.name = net_name
        return info

    def save_pin_infos(self) -> None:
        """Drop empty entries and write part and net notes to the YAML file."""
        for part in self.part_infos.values():
            part.pins = {name: pin for name, pin in part.pins.items() if pin}
        self.part_infos = {name: part for name, part in self.part_infos.items() if part}

        document: dict = {"Version": FORMAT_VERSION}
        if self.part_infos:
            document["PartInfos"] = {
                name: self.part_infos[name].to_dict() for name in sorted(self.part_infos)
            }
        if self.net_infos:
            document["NetInfos"] = {
                name: self.net_infos[name].to_dict() for name in sorted(self.net_infos)
            }
        self.yaml_path.write_text(
            yaml.safe_dump(document, sort_keys=False, default_flow_style=False),
            encoding="utf-8",
        )

    def refresh_pin_infos(self) -> None:
        """Replace part and net notes with what the YAML file holds."""
        self.part_infos = {}
        self.net_infos = {}
        try:
            text = self.yaml_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return
        root = _as_mapping(yaml.load(text, Loader=yaml.BaseLoader))
        for name, data in _as_mapping(root.get("PartInfos")).items():
            self.part_infos[str(name)] = PartInfo.from_dict(data, str(name))
        for name, data in _as_mapping(root.get("NetInfos")).items():
            self.net_infos[str(name)] = NetInfo.from_dict(data, str(name))