"""wp_client.gpml

In-memory pathway model and a GPML reader/writer.

Only the parts of GPML that matter to a remote client are modelled: pathway
metadata, comments, data nodes with their xrefs, interactions and labels.
Elements outside that set are skipped when reading.

GPML stores only the full name of an xref database, so a round trip keeps
the system code of registered data sources (see :mod:`wp_client.bio`) and
drops it for unregistered ones.
"""
from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .bio import DataSource, Xref
from .exceptions import ConverterError

__all__ = [
    "GPML_NAMESPACE",
    "Comment",
    "DataNode",
    "Point",
    "Interaction",
    "Label",
    "Pathway",
    "read_gpml",
    "write_gpml",
]

logger = logging.getLogger(__name__)

GPML_NAMESPACE = "http://pathvisio.org/GPML/2013a"

_MODELLED = {"Comment", "Graphics", "DataNode", "Interaction", "Label"}


@dataclass
class Comment:
    text: str
    source: Optional[str] = None


@dataclass
class DataNode:
    graph_id: str
    text_label: str = ""
    type: Optional[str] = None
    xref: Optional[Xref] = None
    group_ref: Optional[str] = None
    graphics: Dict[str, str] = field(default_factory=dict)


@dataclass
class Point:
    x: float
    y: float
    graph_ref: Optional[str] = None
    arrow_head: Optional[str] = None


@dataclass
class Interaction:
    graph_id: Optional[str] = None
    points: List[Point] = field(default_factory=list)
    xref: Optional[Xref] = None
    graphics: Dict[str, str] = field(default_factory=dict)


@dataclass
class Label:
    graph_id: Optional[str]
    text_label: str = ""
    graphics: Dict[str, str] = field(default_factory=dict)


@dataclass
class Pathway:
    """A pathway diagram.

    ``attributes`` holds the root attributes other than ``Name`` and
    ``Organism`` (``Version``, ``Author``, ``License``, ...).
    """

    name: str = ""
    organism: Optional[str] = None
    attributes: Dict[str, str] = field(default_factory=dict)
    board_width: Optional[float] = None
    board_height: Optional[float] = None
    comments: List[Comment] = field(default_factory=list)
    data_nodes: List[DataNode] = field(default_factory=list)
    interactions: List[Interaction] = field(default_factory=list)
    labels: List[Label] = field(default_factory=list)

    def get_data_node(self, graph_id: str) -> Optional[DataNode]:
        return next((n for n in self.data_nodes if n.graph_id == graph_id), None)

    def xrefs(self) -> List[Xref]:
        """Xrefs of all data nodes that have one, in document order."""
        return [n.xref for n in self.data_nodes if n.xref is not None]


# ---------------------------------------------------------------- reading

def _local(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _float(raw: Optional[str], what: str) -> Optional[float]:
    if raw is None or raw == "":
        return None
    try:
        return float(raw)
    except ValueError:
        raise ConverterError(f"{what}: not a number: {raw!r}") from None


def _read_xref(elem: Optional[ET.Element]) -> Optional[Xref]:
    if elem is None:
        return None
    xid = (elem.attrib.get("ID") or "").strip()
    database = (elem.attrib.get("Database") or "").strip()
    if not xid and not database:
        return None
    return Xref(xid, DataSource.get_by_full_name(database) if database else None)


def _read_graphics(elem: ET.Element) -> Dict[str, str]:
    graphics = elem.find("{*}Graphics")
    return dict(graphics.attrib) if graphics is not None else {}


def _read_data_node(elem: ET.Element) -> DataNode:
    graph_id = elem.attrib.get("GraphId")
    if not graph_id:
        raise ConverterError("DataNode without GraphId")
    return DataNode(
        graph_id=graph_id,
        text_label=elem.attrib.get("TextLabel", ""),
        type=elem.attrib.get("Type"),
        xref=_read_xref(elem.find("{*}Xref")),
        group_ref=elem.attrib.get("GroupRef"),
        graphics=_read_graphics(elem),
    )


def _read_interaction(elem: ET.Element) -> Interaction:
    graphics_elem = elem.find("{*}Graphics")
    points: List[Point] = []
    graphics: Dict[str, str] = {}
    if graphics_elem is not None:
        graphics = dict(graphics_elem.attrib)
        for p in graphics_elem.findall("{*}Point"):
            points.append(
                Point(
                    x=_float(p.attrib.get("X"), "Point/@X") or 0.0,
                    y=_float(p.attrib.get("Y"), "Point/@Y") or 0.0,
                    graph_ref=p.attrib.get("GraphRef"),
                    arrow_head=p.attrib.get("ArrowHead"),
                )
            )
    return Interaction(
        graph_id=elem.attrib.get("GraphId"),
        points=points,
        xref=_read_xref(elem.find("{*}Xref")),
        graphics=graphics,
    )


def read_gpml(text: str) -> Pathway:
    """Parse a GPML document into a :class:`Pathway`.

    Raises :class:`ConverterError` if the XML is malformed or is not GPML.
    """
    try:
        root = ET.fromstring(text)
    except ET.ParseError as exc:
        raise ConverterError(f"malformed GPML: {exc}") from exc
    if _local(root.tag) != "Pathway":
        raise ConverterError(f"expected a Pathway root element, got {_local(root.tag)!r}")

    attrs = dict(root.attrib)
    pathway = Pathway(name=attrs.pop("Name", ""), organism=attrs.pop("Organism", None), attributes=attrs)

    for child in root:
        tag = _local(child.tag)
        if tag == "Comment":
            pathway.comments.append(Comment(text=child.text or "", source=child.attrib.get("Source")))
        elif tag == "Graphics":
            pathway.board_width = _float(child.attrib.get("BoardWidth"), "BoardWidth")
            pathway.board_height = _float(child.attrib.get("BoardHeight"), "BoardHeight")
        elif tag == "DataNode":
            pathway.data_nodes.append(_read_data_node(child))
        elif tag == "Interaction":
            pathway.interactions.append(_read_interaction(child))
        elif tag == "Label":
            pathway.labels.append(
                Label(
                    graph_id=child.attrib.get("GraphId"),
                    text_label=child.attrib.get("TextLabel", ""),
                    graphics=_read_graphics(child),
                )
            )
        elif tag not in _MODELLED:
            logger.debug(f"Skipping unmodelled GPML element <{tag}>")
    return pathway


# ---------------------------------------------------------------- writing

def _fmt(value: float) -> str:
    return repr(float(value))


def _q(tag: str) -> str:
    return f"{{{GPML_NAMESPACE}}}{tag}"


def _sub(parent: ET.Element, tag: str, attrs: Dict[str, Optional[str]]) -> ET.Element:
    return ET.SubElement(parent, _q(tag), {k: v for k, v in attrs.items() if v is not None})


def _write_xref(parent: ET.Element, xref: Optional[Xref]) -> None:
    if xref is None:
        _sub(parent, "Xref", {"Database": "", "ID": ""})
        return
    database = xref.data_source.full_name if xref.data_source else ""
    _sub(parent, "Xref", {"Database": database, "ID": xref.id})


def write_gpml(pathway: Pathway) -> str:
    """Serialize *pathway* to a GPML 2013a document string."""
    if not isinstance(pathway, Pathway):
        raise ConverterError(f"expected a Pathway, got {type(pathway).__name__}")

    root = ET.Element(_q("Pathway"), {"Name": pathway.name})
    if pathway.organism is not None:
        root.set("Organism", pathway.organism)
    for key, value in pathway.attributes.items():
        root.set(key, value)

    for comment in pathway.comments:
        elem = _sub(root, "Comment", {"Source": comment.source})
        elem.text = comment.text

    board = {}
    if pathway.board_width is not None:
        board["BoardWidth"] = _fmt(pathway.board_width)
    if pathway.board_height is not None:
        board["BoardHeight"] = _fmt(pathway.board_height)
    _sub(root, "Graphics", board)

    for node in pathway.data_nodes:
        if not node.graph_id:
            raise ConverterError(f"DataNode {node.text_label!r} has no graph_id")
        elem = _sub(
            root,
            "DataNode",
            {"GraphId": node.graph_id, "TextLabel": node.text_label, "Type": node.type, "GroupRef": node.group_ref},
        )
        _sub(elem, "Graphics", dict(node.graphics))
        _write_xref(elem, node.xref)

    for interaction in pathway.interactions:
        elem = _sub(root, "Interaction", {"GraphId": interaction.graph_id})
        graphics = _sub(elem, "Graphics", dict(interaction.graphics))
        for point in interaction.points:
            _sub(
                graphics,
                "Point",
                {
                    "X": _fmt(point.x),
                    "Y": _fmt(point.y),
                    "GraphRef": point.graph_ref,
                    "ArrowHead": point.arrow_head,
                },
            )
        _write_xref(elem, interaction.xref)

    for label in pathway.labels:
        elem = _sub(root, "Label", {"GraphId": label.graph_id, "TextLabel": label.text_label})
        _sub(elem, "Graphics", dict(label.graphics))

    _sub(root, "InfoBox", {"CenterX": "0.0", "CenterY": "0.0"})

    ET.register_namespace("", GPML_NAMESPACE)
    try:
        body = ET.tostring(root, encoding="unicode")
    except (TypeError, ValueError) as exc:
        raise ConverterError(f"cannot serialize pathway {pathway.name!r}: {exc}") from exc
    return '<?xml version="1.0" encoding="UTF-8"?>\n' + body
