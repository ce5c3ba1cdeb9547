import pytest

from wp_client.bio import DataSource, Xref
from wp_client.exceptions import ConverterError
from wp_client.gpml import (
    GPML_NAMESPACE,
    Comment,
    DataNode,
    Interaction,
    Pathway,
    Point,
    read_gpml,
    write_gpml,
)


def test_read_sample(sample_gpml):
    p = read_gpml(sample_gpml)
    assert p.name == "Sample pathway"
    assert p.organism == "Homo sapiens"
    assert p.attributes == {"Version": "20110615", "License": "CC0"}
    assert (p.board_width, p.board_height) == (400.0, 300.0)
    assert p.comments == [Comment(text="A small test pathway.", source="WikiPathways-description")]
    assert [n.graph_id for n in p.data_nodes] == ["a1", "b2"]
    assert p.get_data_node("a1").graphics["CenterX"] == "100.0"
    assert p.get_data_node("b2").xref is None
    assert p.xrefs() == [Xref("7157", DataSource.get_by_code("L"))]

    (interaction,) = p.interactions
    assert interaction.points[1] == Point(160.0, 50.0, graph_ref="b2", arrow_head="mim-inhibition")
    assert interaction.graphics == {"ZOrder": "12288", "LineThickness": "1.0"}
    assert p.labels[0].text_label == "Nucleus"


def test_round_trip_preserves_model(sample_gpml):
    p = read_gpml(sample_gpml)
    assert read_gpml(write_gpml(p)) == p


def test_round_trip_built_model():
    p = Pathway(
        name="Built",
        organism="Mus musculus",
        data_nodes=[
            DataNode("n1", "Trp53", "GeneProduct", Xref("22059", DataSource.get_by_code("L"))),
            DataNode("n2", "unknown db", xref=Xref("X1", DataSource.get_by_full_name("Some DB"))),
            DataNode("n3", "no db", xref=Xref("X2")),
        ],
        interactions=[Interaction(points=[Point(1, 2, "n1"), Point(3.5, 4, "n2", "Arrow")])],
    )
    assert read_gpml(write_gpml(p)) == p


def test_write_uses_gpml_namespace():
    text = write_gpml(Pathway(name="Empty"))
    assert text.startswith('<?xml version="1.0" encoding="UTF-8"?>')
    assert f'xmlns="{GPML_NAMESPACE}"' in text
    assert "ns0:" not in text


def test_read_without_namespace():
    p = read_gpml('<Pathway Name="plain"><DataNode GraphId="x" TextLabel="A"/></Pathway>')
    assert p.name == "plain"
    assert p.data_nodes == [DataNode("x", "A")]


@pytest.mark.parametrize(
    "text",
    [
        "",
        "not xml at all",
        "<Pathway><DataNode></Pathway>",
        "<Gpml Name='wrong root'/>",
        "<Pathway><DataNode TextLabel='no id'/></Pathway>",
        "<Pathway><Graphics BoardWidth='wide'/></Pathway>",
    ],
)
def test_bad_documents_raise_converter_error(text):
    with pytest.raises(ConverterError):
        read_gpml(text)


def test_write_rejects_non_pathway():
    with pytest.raises(ConverterError):
        write_gpml({"name": "dict"})


def test_unregistered_data_source_loses_its_code_in_round_trip():
    custom = DataSource("My DB", "Mdb")
    p = Pathway(name="x", data_nodes=[DataNode("n1", xref=Xref("42", custom))])
    back = read_gpml(write_gpml(p)).data_nodes[0].xref
    assert back == Xref("42", DataSource("My DB"))
    assert back.system_code is None


def test_write_rejects_data_node_without_graph_id():
    with pytest.raises(ConverterError):
        write_gpml(Pathway(name="x", data_nodes=[DataNode("", "orphan")]))
