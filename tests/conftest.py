from unittest.mock import MagicMock

import pytest
import requests

from wp_client.client import WikiPathwaysClient

SAMPLE_GPML = """<?xml version="1.0" encoding="UTF-8"?>
<Pathway xmlns="http://pathvisio.org/GPML/2013a" Name="Sample pathway" Organism="Homo sapiens" Version="20110615" License="CC0">
  <Comment Source="WikiPathways-description">A small test pathway.</Comment>
  <BiopaxRef>abc</BiopaxRef>
  <Graphics BoardWidth="400.0" BoardHeight="300.0" />
  <DataNode TextLabel="TP53" GraphId="a1" Type="GeneProduct">
    <Graphics CenterX="100.0" CenterY="50.0" Width="80.0" Height="20.0" />
    <Xref Database="Entrez Gene" ID="7157" />
  </DataNode>
  <DataNode TextLabel="MDM2" GraphId="b2" Type="GeneProduct">
    <Graphics CenterX="200.0" CenterY="50.0" Width="80.0" Height="20.0" />
    <Xref Database="" ID="" />
  </DataNode>
  <Interaction GraphId="i1">
    <Graphics ZOrder="12288" LineThickness="1.0">
      <Point X="140.0" Y="50.0" GraphRef="a1" />
      <Point X="160.0" Y="50.0" GraphRef="b2" ArrowHead="mim-inhibition" />
    </Graphics>
    <Xref Database="" ID="" />
  </Interaction>
  <Label TextLabel="Nucleus" GraphId="l1">
    <Graphics CenterX="150.0" CenterY="150.0" Width="60.0" Height="20.0" />
  </Label>
  <InfoBox CenterX="0.0" CenterY="0.0" />
</Pathway>
"""


def _reply(session, payload, method="get"):
    resp = MagicMock()
    resp.json.return_value = payload
    resp.raise_for_status.return_value = None
    getattr(session, method).return_value = resp
    return resp


@pytest.fixture
def session():
    s = MagicMock(spec=requests.Session)
    s.headers = {}
    return s


@pytest.fixture
def client(session):
    return WikiPathwaysClient(base_url="https://wp.test/", session=session)


@pytest.fixture
def sample_gpml():
    return SAMPLE_GPML


@pytest.fixture
def reply(session):
    """Make ``session.<method>`` return a response whose JSON is the given payload."""

    def _set(payload, method="get"):
        return _reply(session, payload, method)

    return _set
