import pytest

from wp_client.compat import LegacyWikiPathwaysClient


def test_find_by_xref_id_warns_and_forwards(session, reply):
    client = LegacyWikiPathwaysClient(base_url="https://wp.test", session=session)
    reply({"result": [{"id": "WP4"}]})
    with pytest.warns(DeprecationWarning):
        results = client.find_pathways_by_xref_id("7157")
    assert [r.id for r in results] == ["WP4"]
    params = session.get.call_args.kwargs["params"]
    assert params["ids"] == ["7157"]
    assert params["codes"] == [""]
