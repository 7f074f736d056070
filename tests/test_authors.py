import json

from core.authors import decode_authors, encode_authors, split_authors
from schemas.project_schema import ResourceCreate, ResourceResponse


def test_encode_trims_and_drops_blank_names():
    assert json.loads(encode_authors([" Ada ", "", "Grace", "   "])) == ["Ada", "Grace"]


def test_decode_json_list():
    assert decode_authors('["Ada", "Grace"]') == ["Ada", "Grace"]


def test_decode_legacy_plain_text_is_one_author():
    assert decode_authors("Ada Lovelace, Grace Hopper") == ["Ada Lovelace, Grace Hopper"]


def test_decode_json_string_scalar():
    assert decode_authors('"Ada"') == ["Ada"]


def test_decode_empty_values():
    assert decode_authors(None) == []
    assert decode_authors("") == []
    assert decode_authors("[]") == []


def test_decode_non_list_json_falls_back_to_raw():
    assert decode_authors("42") == ["42"]


def test_split_comma_separated_form_value():
    assert split_authors("Ada,  Grace , ,") == ["Ada", "Grace"]


def test_create_payload_accepts_comma_string():
    payload = ResourceCreate(title="X", summary="S", authors="Ada, Grace")
    assert payload.authors == ["Ada", "Grace"]


def test_create_payload_accepts_aliases():
    payload = ResourceCreate(title="X", summary="S", authors=["Ada"], pitchDeck="https://deck", estimatedResources="2 FTE")
    assert payload.pitch_deck == "https://deck"
    assert payload.estimated_resources == "2 FTE"


def test_response_decodes_stored_text():
    resp = ResourceResponse(id=1, author_id="u1", title="X", summary="S", authors="legacy name")
    assert resp.authors == ["legacy name"]
