# Copyright (c) 2026 Conique
# SPDX-License-Identifier: MIT

"""Tests for the share-URL state token."""

import base64
import json
import logging

import pytest

from conique.actions import import_css
from conique.defaults import default_state
from conique.runtime import (
    decode_state,
    encode_state,
    state_from_url,
    with_state,
)
from conique.schema import AppState, ColorStop, GradientLayer, GradientType, Position


def _b64(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def _state_dict(**overrides):
    data = {
        "layers": [
            {
                "id": 1,
                "type": "conic",
                "from": 0,
                "at": {"x": 50, "y": 50},
                "stops": [
                    {"color": "#ff0000", "pos": 0},
                    {"color": "#0000ff", "pos": 360},
                ],
                "enabled": True,
                "opacity": 1,
            }
        ],
        "previewW": 300,
        "previewH": 180,
        "selectedLayerId": 1,
    }
    data.update(overrides)
    return data


@pytest.fixture
def edge_state():
    return AppState(
        layers=(
            GradientLayer(
                id=4,
                type=GradientType.RADIAL,
                from_angle=None,
                at=Position(-12.5, 300),
                stops=(
                    ColorStop("rgba(1, 2, 3, 0.25)", -40.125),
                    ColorStop("hsl(10, 20%, 30%)", 1000),
                ),
                enabled=False,
                opacity=0.25,
            ),
            GradientLayer(id=9, type=GradientType.LINEAR, stops=()),
            GradientLayer(
                id=10,
                type=GradientType.CONIC,
                stops=(ColorStop("#abc", 12),),
            ),
        ),
        preview_w=1600,
        preview_h=50,
        selected_layer_id=99,
    )


class TestRoundtrip:

    def test_default_state(self):
        state = default_state()
        assert decode_state(encode_state(state)) == state

    def test_edge_values(self, edge_state):
        assert decode_state(encode_state(edge_state)) == edge_state

    def test_urlsafe_alphabet(self, edge_state):
        token = encode_state(edge_state, urlsafe=True)
        assert "+" not in token
        assert "/" not in token
        assert decode_state(token) == edge_state

    def test_empty_layer_list(self):
        state = AppState(layers=(), preview_w=10, preview_h=10, selected_layer_id=0)
        assert decode_state(encode_state(state)) == state

    def test_leading_hash_accepted(self):
        state = default_state()
        assert decode_state("#" + encode_state(state)) == state

    def test_missing_padding_accepted(self, edge_state):
        token = encode_state(edge_state).rstrip("=")
        assert decode_state(token) == edge_state


class TestWireFormat:

    def test_token_is_base64_json(self):
        raw = base64.b64decode(encode_state(default_state()))
        data = json.loads(raw)
        assert set(data) == {"layers", "previewW", "previewH", "selectedLayerId"}
        assert set(data["layers"][0]) == {
            "id", "type", "from", "at", "stops", "enabled", "opacity",
        }

    def test_json_is_compact(self):
        raw = base64.b64decode(encode_state(default_state())).decode("utf-8")
        assert ": " not in raw
        assert '"previewW":300,"previewH":180' in raw

    def test_browser_token_decodes(self):
        """A token built like ``btoa(JSON.stringify(state))``."""
        token = _b64(json.dumps(_state_dict(), separators=(",", ":")))
        state = decode_state(token)
        assert state == AppState(
            layers=(
                GradientLayer(
                    id=1,
                    type=GradientType.CONIC,
                    from_angle=0,
                    at=Position(50, 50),
                    stops=(ColorStop("#ff0000", 0), ColorStop("#0000ff", 360)),
                ),
            ),
            preview_w=300,
            preview_h=180,
            selected_layer_id=1,
        )

    def test_absent_optional_layer_fields_default(self):
        token = _b64(json.dumps(_state_dict(layers=[{"id": 3, "type": "linear"}])))
        layer = decode_state(token).layers[0]
        assert layer.from_angle == 0
        assert layer.at == Position(50, 50)
        assert layer.stops == ()
        assert layer.enabled is True
        assert layer.opacity == 1

    def test_null_from_stays_none(self):
        data = _state_dict()
        data["layers"][0]["from"] = None
        assert decode_state(_b64(json.dumps(data))).layers[0].from_angle is None

    def test_float_dimensions_accepted(self):
        token = _b64(json.dumps(_state_dict(previewW=320.5)))
        assert decode_state(token).preview_w == 320.5


class TestRejection:

    @pytest.mark.parametrize(
        "token",
        ["", "   ", "#", "not base64!!", "@@@@", "YQ", 12345, None],
    )
    def test_undecodable(self, token):
        assert decode_state(token) is None

    def test_not_json(self):
        assert decode_state(_b64("not json")) is None

    def test_invalid_utf8(self):
        assert decode_state(base64.b64encode(b"\xff\xfe\xfd").decode("ascii")) is None

    @pytest.mark.parametrize("payload", ["[1, 2]", '"text"', "42", "null"])
    def test_top_level_not_object(self, payload):
        assert decode_state(_b64(payload)) is None

    def test_missing_layers(self):
        data = _state_dict()
        del data["layers"]
        assert decode_state(_b64(json.dumps(data))) is None

    def test_layers_not_list(self):
        assert decode_state(_b64(json.dumps(_state_dict(layers={"id": 1})))) is None

    @pytest.mark.parametrize("key", ["previewW", "previewH", "selectedLayerId"])
    def test_missing_number(self, key):
        data = _state_dict()
        del data[key]
        assert decode_state(_b64(json.dumps(data))) is None

    @pytest.mark.parametrize("value", ["300", True, None, [300]])
    def test_non_numeric_dimension(self, value):
        assert decode_state(_b64(json.dumps(_state_dict(previewW=value)))) is None

    def test_unknown_gradient_type(self):
        data = _state_dict()
        data["layers"][0]["type"] = "diamond"
        assert decode_state(_b64(json.dumps(data))) is None

    def test_opacity_out_of_range(self):
        data = _state_dict()
        data["layers"][0]["opacity"] = 2
        assert decode_state(_b64(json.dumps(data))) is None

    def test_layer_missing_id(self):
        data = _state_dict()
        del data["layers"][0]["id"]
        assert decode_state(_b64(json.dumps(data))) is None

    def test_layer_not_object(self):
        assert decode_state(_b64(json.dumps(_state_dict(layers=[1, 2])))) is None

    def test_stop_missing_pos(self):
        data = _state_dict()
        data["layers"][0]["stops"] = [{"color": "#fff"}]
        assert decode_state(_b64(json.dumps(data))) is None

    @pytest.mark.parametrize("payload", ["[" * 100000, '{"a":' * 100000])
    def test_deeply_nested_json(self, payload):
        assert decode_state(_b64(payload)) is None

    @pytest.mark.parametrize(
        "field, value",
        [
            ("id", None),
            ("id", "1"),
            ("id", True),
            ("from", "10"),
            ("at", {"x": "50", "y": 50}),
            ("at", {"x": 50, "y": None}),
            ("enabled", "yes"),
            ("opacity", "0.5"),
            ("opacity", None),
        ],
    )
    def test_mistyped_layer_field(self, field, value):
        data = _state_dict()
        data["layers"][0][field] = value
        assert decode_state(_b64(json.dumps(data))) is None

    @pytest.mark.parametrize(
        "stop",
        [{"color": "#fff", "pos": "x"}, {"color": 5, "pos": 0}, {"color": "#fff", "pos": None}],
    )
    def test_mistyped_stop(self, stop):
        data = _state_dict()
        data["layers"][0]["stops"] = [stop]
        assert decode_state(_b64(json.dumps(data))) is None

    def test_accepted_states_feed_the_engine(self):
        """Every decoded state serializes and accepts edits."""
        state = decode_state(_b64(json.dumps(_state_dict())))
        assert state.to_css().startswith("background: conic-gradient(")
        assert import_css(state, "linear-gradient(#f00, #00f)").layers[0].id == 2

    def test_failure_is_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="conique.runtime.serializers.token"):
            assert decode_state(_b64("[]")) is None
        assert "state token" in caplog.text


class TestUrlHelpers:

    def test_with_state_keeps_path_and_query(self):
        state = default_state()
        url = with_state("https://example.test/editor?theme=dark", state)
        assert url.startswith("https://example.test/editor?theme=dark#")
        assert state_from_url(url) == state

    def test_with_state_replaces_fragment(self):
        state = default_state()
        url = with_state("https://example.test/#stale", state)
        assert "stale" not in url
        assert state_from_url(url) == state

    def test_no_fragment(self):
        assert state_from_url("https://example.test/editor") is None

    def test_bad_fragment(self):
        assert state_from_url("https://example.test/editor#garbage!") is None
