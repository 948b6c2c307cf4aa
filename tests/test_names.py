"""Tests for the CSS named color table."""

import pytest

from huekit.names import NAMES, hex_to_name, name_to_hex


class TestNames:
    """Test name lookups in both directions."""

    @pytest.mark.unit
    def test_table_has_every_css_name(self):
        assert len(NAMES) == 148
        assert NAMES["rebeccapurple"] == "#663399"

    @pytest.mark.unit
    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            NAMES["notacolor"] = "#123456"

    @pytest.mark.unit
    def test_name_to_hex(self):
        assert name_to_hex("red") == "#ff0000"
        assert name_to_hex("notacolor") is None

    @pytest.mark.unit
    def test_hex_to_name(self):
        assert hex_to_name("#ff0000") == "red"
        assert hex_to_name("#123456") is None

    @pytest.mark.unit
    def test_shared_values_resolve_to_first_name(self):
        assert hex_to_name("#00ffff") == "aqua"
        assert hex_to_name("#ff00ff") == "fuchsia"
        assert hex_to_name("#808080") == "gray"
