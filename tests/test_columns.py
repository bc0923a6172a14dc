"""Tests for header-to-column resolution."""

import pytest

from tor_dashboard.columns import (
    FIELD_SPECS,
    FieldSpec,
    find_column,
    normalise_header,
    resolve_columns,
)
from tor_dashboard.config import FIELD_REGISTRY
from tor_dashboard.simulator import SHEET_HEADER


def test_live_layout_resolves_to_registry_positions():
    cols = resolve_columns(SHEET_HEADER)
    for key, spec in FIELD_REGISTRY.items():
        assert cols[key] == spec["fallback"], key
    assert cols.fallbacks == frozenset()


def test_match_is_case_insensitive_and_trimmed():
    specs = [FieldSpec("MACONHA", "MACONHA", 20)]
    cols = resolve_columns(["data", "  Maconha (em gramas) "], specs)
    assert cols["MACONHA"] == 1


def test_missing_header_uses_fallback():
    specs = [FieldSpec("CRACK", "CRACK", 27), FieldSpec("LSD", "LSD", 25)]
    cols = resolve_columns(["data", "LSD"], specs)
    assert cols["CRACK"] == 27
    assert cols["LSD"] == 1
    assert cols.fallbacks == frozenset({"CRACK"})


def test_first_matching_cell_wins():
    specs = [FieldSpec("OUTRAS_DROGAS", "OUTRAS DROGAS", 28)]
    cols = resolve_columns(["OUTRAS DROGAS", "DESCRIÇÃO OUTRAS DROGAS"], specs)
    assert cols["OUTRAS_DROGAS"] == 0


def test_fields_may_share_a_column():
    cols = resolve_columns(SHEET_HEADER)
    assert cols["BO"] == cols["ACIDENTES"] == 11


def test_columns_move_with_header():
    header = list(SHEET_HEADER)
    header[20], header[21] = header[21], header[20]
    cols = resolve_columns(header)
    assert cols["MACONHA"] == 21
    assert cols["HAXIXE"] == 20


def test_empty_header_falls_back_everywhere():
    cols = resolve_columns([])
    assert len(cols) == len(FIELD_SPECS)
    assert cols.fallbacks == frozenset(FIELD_REGISTRY)


def test_column_map_is_read_only():
    cols = resolve_columns(SHEET_HEADER)
    with pytest.raises(TypeError):
        cols["PA"] = 0
    with pytest.raises(TypeError):
        del cols["PA"]
    with pytest.raises(AttributeError):
        cols.fallbacks = frozenset({"PA"})


def test_find_column_any_candidate():
    header = normalise_header(["Data", "Viatura (VTR)", "Quilometragem final"])
    assert find_column(header, ["VTR UTILIZADA", "VTR"], 2) == 1
    assert find_column(header, ["KM FINAL", "QUILOMETRAGEM FINAL"], 3) == 2
    assert find_column(header, ["EQUIPE"], 9) == 9
