"""Builders for small sheet exports on the live header layout."""

from tor_dashboard.simulator import SHEET_HEADER


def _quote(cell: str) -> str:
    if any(c in cell for c in ',"\n'):
        return '"' + cell.replace('"', '""') + '"'
    return cell


def make_row(timestamp: str, cells: dict[str, str] | None = None) -> list[str]:
    """Build a data row from {header text: value}."""
    row = [""] * len(SHEET_HEADER)
    row[0] = timestamp
    for name, value in (cells or {}).items():
        row[SHEET_HEADER.index(name)] = value
    return row


def make_csv(rows: list[list[str]], header: list[str] = SHEET_HEADER) -> str:
    lines = [",".join(_quote(c) for c in header)]
    lines += [",".join(_quote(c) for c in row) for row in rows]
    return "\r\n".join(lines) + "\r\n"


CURRENT_ROW = make_row("05/03/2024 08:15:00", {
    "EQUIPE": "ALFA",
    "VTR UTILIZADA": "TOR 0003",
    "KM FINAL": "15.200 KM",
    "PA": "2",
    "TC": "1",
    "COP": "1",
    "BO E ACIDENTES": "1",
    "PESSOAS DETIDAS": "3",
    "MACONHA (EM GRAMAS)": "1.500,50",
    "COCAÍNA (EM GRAMAS)": "12.5",
    "ARMAS": "1",
    "DINHEIRO - R$": "R$ 2.000,00",
})

PRIOR_ROW = make_row("10/03/2023 19:40:00", {
    "EQUIPE": "BRAVO",
    "VTR UTILIZADA": "TOR 0003",
    "KM FINAL": "9.800",
    "PA": "1",
    "PESSOAS DETIDAS": "2",
    "MACONHA (EM GRAMAS)": "500",
    "ARMAS": "2",
})

OUTSIDE_ROW = make_row("20/05/2024 07:00:00", {
    "EQUIPE": "CHARLIE",
    "VTR UTILIZADA": "TOR 0001",
    "KM FINAL": "30000",
    "PA": "7",
    "MACONHA (EM GRAMAS)": "900",
    "DINHEIRO - R$": "Sgt. Moraes",
})
