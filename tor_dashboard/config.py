"""
Configuration: sheet export URL, column registry, display tables.

FIELD_REGISTRY maps each semantic field key to the header substring used to
locate its column and the positional index used when the header does not
contain that substring.
"""

import os

# ---------------------------------------------------------------------------
# Source: published Google Sheets CSV export (no authentication)
# ---------------------------------------------------------------------------
CSV_URL = os.environ.get(
    "TOR_CSV_URL",
    "https://docs.google.com/spreadsheets/d/e/"
    "2PACX-1vR9zW7vYbeCkhZ1AjDL8vNyM6Usfr-OpHak6EbODijojb_S7JxJTHMYT7DaSJiXRcQ-AsCff48QEVX-"
    "/pub?output=csv",
)
REQUEST_TIMEOUT = float(os.environ.get("TOR_REQUEST_TIMEOUT", "20"))

UNIT_NAME = "TOR"

# ---------------------------------------------------------------------------
# Column registry
# ---------------------------------------------------------------------------
# The timestamp always lives in the first column.
TIMESTAMP_COLUMN = 0

# match: case-insensitive substring searched in the header row
# fallback: 0-based column index used when no header cell matches
FIELD_REGISTRY: dict[str, dict] = {
    "PA": {"match": "PA", "fallback": 8},
    "TC": {"match": "TC", "fallback": 9},
    "COP": {"match": "COP", "fallback": 10},
    "BO": {"match": "BO E ACIDENTES", "fallback": 11},
    "ACIDENTES": {"match": "BO E ACIDENTES", "fallback": 11},
    "AUTOS": {"match": "AUTOS DE INFRAÇÕES", "fallback": 12},
    "ARVC": {"match": "ARVC", "fallback": 13},
    "RETENCOES": {"match": "RETENÇÕES DE CLA", "fallback": 14},
    "RECUSA_IGP": {"match": "RECUSA IGP", "fallback": 15},
    "VEIC_ABORDADOS": {"match": "VEÍCULOS ABORDADOS", "fallback": 16},
    "PESS_ABORDADAS": {"match": "PESSOAS ABORDADOS", "fallback": 17},
    "MANDADOS": {"match": "CUMPRIMENTOS DE MANDADOS", "fallback": 18},
    "PESS_DETIDAS": {"match": "PESSOAS DETIDAS", "fallback": 19},
    "MACONHA": {"match": "MACONHA", "fallback": 20},
    "HAXIXE": {"match": "HAXIXE", "fallback": 21},
    "SKANK": {"match": "SKANK", "fallback": 22},
    "COCAINA": {"match": "COCAÍNA", "fallback": 23},
    "ECSTASY": {"match": "ECSTASY", "fallback": 24},
    "LSD": {"match": "LSD", "fallback": 25},
    "MDMA": {"match": "MDMA", "fallback": 26},
    "CRACK": {"match": "CRACK", "fallback": 27},
    "OUTRAS_DROGAS": {"match": "OUTRAS DROGAS", "fallback": 28},
    "ARMAS": {"match": "ARMAS", "fallback": 30},
    "MUNICOES": {"match": "MUNIÇÕES", "fallback": 31},
    "VEIC_RECUP": {"match": "VEÍCULOS RECUPERADOS", "fallback": 32},
    "DINHEIRO": {"match": "DINHEIRO - R$", "fallback": 33},
    "MOEDA_ESTRANG": {"match": "MOEDA ESTRANGEIRA", "fallback": 34},
    "MERC_ILEGAIS": {"match": "MERCADORIAS ILEGAIS", "fallback": 36},
    "CIGARROS": {"match": "CIGARROS", "fallback": 37},
    "MULTA_ADM": {"match": "MULTA ADMINISTRATIVA", "fallback": 39},
}

# Identification columns used by the report listing and odometer lookup
TEAM_COLUMN = 1
VTR_MATCHES = ("VTR UTILIZADA", "VTR")
VTR_FALLBACK = 2
KM_MATCHES = ("KM FINAL", "QUILOMETRAGEM FINAL")
KM_FALLBACK = 3

# ---------------------------------------------------------------------------
# Display tables
# ---------------------------------------------------------------------------
MONTH_LABELS = [
    "JAN", "FEV", "MAR", "ABR", "MAI", "JUN",
    "JUL", "AGO", "SET", "OUT", "NOV", "DEZ",
]

# (field key, label, icon)
DRUG_METRICS: list[tuple[str, str, str]] = [
    ("MACONHA", "Maconha - G", "psychiatry"),
    ("SKANK", "Skank - G", "spa"),
    ("HAXIXE", "Haxixe - G", "grain"),
    ("COCAINA", "Cocaína - G", "science"),
    ("LSD", "LSD - Unid.", "mood"),
    ("CRACK", "Crack - G", "layers"),
    ("ECSTASY", "Ecstasy - Unid.", "pill"),
]

# (field key, label, icon, custom icon)
SEIZURE_METRICS: list[tuple[str, str, str, str | None]] = [
    ("ARMAS", "Armas", "swords", "/armas-icon.png"),
    ("MUNICOES", "Munições", "target", "/municoes-icon.png"),
    ("VEIC_RECUP", "Veículos Recup.", "local_shipping", None),
    ("DINHEIRO", "Dinheiro (R$)", "payments", None),
    ("MERC_ILEGAIS", "Mercadorias (R$)", "inventory_2", None),
    ("CIGARROS", "Cigarros (Maços)", "smoking_rooms", None),
]

# (field key, name, color)
BOLETIM_CATEGORIES: list[tuple[str, str, str]] = [
    ("PA", "PA", "#f59e0b"),
    ("TC", "TC", "#ef4444"),
    ("COP", "COP", "#8b5cf6"),
    ("BO", "BO", "#10b981"),
]

# summary counter name -> field key
SUMMARY_FIELDS: dict[str, str] = {
    "prisoes": "PESS_DETIDAS",
    "mandados": "MANDADOS",
    "autos": "AUTOS",
    "abordagens": "PESS_ABORDADAS",
    "abordagens_veic": "VEIC_ABORDADOS",
    "pessoas_detidas": "PESS_DETIDAS",
    "acidentes": "ACIDENTES",
    "arvc": "ARVC",
    "retencoes": "RETENCOES",
    "recusa_igp": "RECUSA_IGP",
    "multa_adm": "MULTA_ADM",
    "moeda_estrangeira": "MOEDA_ESTRANG",
}

SUMMARY_TREND_FIELDS: dict[str, str] = {
    "prisoes": "PESS_DETIDAS",
    "abordagens": "PESS_ABORDADAS",
    "veic": "VEIC_RECUP",
}

# Boletins summed as the timeline volume metric
VOLUME_FIELDS = ["PA", "TC", "COP", "BO"]

REPORT_DRUG_FIELDS = [
    "MACONHA", "HAXIXE", "SKANK", "COCAINA", "ECSTASY",
    "LSD", "MDMA", "CRACK", "OUTRAS_DROGAS",
]
REPORT_SEIZURE_FIELDS = [
    "ARMAS", "MUNICOES", "VEIC_RECUP", "DINHEIRO",
    "MOEDA_ESTRANG", "MERC_ILEGAIS", "CIGARROS", "MULTA_ADM",
]

REPORT_DEFAULT_TEAM = "Equipe TOR"
REPORT_DEFAULT_VTR = "VTR"
REPORT_DEFAULT_KM = "0"
REPORT_STATUS = "Concluído"
