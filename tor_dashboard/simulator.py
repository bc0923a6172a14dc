"""
Simulated sheet export for the TOR activity dashboard.

Generates a CSV with the same header layout as the live activity form,
including the formatting noise found in real submissions (Brazilian and
US number formats, currency prefixes, text typed into numeric columns).
All values are synthetic.
"""

import numpy as np
import pandas as pd

# ---------------------------------------------------------------------------
# Sheet layout: column positions match the registry fallbacks
# ---------------------------------------------------------------------------
SHEET_HEADER = [
    "Carimbo de data/hora",
    "EQUIPE",
    "VTR UTILIZADA",
    "KM FINAL",
    "KM INICIAL",
    "COMANDANTE",
    "MOTORISTA",
    "OBSERVAÇÕES",
    "PA",
    "TC",
    "COP",
    "BO E ACIDENTES",
    "AUTOS DE INFRAÇÕES",
    "ARVC",
    "RETENÇÕES DE CLA",
    "RECUSA IGP",
    "VEÍCULOS ABORDADOS",
    "PESSOAS ABORDADOS",
    "CUMPRIMENTOS DE MANDADOS",
    "PESSOAS DETIDAS",
    "MACONHA (EM GRAMAS)",
    "HAXIXE (EM GRAMAS)",
    "SKANK (EM GRAMAS)",
    "COCAÍNA (EM GRAMAS)",
    "ECSTASY (UNIDADES)",
    "LSD (UNIDADES)",
    "MDMA (EM GRAMAS)",
    "CRACK (EM GRAMAS)",
    "OUTRAS DROGAS",
    "DESCRIÇÃO OUTRAS DROGAS",
    "ARMAS",
    "MUNIÇÕES",
    "VEÍCULOS RECUPERADOS",
    "DINHEIRO - R$",
    "MOEDA ESTRANGEIRA",
    "TIPO DE MOEDA",
    "MERCADORIAS ILEGAIS - R$",
    "CIGARROS (MAÇOS)",
    "OUTROS MATERIAIS",
    "MULTA ADMINISTRATIVA",
]

_TEAMS = ["ALFA", "BRAVO", "CHARLIE", "DELTA"]
_VEHICLES = ["TOR 0001", "TOR 0002", "TOR 0003", "TOR 0004"]
_GARBAGE = ["Sem apreensão", "ver obs", "Sgt. Moraes", "N/A"]

# Poisson mean per shift for counter columns
_COUNTER_RATES = {
    "PA": 0.6,
    "TC": 0.8,
    "COP": 0.3,
    "BO E ACIDENTES": 0.5,
    "AUTOS DE INFRAÇÕES": 3.0,
    "ARVC": 0.2,
    "RETENÇÕES DE CLA": 0.7,
    "RECUSA IGP": 0.1,
    "VEÍCULOS ABORDADOS": 12.0,
    "PESSOAS ABORDADOS": 18.0,
    "CUMPRIMENTOS DE MANDADOS": 0.2,
    "PESSOAS DETIDAS": 0.6,
    "ECSTASY (UNIDADES)": 0.4,
    "LSD (UNIDADES)": 0.2,
    "ARMAS": 0.1,
    "MUNIÇÕES": 0.5,
    "VEÍCULOS RECUPERADOS": 0.1,
    "CIGARROS (MAÇOS)": 2.0,
    "MULTA ADMINISTRATIVA": 0.3,
}

# (probability of a seizure on a shift, mean grams when it happens)
_GRAM_COLUMNS = {
    "MACONHA (EM GRAMAS)": (0.35, 180.0),
    "HAXIXE (EM GRAMAS)": (0.05, 40.0),
    "SKANK (EM GRAMAS)": (0.10, 60.0),
    "COCAÍNA (EM GRAMAS)": (0.20, 45.0),
    "MDMA (EM GRAMAS)": (0.03, 10.0),
    "CRACK (EM GRAMAS)": (0.15, 25.0),
}

_MONEY_COLUMNS = {
    "DINHEIRO - R$": (0.15, 1800.0),
    "MERCADORIAS ILEGAIS - R$": (0.05, 6500.0),
}


def _br_number(value: float) -> str:
    """1500.5 -> "1.500,50"."""
    text = f"{value:,.2f}"
    return text.translate(str.maketrans({",": ".", ".": ","}))


def _noisy_quantity(rng: np.random.Generator, value: float) -> str:
    """Render a quantity the way different operators type it."""
    style = rng.integers(0, 4)
    if style == 0:
        return str(int(round(value)))
    if style == 1:
        return _br_number(value)
    if style == 2:
        return f"{value:.1f}"
    return f"{int(round(value)):,}".replace(",", ".")


def generate_activity_csv(
    start: str = "2023-01-01",
    n_days: int = 730,
    shifts_per_day: int = 2,
    seed: int = 42,
    garbage_rate: float = 0.01,
) -> str:
    """Generate a simulated sheet export covering `n_days` from `start`.

    Returns
    -------
    CSV text with a header row and `n_days * shifts_per_day` data rows.
    """
    rng = np.random.default_rng(seed)
    days = pd.date_range(start, periods=n_days, freq="D")
    odometer = {vtr: 50_000 + 10_000 * i for i, vtr in enumerate(_VEHICLES)}
    rows = []

    for day in days:
        for shift in range(shifts_per_day):
            vtr = _VEHICLES[rng.integers(0, len(_VEHICLES))]
            km_start = odometer[vtr]
            odometer[vtr] += int(rng.integers(40, 220))

            row = dict.fromkeys(SHEET_HEADER, "")
            hour = 7 + 12 * shift
            row["Carimbo de data/hora"] = f"{day:%d/%m/%Y} {hour:02d}:{rng.integers(0, 60):02d}:00"
            row["EQUIPE"] = _TEAMS[rng.integers(0, len(_TEAMS))]
            row["VTR UTILIZADA"] = vtr
            row["KM FINAL"] = f"{odometer[vtr]} KM"
            row["KM INICIAL"] = str(km_start)

            for col, rate in _COUNTER_RATES.items():
                count = int(rng.poisson(rate))
                row[col] = str(count) if count else ""

            for col, (p, mean) in _GRAM_COLUMNS.items():
                if rng.random() < p:
                    row[col] = _noisy_quantity(rng, rng.exponential(mean))

            for col, (p, mean) in _MONEY_COLUMNS.items():
                if rng.random() < p:
                    row[col] = "R$ " + _br_number(rng.exponential(mean))

            if rng.random() < garbage_rate:
                col = list(_GRAM_COLUMNS)[rng.integers(0, len(_GRAM_COLUMNS))]
                row[col] = _GARBAGE[rng.integers(0, len(_GARBAGE))]

            rows.append(row)

    df = pd.DataFrame(rows, columns=SHEET_HEADER)
    return df.to_csv(index=False, lineterminator="\n")
